"""Vectors, matrices, quaternions, geometry, colour conversion, rasters and arcball control for graphics."""

__version__ = "0.1.0"