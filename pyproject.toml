[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gfxkit"
version = "0.1.0"
description = "Small-dimension linear algebra, quaternions, colour conversion, rasters and arcball rotation control for graphics programs"
requires-python = ">=3.10"
dependencies = []
keywords = ["graphics", "vector", "matrix", "quaternion", "arcball", "color", "raster", "geometry"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["gfxkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
