"""Conversions between RGB, HSV, YIQ and CIE XYZ colour spaces."""

from __future__ import annotations

import math

from gfxkit.mat3 import Mat3
from gfxkit.vector import Vector

# Luminance weights for linear RGB; NTSC weights assume gamma-2.2 RGB.
HAEBERLI_FACTOR = Vector(0.3086, 0.6094, 0.0820)
NTSC_FACTOR = Vector(0.299, 0.587, 0.114)

_M_YIQ = Mat3(
    NTSC_FACTOR,
    (0.596, -0.275, -0.321),
    (0.212, -0.523, 0.311),
)

_M_RGB = Mat3(
    (3.240479, -1.537150, -0.498535),
    (-0.969256, 1.875992, 0.041556),
    (0.055648, -0.204043, 1.057311),
)

_M_XYZ = Mat3(
    (0.412453, 0.357580, 0.180423),
    (0.212671, 0.715160, 0.072169),
    (0.019334, 0.119193, 0.950227),
)


def _vec3(c) -> Vector:
    return c if isinstance(c, Vector) else Vector(*c)


def rgb_to_hsv(rgb) -> Vector:
    """Return ``(h, s, v)`` with hue in degrees; hue is -1 for grays."""
    r, g, b = _vec3(rgb)
    hi = max(r, g, b)
    lo = min(r, g, b)
    delta = hi - lo

    h = -1.0
    v = hi
    s = delta / hi if hi != 0 else 0.0

    if s != 0:
        if r == hi:
            h = (g - b) / delta
        elif g == hi:
            h = 2 + (b - r) / delta
        else:
            h = 4 + (r - g) / delta
        h *= 60
        if h < 0:
            h += 360
    return Vector(h, s, v)


def hsv_to_rgb(hsv) -> Vector:
    """Return the RGB colour for ``(h, s, v)`` with hue in degrees."""
    h, s, v = _vec3(hsv)
    if s == 0:
        return Vector(v, v, v)

    if h == 360.0:
        h = 0.0
    h /= 60.0
    i = math.floor(h)
    f = h - i

    p = v * (1 - s)
    q = v * (1 - s * f)
    t = v * (1 - s * (1 - f))

    sectors = {
        0: (v, t, p),
        1: (q, v, p),
        2: (p, v, t),
        3: (p, q, v),
        4: (t, p, v),
    }
    return Vector(*sectors.get(i, (v, p, q)))


def rgb_luminance_ntsc(rgb) -> float:
    """Return the luminance using the NTSC weights."""
    return _vec3(rgb) @ NTSC_FACTOR


def rgb_luminance_alt(rgb) -> float:
    """Return the luminance using weights suited to linear RGB."""
    return _vec3(rgb) @ HAEBERLI_FACTOR


def rgb_to_yiq(rgb) -> Vector:
    """Return the YIQ colour for ``rgb``."""
    return _M_YIQ @ _vec3(rgb)


def rgb_to_xyz(rgb) -> Vector:
    """Return the CIE XYZ colour for linear ``rgb``."""
    return _M_XYZ @ _vec3(rgb)


def xyz_to_rgb(xyz) -> Vector:
    """Return the linear RGB colour for CIE ``xyz``."""
    return _M_RGB @ _vec3(xyz)


def xyz_chromaticity(xyz) -> Vector:
    """Return the ``(x, y)`` chromaticity coordinates of ``xyz``."""
    x, y, z = _vec3(xyz)
    w = x + y + z
    return Vector(x / w, y / w)