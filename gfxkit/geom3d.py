"""Triangle, bounding-box and tetrahedron helpers."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from gfxkit.mat4 import Mat4
from gfxkit.vector import Vector

_FOUR_ROOT3 = 6.928203230275509


def _vec(v) -> Vector:
    return v if isinstance(v, Vector) else Vector(*v)


def triangle_raw_normal(v1, v2, v3) -> Vector:
    """Return the unnormalized normal ``(v2-v1) x (v3-v1)``."""
    v1, v2, v3 = _vec(v1), _vec(v2), _vec(v3)
    return (v2 - v1).cross(v3 - v1)


def triangle_area(v1, v2, v3) -> float:
    """Return the area of the triangle."""
    return 0.5 * triangle_raw_normal(v1, v2, v3).norm()


def triangle_normal(v1, v2, v3) -> Vector:
    """Return the unit normal of the triangle."""
    return triangle_raw_normal(v1, v2, v3).unitized()


def _plane(n: Vector, v1) -> Vector:
    return Vector(*n, -(n @ _vec(v1)))


def triangle_plane(v1, v2, v3) -> Vector:
    """Return the plane ``(a, b, c, d)`` through the triangle, with a unit normal."""
    return _plane(triangle_normal(v1, v2, v3), v1)


def triangle_raw_plane(v1, v2, v3) -> Vector:
    """Return the plane through the triangle, with an unnormalized normal."""
    return _plane(triangle_raw_normal(v1, v2, v3), v1)


def triangle_compactness(v1, v2, v3) -> float:
    """Return the shape quality of the triangle: 1 for equilateral, 0 for degenerate."""
    v1, v2, v3 = _vec(v1), _vec(v2), _vec(v3)
    perimeter2 = (v2 - v1).norm2() + (v3 - v2).norm2() + (v1 - v3).norm2()
    return _FOUR_ROOT3 * triangle_area(v1, v2, v3) / perimeter2


def update_bbox(lo, hi, items: Iterable) -> tuple[Vector, Vector]:
    """Return the box ``(lo, hi)`` grown to contain every point in ``items``."""
    lo_vals, hi_vals = list(_vec(lo)), list(_vec(hi))
    for item in items:
        for j, x in enumerate(_vec(item)):
            lo_vals[j] = min(lo_vals[j], x)
            hi_vals[j] = max(hi_vals[j], x)
    return Vector(*lo_vals), Vector(*hi_vals)


def compute_bbox(items: Sequence) -> tuple[Vector, Vector]:
    """Return the smallest axis-aligned box containing ``items``."""
    if not items:
        raise ValueError("cannot bound an empty set of points")
    first = _vec(items[0])
    return update_bbox(first, first, items)


def is_inside_bbox(p, lo, hi) -> bool:
    """Return whether ``p`` lies in the closed box ``[lo, hi]``."""
    return all(a <= x <= b for x, a, b in zip(_vec(p), _vec(lo), _vec(hi)))


def clamp_to_bbox(p, lo, hi) -> Vector:
    """Return ``p`` moved to the nearest point of the box ``[lo, hi]``."""
    return Vector(
        *(a if x < a else b if x > b else x for x, a, b in zip(_vec(p), _vec(lo), _vec(hi)))
    )


def tetrahedron_determinant(v0, v1, v2, v3) -> float:
    """Return the determinant of the homogeneous vertex matrix (six signed volumes)."""
    return Mat4(*((*_vec(v), 1.0) for v in (v0, v1, v2, v3))).det()


def tetrahedron_volume(v0, v1, v2, v3) -> float:
    """Return the volume of the tetrahedron."""
    return abs(tetrahedron_determinant(v0, v1, v2, v3) / 6)