"""4x4 matrices and standard transformation matrices."""

from __future__ import annotations

import math

from gfxkit.mat2 import _SquareMatrix
from gfxkit.mat3 import Mat3
from gfxkit.vector import Vector


class Mat4(_SquareMatrix):
    """A 4x4 matrix."""

    __slots__ = ()
    DIM = 4

    @classmethod
    def identity(cls) -> Mat4:
        """Return the 4x4 identity matrix."""
        return super().identity()

    def row(self, i: int) -> Vector:
        """Return row ``i``."""
        return super().row(i)

    def col(self, j: int) -> Vector:
        """Return column ``j``."""
        return super().col(j)

    def transpose(self) -> Mat4:
        """Return the transposed matrix."""
        return super().transpose()

    def det(self) -> float:
        """Return the determinant."""
        return _cross4(self[1], self[2], self[3]) @ self[0]


def _cross4(a: Vector, b: Vector, c: Vector) -> Vector:
    """Return the vector w with w @ x == det of the rows (x, a, b, c)."""

    def minor(j: int) -> float:
        keep = [k for k in range(4) if k != j]
        return Mat3(*([r[k] for k in keep] for r in (a, b, c))).det()

    return Vector(*((-1) ** j * minor(j) for j in range(4)))


def translation_matrix(d) -> Mat4:
    """Return the homogeneous translation by ``d``."""
    return Mat4(
        (1, 0, 0, d[0]),
        (0, 1, 0, d[1]),
        (0, 0, 1, d[2]),
        (0, 0, 0, 1),
    )


def scaling_matrix(s) -> Mat4:
    """Return the homogeneous scaling by ``s``."""
    return Mat4(
        (s[0], 0, 0, 0),
        (0, s[1], 0, 0),
        (0, 0, s[2], 0),
        (0, 0, 0, 1),
    )


def rotation_matrix_rad(theta: float, axis) -> Mat4:
    """Return the rotation by ``theta`` radians about the unit vector ``axis``."""
    c, s = math.cos(theta), math.sin(theta)
    x, y, z = axis[0], axis[1], axis[2]
    xx, yy, zz = x * x, y * y, z * z
    xy, yz, xz = x * y, y * z, x * z
    xs, ys, zs = x * s, y * s, z * s
    return Mat4(
        (xx * (1 - c) + c, xy * (1 - c) - zs, xz * (1 - c) + ys, 0),
        (xy * (1 - c) + zs, yy * (1 - c) + c, yz * (1 - c) - xs, 0),
        (xz * (1 - c) - ys, yz * (1 - c) + xs, zz * (1 - c) + c, 0),
        (0, 0, 0, 1),
    )


def perspective_matrix(fovy: float, aspect: float, zmin: float, zmax: float) -> Mat4:
    """Return a perspective projection; ``fovy`` is in degrees.

    A ``zmax`` of zero puts the far plane at infinity.
    """
    if zmax == 0.0:
        a = b = 1.0
    else:
        a = (zmax + zmin) / (zmin - zmax)
        b = (2 * zmax * zmin) / (zmin - zmax)
    f = 1.0 / math.tan(fovy * math.pi / 180.0 / 2.0)
    return Mat4(
        (f / aspect, 0, 0, 0),
        (0, f, 0, 0),
        (0, 0, a, b),
        (0, 0, -1, 0),
    )


def lookat_matrix(eye, at, up) -> Mat4:
    """Return the viewing transform from ``eye`` towards ``at`` with ``up`` upwards."""
    eye, at, up = Vector(*eye), Vector(*at), Vector(*up)
    up = up.unitized()
    f = (at - eye).unitized()
    s = f.cross(up)
    u = s.cross(f)
    s = s.unitized()
    u = u.unitized()
    m = Mat4((*s, 0), (*u, 0), (*(-f), 0), (0, 0, 0, 1))
    return m @ translation_matrix(-eye)


def viewport_matrix(w: float, h: float) -> Mat4:
    """Map normalized device coordinates to a ``w`` by ``h`` pixel viewport."""
    return scaling_matrix((w / 2.0, -h / 2.0, 1)) @ translation_matrix((1, -1, 0))


def adjoint(m: Mat4) -> Mat4:
    """Return the matrix of cofactors of ``m``."""
    m0, m1, m2, m3 = m
    return Mat4(
        _cross4(m1, m2, m3),
        _cross4(-m0, m2, m3),
        _cross4(m0, m1, m3),
        _cross4(-m0, m1, m2),
    )


def invert_cramer(m: Mat4) -> Mat4:
    """Invert ``m`` by Cramer's rule; raise ZeroDivisionError if it is singular."""
    a = adjoint(m)
    d = a[0] @ m[0]
    if d == 0.0:
        raise ZeroDivisionError("matrix is singular")
    return a.transpose() / d


def invert(m: Mat4) -> Mat4:
    """Invert ``m`` by Gaussian elimination with partial pivoting.

    Raises ZeroDivisionError if no nonzero pivot can be found.
    """
    a = [list(row) for row in m]
    b = [list(row) for row in Mat4.identity()]

    for i in range(4):
        pivot_row = max(range(i, 4), key=lambda k, col=i: abs(a[k][col]))
        if abs(a[pivot_row][i]) <= 0.0:
            raise ZeroDivisionError("matrix is singular")
        if pivot_row != i:
            a[i], a[pivot_row] = a[pivot_row], a[i]
            b[i], b[pivot_row] = b[pivot_row], b[i]
        pivot = a[i][i]
        a[i] = [x / pivot for x in a[i]]
        b[i] = [x / pivot for x in b[i]]
        for j in range(i + 1, 4):
            t = a[j][i]
            a[j] = [x - y * t for x, y in zip(a[j], a[i])]
            b[j] = [x - y * t for x, y in zip(b[j], b[i])]

    for i in range(3, 0, -1):
        for j in range(i):
            t = a[j][i]
            b[j] = [x - y * t for x, y in zip(b[j], b[i])]

    return Mat4(*b)