"""3x3 matrices."""

from __future__ import annotations

from gfxkit.mat2 import _SquareMatrix
from gfxkit.vector import Vector


class Mat3(_SquareMatrix):
    """A 3x3 matrix."""

    __slots__ = ()
    DIM = 3

    @classmethod
    def identity(cls) -> Mat3:
        """Return the 3x3 identity matrix."""
        return super().identity()

    @classmethod
    def diagonal(cls, d: float) -> Mat3:
        """Return the matrix with ``d`` on the diagonal and zeros elsewhere."""
        return cls._build(lambda i, j: d if i == j else 0.0)

    @staticmethod
    def outer_product(u: Vector, v: Vector | None = None) -> Mat3:
        """Return the outer product of ``u`` and ``v`` (``u`` with itself by default)."""
        if v is None:
            v = u
        return Mat3._build(lambda i, j: u[i] * v[j])

    def row(self, i: int) -> Vector:
        """Return row ``i``."""
        return super().row(i)

    def col(self, j: int) -> Vector:
        """Return column ``j``."""
        return super().col(j)

    def det(self) -> float:
        """Return the determinant."""
        return self[0] @ self[1].cross(self[2])

    def trace(self) -> float:
        """Return the sum of the diagonal entries."""
        return super().trace()

    def transpose(self) -> Mat3:
        """Return the transposed matrix."""
        return super().transpose()


def diag(v: Vector) -> Mat3:
    """Return the diagonal matrix whose diagonal is ``v``."""
    return Mat3._build(lambda i, j: v[i] if i == j else 0.0)


def adjoint(m: Mat3) -> Mat3:
    """Return the matrix of cofactors of ``m``."""
    return Mat3(m[1].cross(m[2]), m[2].cross(m[0]), m[0].cross(m[1]))


def invert(m: Mat3) -> Mat3:
    """Return the inverse of ``m``; raise ZeroDivisionError if it is singular."""
    a = adjoint(m)
    d = a[0] @ m[0]
    if d == 0.0:
        raise ZeroDivisionError("matrix is singular")
    return a.transpose() / d


def row_extend(v: Vector) -> Mat3:
    """Return the matrix whose three rows are all ``v``."""
    return Mat3(v, v, v)