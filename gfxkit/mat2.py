"""2x2 matrices, plus the row-based matrix machinery shared by all sizes."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable, Iterator
from numbers import Real

from gfxkit.vector import Vector

_FEQ_EPS = 1e-6


class _SquareMatrix:
    """Immutable square matrix stored as a tuple of row vectors."""

    __slots__ = ("_rows",)
    DIM = 0

    def __init__(self, *rows: Iterable[float]) -> None:
        n = self.DIM
        if not rows:
            rows = ((0.0,) * n,) * n
        if len(rows) != n:
            raise ValueError(
                f"{type(self).__name__} needs {n} rows, got {len(rows)}"
            )
        vecs = tuple(r if isinstance(r, Vector) else Vector(*r) for r in rows)
        if any(len(v) != n for v in vecs):
            raise ValueError(f"{type(self).__name__} rows must have {n} entries")
        self._rows = vecs

    @classmethod
    def _build(cls, entry: Callable[[int, int], float]):
        n = cls.DIM
        return cls(*(tuple(entry(i, j) for j in range(n)) for i in range(n)))

    @classmethod
    def identity(cls):
        """Return the identity matrix."""
        return cls._build(lambda i, j: 1.0 if i == j else 0.0)

    def __getitem__(self, key):
        if isinstance(key, tuple):
            i, j = key
            return self._rows[i][j]
        return self._rows[key]

    def __iter__(self) -> Iterator[Vector]:
        return iter(self._rows)

    def __len__(self) -> int:
        return self.DIM

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._rows == other._rows

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._rows))

    def __repr__(self) -> str:
        rows = ", ".join(repr(tuple(r)) for r in self._rows)
        return f"{type(self).__name__}({rows})"

    def __str__(self) -> str:
        return "\n".join(str(r) for r in self._rows)

    def row(self, i: int) -> Vector:
        """Return row ``i``."""
        return self._rows[i]

    def col(self, j: int) -> Vector:
        """Return column ``j``."""
        return Vector(*(r[j] for r in self._rows))

    def transpose(self):
        """Return the transposed matrix."""
        return type(self)(*(self.col(j) for j in range(self.DIM)))

    def trace(self) -> float:
        """Return the sum of the diagonal entries."""
        return sum(r[i] for i, r in enumerate(self._rows))

    def __add__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return type(self)(*(a + b for a, b in zip(self, other)))

    def __sub__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return type(self)(*(a - b for a, b in zip(self, other)))

    def __neg__(self):
        return type(self)(*(-r for r in self))

    def __mul__(self, scalar):
        if not isinstance(scalar, Real):
            return NotImplemented
        return type(self)(*(r * scalar for r in self))

    __rmul__ = __mul__

    def __truediv__(self, scalar):
        if not isinstance(scalar, Real):
            return NotImplemented
        return type(self)(*(r / scalar for r in self))

    def __matmul__(self, other):
        if isinstance(other, Vector):
            return Vector(*(r @ other for r in self._rows))
        if type(other) is type(self):
            cols = [other.col(j) for j in range(self.DIM)]
            return type(self)(*(tuple(r @ c for c in cols) for r in self._rows))
        return NotImplemented


class Mat2(_SquareMatrix):
    """A 2x2 matrix."""

    __slots__ = ()
    DIM = 2

    @classmethod
    def identity(cls) -> Mat2:
        """Return the 2x2 identity matrix."""
        return super().identity()

    @classmethod
    def diag(cls, d: float) -> Mat2:
        """Return the matrix with ``d`` on the diagonal and zeros elsewhere."""
        return cls((d, 0.0), (0.0, d))

    def row(self, i: int) -> Vector:
        """Return row ``i``."""
        return super().row(i)

    def col(self, j: int) -> Vector:
        """Return column ``j``."""
        return super().col(j)

    def det(self) -> float:
        """Return the determinant."""
        return self[0, 0] * self[1, 1] - self[0, 1] * self[1, 0]

    def trace(self) -> float:
        """Return the sum of the diagonal entries."""
        return super().trace()

    def transpose(self) -> Mat2:
        """Return the transposed matrix."""
        return super().transpose()


def invert(m: Mat2) -> Mat2:
    """Return the inverse of ``m``; raise ZeroDivisionError if it is singular."""
    d = m.det()
    if d == 0.0:
        raise ZeroDivisionError("matrix is singular")
    return Mat2((m[1, 1] / d, -m[0, 1] / d), (-m[1, 0] / d, m[0, 0] / d))


def eigenvalues(m: Mat2) -> Vector:
    """Return the two real eigenvalues of ``m``, larger first.

    Raises ValueError when the discriminant is below a small tolerance,
    i.e. the eigenvalues are complex or (nearly) repeated.
    """
    b = -m[0, 0] - m[1, 1]
    c = m.det()
    dis = b * b - 4.0 * c
    if dis < _FEQ_EPS:
        raise ValueError("matrix has no distinct real eigenvalues")
    s = math.sqrt(dis)
    return Vector(0.5 * (-b + s), 0.5 * (-b - s))


def eigenvectors(m: Mat2, evals: Vector) -> tuple[Vector, Vector]:
    """Return unit eigenvectors for the given eigenvalues."""
    first, second = (
        Vector(-m[0, 1], m[0, 0] - e).unitized() for e in (evals[0], evals[1])
    )
    return first, second


def eigen(m: Mat2) -> tuple[Vector, tuple[Vector, Vector]]:
    """Return the eigenvalues of ``m`` and their unit eigenvectors."""
    evals = eigenvalues(m)
    return evals, eigenvectors(m, evals)