"""Symmetric matrices that store only their upper triangle."""

from __future__ import annotations

from numbers import Real

from gfxkit.vector import Vector


class _SymMatrix:
    """Mutable symmetric matrix addressed as ``m[i, j]``."""

    __slots__ = ("_elt",)
    DIM = 0
    SIZE = 0

    def __init__(self, fill: float = 0.0) -> None:
        self._elt = [float(fill)] * self.SIZE

    @classmethod
    def _from_elements(cls, elements):
        m = cls()
        m._elt = [float(x) for x in elements]
        return m

    def index(self, i: int, j: int) -> int:
        """Return the storage slot of entry ``(i, j)``."""
        n = self.DIM
        if not (0 <= i < n and 0 <= j < n):
            raise IndexError(f"entry ({i}, {j}) outside a {n}x{n} matrix")
        if i > j:
            i, j = j, i
        return self.SIZE - (n - i) * (n - i + 1) // 2 + (j - i)

    def __getitem__(self, key: tuple[int, int]) -> float:
        i, j = key
        return self._elt[self.index(i, j)]

    def __setitem__(self, key: tuple[int, int], value: float) -> None:
        i, j = key
        self._elt[self.index(i, j)] = float(value)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._elt == other._elt

    __hash__ = None

    def __repr__(self) -> str:
        rows = ", ".join(repr(tuple(self.row(i))) for i in range(self.DIM))
        return f"{type(self).__name__}({rows})"

    def row(self, i: int) -> Vector:
        """Return row ``i``."""
        return Vector(*(self[i, j] for j in range(self.DIM)))

    def col(self, j: int) -> Vector:
        """Return column ``j``."""
        return Vector(*(self[i, j] for i in range(self.DIM)))

    def trace(self) -> float:
        """Return the sum of the diagonal entries."""
        return sum(self[i, i] for i in range(self.DIM))

    def transpose(self):
        """Return a copy; a symmetric matrix is its own transpose."""
        return type(self)._from_elements(self._elt)

    def __add__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return type(self)._from_elements(a + b for a, b in zip(self._elt, other._elt))

    def __sub__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return type(self)._from_elements(a - b for a, b in zip(self._elt, other._elt))

    def __neg__(self):
        return type(self)._from_elements(-a for a in self._elt)

    def __mul__(self, scalar):
        if not isinstance(scalar, Real):
            return NotImplemented
        return type(self)._from_elements(a * scalar for a in self._elt)

    __rmul__ = __mul__

    def __truediv__(self, scalar):
        if not isinstance(scalar, Real):
            return NotImplemented
        return type(self)._from_elements(a / scalar for a in self._elt)

    def __matmul__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(*(self.row(i) @ other for i in range(self.DIM)))


class SymMat2(_SymMatrix):
    """A symmetric 2x2 matrix; every entry starts at ``fill``."""

    __slots__ = ()
    DIM = 2
    SIZE = 3

    def index(self, i: int, j: int) -> int:
        """Return the storage slot of entry ``(i, j)``."""
        return super().index(i, j)

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

    def transpose(self) -> SymMat2:
        """Return a copy; a symmetric matrix is its own transpose."""
        return super().transpose()


class SymMat4(_SymMatrix):
    """A symmetric 4x4 matrix; every entry starts at ``fill``."""

    __slots__ = ()
    DIM = 4
    SIZE = 10

    def index(self, i: int, j: int) -> int:
        """Return the storage slot of entry ``(i, j)``."""
        return super().index(i, j)

    def row(self, i: int) -> Vector:
        """Return row ``i``."""
        return super().row(i)

    def col(self, j: int) -> Vector:
        """Return column ``j``."""
        return super().col(j)

    def trace(self) -> float:
        """Return the sum of the diagonal entries."""
        return super().trace()

    def transpose(self) -> SymMat4:
        """Return a copy; a symmetric matrix is its own transpose."""
        return super().transpose()