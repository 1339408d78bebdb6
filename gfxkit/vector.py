"""Immutable fixed-size vectors with the usual linear-algebra operators."""

from __future__ import annotations

import math
from collections.abc import Iterator
from numbers import Real


class Vector:
    """An immutable vector of floats.

    ``+`` and ``-`` work componentwise, ``*`` and ``/`` take a scalar and
    ``@`` is the dot product.
    """

    __slots__ = ("_elts",)

    def __init__(self, *components: float) -> None:
        if not components:
            raise ValueError("a vector needs at least one component")
        self._elts = tuple(float(c) for c in components)

    def __len__(self) -> int:
        return len(self._elts)

    def __iter__(self) -> Iterator[float]:
        return iter(self._elts)

    def __getitem__(self, index: int) -> float:
        return self._elts[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self._elts == other._elts

    def __hash__(self) -> int:
        return hash(self._elts)

    def __repr__(self) -> str:
        return f"Vector({', '.join(repr(x) for x in self._elts)})"

    def __str__(self) -> str:
        return " ".join(f"{x:g}" for x in self._elts)

    def _same_dim(self, other: Vector) -> None:
        if len(other) != len(self):
            raise ValueError(
                f"dimension mismatch: {len(self)} and {len(other)}"
            )

    def __add__(self, other: object) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        self._same_dim(other)
        return Vector(*(a + b for a, b in zip(self, other)))

    def __sub__(self, other: object) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        self._same_dim(other)
        return Vector(*(a - b for a, b in zip(self, other)))

    def __neg__(self) -> Vector:
        return Vector(*(-a for a in self))

    def __mul__(self, scalar: object) -> Vector:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vector(*(a * scalar for a in self))

    __rmul__ = __mul__

    def __truediv__(self, scalar: object) -> Vector:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vector(*(a / scalar for a in self))

    def __matmul__(self, other: object) -> float:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.dot(other)

    def dot(self, other: Vector) -> float:
        """Return the inner product with ``other``."""
        self._same_dim(other)
        return sum(a * b for a, b in zip(self, other))

    def cross(self, other: Vector) -> Vector:
        """Return the cross product of two 3-vectors."""
        if len(self) != 3 or len(other) != 3:
            raise ValueError("the cross product needs two 3-vectors")
        u, v = self, other
        return Vector(
            u[1] * v[2] - v[1] * u[2],
            -u[0] * v[2] + v[0] * u[2],
            u[0] * v[1] - v[0] * u[1],
        )

    def norm2(self) -> float:
        """Return the squared length."""
        return self.dot(self)

    def norm(self) -> float:
        """Return the length."""
        return math.sqrt(self.norm2())

    def unitized(self) -> Vector:
        """Return the vector scaled to unit length; a zero vector stays zero."""
        length2 = self.norm2()
        if length2 not in (0.0, 1.0):
            return self / math.sqrt(length2)
        return self

    def proj(self) -> Vector:
        """Drop the last (homogeneous) component, dividing by it unless it is 0 or 1."""
        if len(self) < 2:
            raise ValueError("projection needs at least two components")
        head = Vector(*self._elts[:-1])
        w = self._elts[-1]
        if w not in (0.0, 1.0):
            return head / w
        return head


def cross(u: Vector, v: Vector) -> Vector:
    """Return the cross product of two 3-vectors."""
    return u.cross(v)


def norm(v: Vector) -> float:
    """Return the length of ``v``."""
    return v.norm()


def norm2(v: Vector) -> float:
    """Return the squared length of ``v``."""
    return v.norm2()


def unitize(v: Vector) -> Vector:
    """Return ``v`` scaled to unit length."""
    return v.unitized()


def proj(v: Vector) -> Vector:
    """Return the homogeneous projection of ``v``."""
    return v.proj()