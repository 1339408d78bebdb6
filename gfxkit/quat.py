"""Quaternions made of a 3-vector part and a scalar part."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from numbers import Real

from gfxkit.vector import Vector


def _zero3() -> Vector:
    return Vector(0.0, 0.0, 0.0)


@dataclass(frozen=True)
class Quat:
    """An immutable quaternion ``(vector, scalar)``; the default is the identity."""

    vector: Vector = field(default_factory=_zero3)
    scalar: float = 1.0

    def __post_init__(self) -> None:
        v = self.vector if isinstance(self.vector, Vector) else Vector(*self.vector)
        if len(v) != 3:
            raise ValueError("the vector part of a quaternion must have 3 components")
        object.__setattr__(self, "vector", v)
        object.__setattr__(self, "scalar", float(self.scalar))

    @classmethod
    def identity(cls) -> Quat:
        """Return the identity rotation."""
        return cls(Vector(0.0, 0.0, 0.0), 1.0)

    def __str__(self) -> str:
        return f"{self.vector} {self.scalar:g}"

    def __add__(self, other: object) -> Quat:
        if not isinstance(other, Quat):
            return NotImplemented
        return Quat(self.vector + other.vector, self.scalar + other.scalar)

    def __sub__(self, other: object) -> Quat:
        if not isinstance(other, Quat):
            return NotImplemented
        return Quat(self.vector - other.vector, self.scalar - other.scalar)

    def __mul__(self, other: object) -> Quat:
        if isinstance(other, Quat):
            qv, qs = self.vector, self.scalar
            rv, rs = other.vector, other.scalar
            return Quat(qv.cross(rv) + rs * qv + qs * rv, qs * rs - qv @ rv)
        if isinstance(other, Real):
            return Quat(self.vector * other, self.scalar * other)
        return NotImplemented

    def __rmul__(self, other: object) -> Quat:
        if isinstance(other, Real):
            return Quat(self.vector * other, self.scalar * other)
        return NotImplemented

    def __truediv__(self, other: object) -> Quat:
        if not isinstance(other, Real):
            return NotImplemented
        return Quat(self.vector / other, self.scalar / other)

    def norm(self) -> float:
        """Return the squared magnitude ``s*s + v.v``."""
        return self.scalar * self.scalar + self.vector @ self.vector

    def conjugate(self) -> Quat:
        """Return the conjugate, with the vector part negated."""
        return Quat(-self.vector, self.scalar)

    def inverse(self) -> Quat:
        """Return the multiplicative inverse."""
        return self.conjugate() / self.norm()

    def unitized(self) -> Quat:
        """Return the quaternion scaled to unit magnitude."""
        return self / math.sqrt(self.norm())