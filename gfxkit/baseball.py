"""Shared state and serialization for ball-style rotation controllers."""

from __future__ import annotations

from typing import TextIO

from gfxkit.quat import Quat
from gfxkit.vector import Vector


class Baseball:
    """Rotation controller state: a bounding sphere, a rotation and a translation."""

    def __init__(self) -> None:
        self.ctr = Vector(0.0, 0.0, 0.0)
        self.radius = 1.0
        self.curquat = Quat.identity()
        self.trans = Vector(0.0, 0.0, 0.0)

    def bounding_sphere(self, center, radius: float) -> None:
        """Set the sphere that bounds the controlled object."""
        self.ctr = Vector(*center)
        self.radius = float(radius)

    def write(self, out: TextIO) -> None:
        """Write the controller state as one line of text."""
        out.write(f"baseball {self.curquat} {self.trans} {self.ctr} {self.radius:g}\n")

    def read(self, stream: TextIO) -> None:
        """Read state written by :meth:`write`."""
        self._next_token(stream)
        vals = self._read_floats(stream, 11)
        self.curquat = Quat(Vector(*vals[0:3]), vals[3])
        self.trans = Vector(*vals[4:7])
        self.ctr = Vector(*vals[7:10])
        self.radius = vals[10]

    @staticmethod
    def _next_token(stream: TextIO) -> str:
        chars: list[str] = []
        while True:
            ch = stream.read(1)
            if not ch:
                break
            if ch.isspace():
                if chars:
                    break
                continue
            chars.append(ch)
        if not chars:
            raise EOFError("unexpected end of controller state")
        return "".join(chars)

    @classmethod
    def _read_floats(cls, stream: TextIO, count: int) -> list[float]:
        return [float(cls._next_token(stream)) for _ in range(count)]