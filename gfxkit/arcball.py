"""Arcball rotation control driven by mouse events."""

from __future__ import annotations

import math
from typing import TextIO

from gfxkit.baseball import Baseball
from gfxkit.quat import Quat
from gfxkit.vector import Vector


def quat_to_sphere(q: Quat) -> tuple[Vector, Vector]:
    """Return two points on the unit sphere whose arc encodes the unit quaternion ``q``."""
    v = q.vector
    s = math.sqrt(v[0] * v[0] + v[1] * v[1])
    if s == 0.0:
        start = Vector(0.0, 1.0, 0.0)
    else:
        start = Vector(-v[1] / s, v[0] / s, 0.0)

    end = Vector(
        q.scalar * start[0] - v[2] * start[1],
        q.scalar * start[1] + v[2] * start[2],
        v[0] * start[1] - v[1] * start[0],
    )
    if q.scalar < 0.0:
        start = -start
    return start, end


def quat_from_sphere(v_from, v_to) -> Quat:
    """Return the quaternion ``(from x to, from . to)`` for two points on the unit sphere."""
    a, b = Vector(*v_from), Vector(*v_to)
    return Quat(a.cross(b), a @ b)


def _normalized_mouse(where, viewport) -> Vector:
    w, h = float(viewport[2]), float(viewport[3])
    return Vector((2.0 * where[0] - w) / w, (h - 2.0 * where[1]) / h)


class Arcball(Baseball):
    """Rotate with button 1, pan with button 2 and zoom with button 3.

    Viewports are given as ``(x, y, width, height)``; mouse positions are
    pixel coordinates with the origin at the top left.
    """

    def __init__(self) -> None:
        super().__init__()
        self.ball_ctr = Vector(0.0, 0.0)
        self.ball_radius = 1.0
        self.q_now = Quat.identity()
        self.q_down = Quat.identity()
        self.q_drag = Quat.identity()
        self.v_from = Vector(0.0, 0.0, 0.0)
        self.v_to = Vector(0.0, 0.0, 0.0)
        self.is_dragging = False

    def proj_to_sphere(self, mouse) -> Vector:
        """Project a normalized mouse position onto the unit ball."""
        p = (Vector(*mouse) - self.ball_ctr) / self.ball_radius
        mag = p @ p
        if mag > 1.0:
            s = math.sqrt(mag)
            return Vector(p[0] / s, p[1] / s, 0.0)
        return Vector(p[0], p[1], math.sqrt(1 - mag))

    def update(self) -> None:
        """Recompute the current rotation from the drag in progress."""
        if self.is_dragging:
            self.q_drag = quat_from_sphere(self.v_from, self.v_to)
            self.q_now = self.q_drag * self.q_down

    def mouse_down(self, where, which: int, viewport) -> bool:
        """Start a rotation when button 1 goes down; return True (redraw)."""
        if which == 1:
            self.is_dragging = True
            self.v_from = self.proj_to_sphere(_normalized_mouse(where, viewport))
            self.v_to = self.v_from
        return True

    def mouse_up(self, where, which: int) -> bool:
        """Finish the drag, keeping the rotation reached; return False."""
        self.is_dragging = False
        self.q_down = self.q_now
        self.q_drag = Quat.identity()
        return False

    def mouse_drag(self, where, last, which: int, viewport) -> bool:
        """Handle motion with a button held; return whether it was handled."""
        w, h = float(viewport[2]), float(viewport[3])
        diam = 2 * self.radius

        if which == 1:
            self.v_to = self.proj_to_sphere(_normalized_mouse(where, viewport))
        elif which == 2:
            self.trans = self.trans + Vector(
                diam * (where[0] - last[0]) / w,
                diam * (last[1] - where[1]) / h,
                0.0,
            )
        elif which == 3:
            self.trans = self.trans + Vector(
                0.0, 0.0, 0.02 * diam * (where[1] - last[1])
            )
        else:
            return False
        return True

    def get_transform(self) -> tuple[Vector, Vector, Quat]:
        """Return ``(center, translation, rotation)``."""
        return self.ctr, self.trans, self.q_now

    def set_transform(self, center, trans, q: Quat) -> None:
        """Set the center, translation and rotation, ending any drag state."""
        self.ctr = Vector(*center)
        self.trans = Vector(*trans)
        self.q_now = q
        self.q_down = q
        self.q_drag = q

    def write(self, out: TextIO) -> None:
        """Write the arcball state followed by the shared controller state."""
        out.write(
            f"arcball {self.ball_ctr} {self.ball_radius:g} "
            f"{self.q_now} {self.q_down} {self.q_drag}\n"
        )
        super().write(out)

    def read(self, stream: TextIO) -> None:
        """Read state written by :meth:`write`."""
        self._next_token(stream)
        vals = self._read_floats(stream, 15)
        self.ball_ctr = Vector(vals[0], vals[1])
        self.ball_radius = vals[2]
        self.q_now = Quat(Vector(*vals[3:6]), vals[6])
        self.q_down = Quat(Vector(*vals[7:10]), vals[10])
        self.q_drag = Quat(Vector(*vals[11:14]), vals[14])
        super().read(stream)