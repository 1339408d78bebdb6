import io
import math

import pytest

from gfxkit.arcball import Arcball, quat_from_sphere, quat_to_sphere
from gfxkit.quat import Quat
from gfxkit.vector import Vector

VIEWPORT = (0, 0, 200, 100)


def test_quat_from_same_point_is_identity():
    assert quat_from_sphere((0, 0, 1), (0, 0, 1)) == Quat.identity()


def test_quat_from_sphere_is_cross_and_dot():
    a, b = Vector(1, 0, 0), Vector(0, 1, 0)
    q = quat_from_sphere(a, b)
    assert q.vector == a.cross(b)
    assert q.scalar == pytest.approx(a @ b)


def test_quat_to_sphere_round_trip_about_z():
    q = Quat(Vector(0, 0, 0.6), 0.8)
    start, end = quat_to_sphere(q)
    back = quat_from_sphere(start, end)
    assert tuple(back.vector) == pytest.approx(tuple(q.vector))
    assert back.scalar == pytest.approx(q.scalar)


def test_quat_to_sphere_start_is_unit_in_plane():
    start, _ = quat_to_sphere(Quat(Vector(0.3, 0.4, 0.5), math.sqrt(0.5)))
    assert start.norm() == pytest.approx(1.0)
    assert start[2] == 0.0


def test_quat_to_sphere_negative_scalar_flips_start():
    pos_start, pos_end = quat_to_sphere(Quat(Vector(0, 0, 0.6), 0.8))
    neg_start, _ = quat_to_sphere(Quat(Vector(0, 0, 0.6), -0.8))
    assert neg_start == -pos_start


def test_proj_to_sphere_center():
    assert Arcball().proj_to_sphere((0, 0)) == Vector(0, 0, 1)


def test_proj_to_sphere_inside_is_on_upper_hemisphere():
    p = Arcball().proj_to_sphere((0.3, -0.4))
    assert p.norm() == pytest.approx(1.0)
    assert p[2] > 0


def test_proj_to_sphere_outside_lands_on_rim():
    p = Arcball().proj_to_sphere((3, 4))
    assert p.norm() == pytest.approx(1.0)
    assert p[2] == 0.0


def test_mouse_down_starts_drag_at_viewport_center():
    ball = Arcball()
    assert ball.mouse_down((100, 50), 1, VIEWPORT) is True
    assert ball.is_dragging
    assert ball.v_from == Vector(0, 0, 1)
    assert ball.v_to == ball.v_from


def test_mouse_down_other_button_does_not_drag():
    ball = Arcball()
    assert ball.mouse_down((100, 50), 2, VIEWPORT) is True
    assert not ball.is_dragging


def test_rotation_drag_updates_unit_quaternion():
    ball = Arcball()
    ball.mouse_down((100, 50), 1, VIEWPORT)
    assert ball.mouse_drag((150, 50), (100, 50), 1, VIEWPORT) is True
    ball.update()
    assert ball.q_now.norm() == pytest.approx(1.0)
    assert ball.q_now == ball.q_drag * Quat.identity()
    assert ball.q_now != Quat.identity()


def test_update_without_drag_keeps_rotation():
    ball = Arcball()
    ball.v_to = Vector(1, 0, 0)
    ball.v_from = Vector(0, 1, 0)
    ball.update()
    assert ball.q_now == Quat.identity()


def test_mouse_up_commits_rotation():
    ball = Arcball()
    ball.mouse_down((100, 50), 1, VIEWPORT)
    ball.mouse_drag((150, 20), (100, 50), 1, VIEWPORT)
    ball.update()
    reached = ball.q_now
    assert ball.mouse_up((150, 20), 1) is False
    assert not ball.is_dragging
    assert ball.q_down == reached
    assert ball.q_drag == Quat.identity()


def test_pan_direction_and_reversal():
    ball = Arcball()
    ball.mouse_drag((60, 40), (50, 50), 2, VIEWPORT)
    assert ball.trans[0] > 0
    assert ball.trans[1] > 0
    assert ball.trans[2] == 0
    ball.mouse_drag((50, 50), (60, 40), 2, VIEWPORT)
    assert tuple(ball.trans) == pytest.approx((0, 0, 0))


def test_zoom_changes_only_depth():
    ball = Arcball()
    ball.mouse_drag((50, 70), (50, 50), 3, VIEWPORT)
    assert ball.trans[0] == 0 and ball.trans[1] == 0
    assert ball.trans[2] > 0
    ball.mouse_drag((50, 50), (50, 70), 3, VIEWPORT)
    assert ball.trans[2] == pytest.approx(0)


def test_unknown_button_is_not_handled():
    ball = Arcball()
    assert ball.mouse_drag((10, 10), (0, 0), 4, VIEWPORT) is False
    assert ball.trans == Vector(0, 0, 0)


def test_set_and_get_transform():
    ball = Arcball()
    q = Quat(Vector(0, 0.6, 0), 0.8)
    ball.set_transform((1, 2, 3), (4, 5, 6), q)
    assert ball.get_transform() == (Vector(1, 2, 3), Vector(4, 5, 6), q)
    assert ball.q_down == q
    assert ball.q_drag == q


def test_write_has_both_sections():
    out = io.StringIO()
    Arcball().write(out)
    lines = out.getvalue().splitlines()
    assert len(lines) == 2
    assert lines[0].split()[0] == "arcball"
    assert lines[1].split()[0] == "baseball"


def test_write_read_round_trip():
    ball = Arcball()
    ball.ball_ctr = Vector(0.25, -0.5)
    ball.ball_radius = 1.5
    ball.bounding_sphere((1, 0, -1), 2)
    ball.set_transform((1, 0, -1), (0.5, 0.25, -3), Quat(Vector(0, 0.6, 0), 0.8))
    ball.q_drag = Quat(Vector(0.5, 0.5, 0.5), 0.5)
    out = io.StringIO()
    ball.write(out)

    other = Arcball()
    other.read(io.StringIO(out.getvalue()))
    assert other.ball_ctr == ball.ball_ctr
    assert other.ball_radius == ball.ball_radius
    assert other.q_now == ball.q_now
    assert other.q_down == ball.q_down
    assert other.q_drag == ball.q_drag
    assert other.get_transform() == ball.get_transform()
    assert other.radius == ball.radius


def test_read_truncated_raises():
    with pytest.raises(EOFError):
        Arcball().read(io.StringIO("arcball 0 0 1"))