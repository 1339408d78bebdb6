import math

import pytest

from gfxkit.mat4 import (
    Mat4,
    adjoint,
    invert,
    invert_cramer,
    lookat_matrix,
    perspective_matrix,
    rotation_matrix_rad,
    scaling_matrix,
    translation_matrix,
    viewport_matrix,
)
from gfxkit.vector import Vector

M = Mat4(
    (2.0, 0.5, -1.0, 3.0),
    (1.0, 3.0, 0.0, -2.0),
    (0.0, -2.0, 4.0, 1.0),
    (1.5, 0.0, 1.0, 2.0),
)


def _flat(m):
    return [x for row in m for x in row]


IDENTITY = _flat(Mat4.identity())


def test_translation_moves_point():
    d = Vector(1.0, -2.0, 3.0)
    p = Vector(4.0, 5.0, 6.0)
    assert translation_matrix(d) @ Vector(*p, 1) == Vector(*(p + d), 1)


def test_scaling_scales_point_and_det():
    s = Vector(2.0, 3.0, 0.5)
    p = Vector(1.0, -1.0, 4.0)
    scaled = scaling_matrix(s) @ Vector(*p, 1)
    assert list(scaled) == pytest.approx([s[0] * p[0], s[1] * p[1], s[2] * p[2], 1.0])
    assert scaling_matrix(s).det() == pytest.approx(s[0] * s[1] * s[2])


def test_translation_det_is_one():
    assert translation_matrix((5, 6, 7)).det() == pytest.approx(1.0)


def test_rotation_about_z_quarter_turn():
    r = rotation_matrix_rad(math.pi / 2, (0, 0, 1))
    assert list(r @ Vector(1, 0, 0, 1)) == pytest.approx([0, 1, 0, 1], abs=1e-12)


def test_rotation_preserves_length_and_det():
    axis = Vector(1.0, 2.0, 2.0).unitized()
    r = rotation_matrix_rad(0.7, axis)
    p = Vector(3.0, -1.0, 2.0, 0.0)
    assert (r @ p).norm() == pytest.approx(p.norm())
    assert r.det() == pytest.approx(1.0)
    assert list(r @ Vector(*axis, 0)) == pytest.approx(list(Vector(*axis, 0)))


def test_invert_round_trip():
    assert _flat(invert(M) @ M) == pytest.approx(IDENTITY, abs=1e-12)
    assert _flat(M @ invert(M)) == pytest.approx(IDENTITY, abs=1e-12)


def test_invert_needs_pivoting():
    m = Mat4((0, 1, 0, 0), (1, 0, 0, 0), (0, 0, 0, 1), (0, 0, 1, 0))
    assert _flat(invert(m) @ m) == pytest.approx(IDENTITY)


def test_invert_matches_cramer():
    assert _flat(invert(M)) == pytest.approx(_flat(invert_cramer(M)))


def test_invert_singular_raises():
    singular = Mat4((1, 2, 3, 4), (2, 4, 6, 8), (0, 1, 0, 1), (1, 0, 1, 0))
    with pytest.raises(ZeroDivisionError):
        invert(singular)
    with pytest.raises(ZeroDivisionError):
        invert_cramer(singular)


def test_adjoint_gives_det_times_identity():
    expected = _flat(Mat4.identity() * M.det())
    assert _flat(M @ adjoint(M).transpose()) == pytest.approx(expected)


def test_det_of_product():
    n = translation_matrix((1, 2, 3)) @ scaling_matrix((2, 2, 2))
    assert (M @ n).det() == pytest.approx(M.det() * n.det())


def test_lookat_maps_eye_to_origin_and_target_down_negative_z():
    eye = Vector(1.0, 2.0, 5.0)
    at = Vector(0.0, 0.0, 0.0)
    m = lookat_matrix(eye, at, (0, 1, 0))
    assert list(m @ Vector(*eye, 1)) == pytest.approx([0, 0, 0, 1], abs=1e-12)
    target = m @ Vector(*at, 1)
    assert list(target) == pytest.approx([0, 0, -(at - eye).norm(), 1], abs=1e-12)


def test_perspective_structure():
    m = perspective_matrix(60.0, 1.5, 1.0, 100.0)
    assert m[3, 2] == -1.0
    assert m[3, 3] == 0.0
    assert m[0, 0] * 1.5 == pytest.approx(m[1, 1])


def test_perspective_infinite_far_plane():
    m = perspective_matrix(90.0, 1.0, 1.0, 0.0)
    assert m[2, 2] == 1.0
    assert m[2, 3] == 1.0


def test_viewport_maps_corners():
    w, h = 640.0, 480.0
    m = viewport_matrix(w, h)
    assert list(m @ Vector(-1, 1, 0, 1)) == pytest.approx([0, 0, 0, 1])
    assert list(m @ Vector(1, -1, 0, 1)) == pytest.approx([w, h, 0, 1])


def test_transpose_round_trip():
    assert M.transpose().transpose() == M
    assert M.transpose().row(2) == M.col(2)