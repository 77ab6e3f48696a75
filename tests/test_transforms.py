import math

import numpy as np
import pytest

from shadekit.transforms import (
    IdentityTransform,
    LerpTransform,
    MatrixTransform,
    ScaleRotateTranslate,
    TransformStack,
    decompose,
    quaternion_rotation,
    rotation,
    scaling,
    slerp,
    translation,
)


def test_identity_transform():
    t = IdentityTransform()
    assert np.array_equal(t.matrix(3.0), np.eye(4))
    assert t.is_identity and t.is_static


def test_matrix_transform_row_major():
    entries = [float(i) for i in range(12)] + [0.0, 0.0, 0.0, 1.0]
    t = MatrixTransform(entries)
    assert np.array_equal(t.matrix(0.0).flatten(), np.array(entries))
    assert not t.is_identity


def test_matrix_transform_fixes_last_row():
    entries = [1.0, 0, 0, 2, 0, 1, 0, 3, 0, 0, 1, 4, 5, 6, 7, 8]
    m = MatrixTransform(entries).matrix(0.0)
    assert np.array_equal(m[3], [0.0, 0.0, 0.0, 1.0])
    assert np.array_equal(m[:3].flatten(), np.array(entries[:12], dtype=float))


def test_matrix_transform_invalid_size():
    with pytest.raises(ValueError):
        MatrixTransform([1.0, 2.0, 3.0])


def test_matrix_transform_empty_is_identity():
    t = MatrixTransform()
    assert t.is_identity
    assert np.array_equal(t.matrix(0.0), np.eye(4))


def test_srt_default_is_identity():
    t = ScaleRotateTranslate()
    assert t.is_identity


def test_srt_composition_order():
    t = ScaleRotateTranslate(scale=(1.0, 2.0, 3.0), rotate=(0.0, 1.0, 0.0, 30.0), translate=(4.0, 5.0, 6.0))
    expected = translation((4.0, 5.0, 6.0)) @ rotation((0.0, 1.0, 0.0), math.radians(30.0)) @ scaling((1.0, 2.0, 3.0))
    assert np.allclose(t.matrix(0.0), expected)
    assert not t.is_identity


def test_rotation_is_orthonormal():
    r = rotation((1.0, 2.0, 3.0), 0.7)[:3, :3]
    assert np.allclose(r @ r.T, np.eye(3))
    assert math.isclose(np.linalg.det(r), 1.0)
    axis = np.array([1.0, 2.0, 3.0]) / math.sqrt(14.0)
    assert np.allclose(r @ axis, axis)


def test_rotation_quarter_turn_about_z():
    r = rotation((0.0, 0.0, 1.0), math.pi / 2)
    assert np.allclose(r @ [1.0, 0.0, 0.0, 0.0], [0.0, 1.0, 0.0, 0.0])


def test_decompose_round_trip():
    r = rotation((0.3, -0.5, 0.8), 1.1)
    m = translation((1.0, -2.0, 3.0)) @ r @ scaling((2.0, 0.5, 1.5))
    d = decompose(m)
    assert np.allclose(d.translation, [1.0, -2.0, 3.0])
    assert np.allclose(d.scaling, [2.0, 0.5, 1.5])
    assert np.allclose(quaternion_rotation(d.quaternion), r)
    recomposed = translation(d.translation) @ quaternion_rotation(d.quaternion) @ scaling(d.scaling)
    assert np.allclose(recomposed, m)


def test_slerp_endpoints_and_unit_norm():
    q0 = decompose(rotation((0.0, 0.0, 1.0), 0.2)).quaternion
    q1 = decompose(rotation((1.0, 1.0, 0.0), 1.4)).quaternion
    assert np.allclose(slerp(q0, q1, 0.0), q0)
    assert np.allclose(slerp(q0, q1, 1.0), q1)
    assert math.isclose(np.linalg.norm(slerp(q0, q1, 0.37)), 1.0)


def test_stack_applies_in_order():
    a = ScaleRotateTranslate(translate=(1.0, 0.0, 0.0))
    b = ScaleRotateTranslate(scale=2.0)
    stack = TransformStack([a, b])
    assert np.allclose(stack.matrix(0.0), b.matrix(0.0) @ a.matrix(0.0))
    assert stack.is_static
    assert not stack.is_identity


def test_empty_stack_is_identity():
    stack = TransformStack([])
    assert stack.is_identity
    assert np.array_equal(stack.matrix(1.0), np.eye(4))


def test_stack_with_animated_child():
    lerp = LerpTransform(
        [ScaleRotateTranslate(translate=(0.0, 0.0, 0.0)), ScaleRotateTranslate(translate=(2.0, 0.0, 0.0))],
        [0.0, 1.0],
    )
    extra = [ScaleRotateTranslate(scale=1.0) for _ in range(4)]
    stack = TransformStack([lerp, *extra])
    assert not stack.is_static
    assert np.allclose(stack.matrix(0.5), lerp.matrix(0.5))
    assert np.allclose(stack.matrix(1.0), lerp.matrix(1.0))


def test_lerp_validation():
    with pytest.raises(ValueError):
        LerpTransform([IdentityTransform()], [0.0, 1.0])
    with pytest.raises(ValueError):
        LerpTransform([], [])


def test_lerp_clamps_to_ends():
    a = ScaleRotateTranslate(translate=(1.0, 2.0, 3.0))
    b = ScaleRotateTranslate(translate=(-1.0, 0.0, 5.0))
    t = LerpTransform([a, b], [1.0, 3.0])
    assert np.allclose(t.matrix(-10.0), a.matrix(0.0))
    assert np.allclose(t.matrix(10.0), b.matrix(0.0))
    assert not t.is_static


def test_lerp_interpolates_components():
    a = ScaleRotateTranslate(scale=1.0, rotate=(0.0, 0.0, 1.0, 0.0), translate=(0.0, 0.0, 0.0))
    b = ScaleRotateTranslate(scale=3.0, rotate=(0.0, 0.0, 1.0, 90.0), translate=(4.0, 2.0, -6.0))
    mid = ScaleRotateTranslate(scale=2.0, rotate=(0.0, 0.0, 1.0, 45.0), translate=(2.0, 1.0, -3.0))
    t = LerpTransform([a, b], [0.0, 2.0])
    assert np.allclose(t.matrix(1.0), mid.matrix(0.0))


def test_lerp_at_inner_key_matches_key():
    keys = [ScaleRotateTranslate(translate=(float(i), 0.0, 0.0), rotate=(1.0, 0.0, 0.0, 20.0 * i)) for i in range(3)]
    t = LerpTransform(keys, [0.0, 1.0, 2.0])
    assert np.allclose(t.matrix(1.0), keys[1].matrix(0.0))


def test_lerp_sorts_and_removes_duplicates():
    a = ScaleRotateTranslate(translate=(1.0, 0.0, 0.0))
    b = ScaleRotateTranslate(translate=(0.0, 1.0, 0.0))
    c = ScaleRotateTranslate(translate=(0.0, 0.0, 1.0))
    t = LerpTransform([a, b, c], [2.0, 0.0, 2.0])
    assert np.allclose(t.matrix(-1.0), b.matrix(0.0))
    assert np.allclose(t.matrix(5.0), a.matrix(0.0))