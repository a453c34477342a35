import math
import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import pytest

from pyvecmath.types import Vector3, Vector4


def test_w_defaults_to_one():
    assert Vector4().w == 1.0
    assert Vector4().to_tuple() == (0.0, 0.0, 0.0, 1.0)
    assert Vector4(1, 2, 3).w == 1.0


def test_explicit_zero_w_is_kept():
    assert Vector4(1, 2, 3, 0).w == 0.0


def test_named_constants():
    assert Vector4.zero.to_tuple() == (0.0, 0.0, 0.0, 0.0)
    assert Vector4.one.to_tuple() == (1.0, 1.0, 1.0, 1.0)
    assert Vector4.positive_infinity.to_tuple() == (math.inf,) * 4
    assert Vector4.negative_infinity.to_tuple() == (-math.inf,) * 4
    for name in ("right", "left", "up", "down", "forward", "back"):
        assert not hasattr(Vector4, name)
    assert not hasattr(Vector4, "cross")


def test_magnitude_includes_w():
    assert Vector4.one.magnitude == 2.0
    assert Vector4().magnitude == 1.0
    assert Vector4(0, 0, 0, 16).sqr_magnitude == 4.0


def test_normalized():
    assert Vector4(0, 3, 0, 4).normalized == Vector4(0, 0.6, 0, 0.8)
    assert Vector4(2, 2, 2, 2).normalized.magnitude == pytest.approx(1.0)
    assert Vector4.zero.normalized == Vector4.zero


def test_dot_and_angle():
    a, b = Vector4(1, 2, 3, 4), Vector4(5, 6, 7, 8)
    assert Vector4.dot(a, b) == Vector4.dot(b, a) == 70
    assert Vector4.angle(Vector4(1, 0, 0, 0), Vector4(0, 1, 0, 0)) == pytest.approx(90.0)
    assert math.isnan(Vector4.angle(Vector4.zero, a))


def test_distance_and_clamp():
    assert Vector4.distance(Vector4(1, 1, 1, 1), Vector4(2, 2, 2, 2)) == 2.0
    clamped = Vector4.clamp_magnitude(Vector4(2, 2, 2, 2), 2)
    assert clamped == Vector4(1, 1, 1, 1)
    assert Vector4.clamp_magnitude(Vector4(2, 2, 2, 2), -4) == Vector4(-2, -2, -2, -2)


@pytest.mark.parametrize("v", [
    Vector4(1, 2, 3, 4),
    Vector4(-7.5, 0.25, 100, -0.5),
    Vector4(1e-3, -1e-3, 2e-3, 0),
    Vector4(1e150, 1e150, -1e150, 1e150),
])
def test_normalized_has_unit_length(v):
    assert v.normalized.magnitude == pytest.approx(1.0)


def test_max_min():
    a, b = Vector4(1, 8, 3, -1), Vector4(4, 2, 3, 0)
    assert Vector4.max(a, b) == Vector4(4, 8, 3, 0)
    assert Vector4.min(a, b) == Vector4(1, 2, 3, -1)


def test_lerp():
    a, b = Vector4(0, 0, 0, 0), Vector4(2, 4, 6, 8)
    assert Vector4.lerp(a, b, 0.5) == Vector4(1, 2, 3, 4)
    assert Vector4.lerp(a, b, 0) == a
    assert Vector4.lerp(a, b, 1) == b
    assert Vector4.lerp(a, b, 3) is b
    assert Vector4.lerp_unclamped(a, b, -0.5) == Vector4(-1, -2, -3, -4)


def test_move_towards():
    target = Vector4(0, 0, 0, 10)
    assert Vector4.move_towards(Vector4(0, 0, 0, 0), target, 2.5).is_close(Vector4(0, 0, 0, 2.5))
    assert Vector4.move_towards(Vector4(0, 0, 0, 0), target, 20) is target


def test_move_towards_same_point():
    current, target = Vector4(1, 2, 3, 4), Vector4(1, 2, 3, 4)
    assert Vector4.move_towards(current, target, 1) is target
    assert Vector4.move_towards(current, target, -1) is current
    assert all(math.isnan(c) for c in Vector4.move_towards(current, target, 0))


def test_is_close_rejects_other_vector_types():
    assert Vector4(1, 2, 3, 99).is_close(Vector4(1, 2, 3, 99))
    with pytest.raises(TypeError):
        Vector4(1, 2, 3, 99).is_close(Vector3(1, 2, 3))


def test_scalar_broadcast_reaches_w():
    assert Vector4.add(Vector4(1, 2, 3, 4), 1) == Vector4(2, 3, 4, 5)
    v = Vector4(1, 2, 3, 4)
    v.multiply(0.5)
    assert v == Vector4(0.5, 1, 1.5, 2)


def test_instance_and_static_arithmetic():
    v = Vector4(1, 1, 1, 1)
    v.subtract(Vector4(1, 2, 3, 4))
    assert v == Vector4(0, -1, -2, -3)
    assert Vector4.divide(Vector4(2, 4, 6, 8), Vector4(2, 2, 2, 2)) == Vector4(1, 2, 3, 4)
    quotient = Vector4.divide(Vector4(1, 1, 1, 0), 0)
    assert quotient.to_tuple()[:3] == (math.inf, math.inf, math.inf)
    assert math.isnan(quotient.w)


def test_operators():
    v = Vector4(1, 2, 3, 4)
    assert v * v == Vector4(1, 4, 9, 16)
    assert -v == Vector4(-1, -2, -3, -4)
    v /= 2
    assert v == Vector4(0.5, 1, 1.5, 2)


def test_codec():
    v = Vector4(1, 2, 3, 0)
    data = v.to_bytes()
    assert len(data) == 32
    assert Vector4.from_bytes(data) == v
    with pytest.raises(ValueError, match="Need 32"):
        Vector4.from_bytes(data[:31])


def test_str_repr_iter():
    v = Vector4(1, 2, 3)
    assert str(v) == "<1.00, 2.00, 3.00, 1.00>"
    assert repr(v) == "Vector4(x=1.0, y=2.0, z=3.0, w=1.0)"
    assert len(v) == 4
    assert tuple(v) == (1.0, 2.0, 3.0, 1.0)
