import math
import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import pytest

from pyvecmath.types import Vector2, Vector3


def test_construction_and_defaults():
    assert Vector2().to_tuple() == (0.0, 0.0)
    assert Vector2(3).to_tuple() == (3.0, 0.0)
    assert Vector2(0, 7).to_tuple() == (0.0, 7.0)


def test_named_constants():
    assert Vector2.zero == Vector2(0, 0)
    assert Vector2.one == Vector2(1, 1)
    assert Vector2.right == Vector2(1, 0)
    assert Vector2.left == Vector2(-1, 0)
    assert Vector2.up == Vector2(0, 1)
    assert Vector2.down == Vector2(0, -1)
    assert Vector2.positive_infinity.to_tuple() == (math.inf, math.inf)
    assert Vector2.negative_infinity.to_tuple() == (-math.inf, -math.inf)
    assert not hasattr(Vector2, "forward")


def test_magnitude_normalized_sqr_magnitude():
    v = Vector2(3, 4)
    assert v.magnitude == 5.0
    assert v.normalized == Vector2(0.6, 0.8)
    assert Vector2(0, 16).sqr_magnitude == 4.0
    assert Vector2.zero.normalized == Vector2.zero


def test_dot():
    assert Vector2.dot(Vector2(1, 0), Vector2(0, 1)) == 0
    assert Vector2.dot(Vector2(2, 3), Vector2(4, 5)) == Vector2.dot(Vector2(4, 5), Vector2(2, 3)) == 23


def test_cross_puts_scalar_in_x():
    result = Vector2.cross(Vector2(1, 0), Vector2(0, 1))
    assert result == Vector2(1, 0)
    a, b = Vector2(2, 3), Vector2(4, 5)
    assert Vector2.cross(a, b) == Vector2(-2, 0)
    assert Vector2.cross(a, b).x == -Vector2.cross(b, a).x


def test_angle():
    assert Vector2.angle(Vector2.right, Vector2.up) == pytest.approx(90.0)
    assert math.isnan(Vector2.angle(Vector2.zero, Vector2.zero))


def test_max_min_ties_go_to_lhs():
    lhs, rhs = Vector2(0.0, 2), Vector2(-0.0, 2)
    assert math.copysign(1.0, Vector2.max(lhs, rhs).x) == 1.0
    assert math.copysign(1.0, Vector2.min(lhs, rhs).x) == 1.0
    assert math.copysign(1.0, Vector2.max(rhs, lhs).x) == -1.0
    assert Vector2.max(Vector2(1, 5), Vector2(3, 2)) == Vector2(3, 5)
    assert Vector2.min(Vector2(1, 5), Vector2(3, 2)) == Vector2(1, 2)


def test_lerp_and_move_towards():
    a, b = Vector2(0, 0), Vector2(4, 8)
    assert Vector2.lerp(a, b, 0.25) == Vector2(1, 2)
    assert Vector2.lerp(a, b, -1) is a
    assert Vector2.lerp(a, b, 2) is b
    assert Vector2.lerp_unclamped(a, b, 1.5) == Vector2(6, 12)
    assert Vector2.move_towards(Vector2(0, 0), Vector2(0, 10), 4).is_close(Vector2(0, 4))


def test_move_towards_same_point():
    current, target = Vector2(1, 2), Vector2(1, 2)
    assert Vector2.move_towards(current, target, 1) is target
    assert Vector2.move_towards(current, target, -1) is current
    assert all(math.isnan(c) for c in Vector2.move_towards(current, target, 0))


def test_clamp_magnitude():
    assert Vector2.clamp_magnitude(Vector2(6, 8), 5) == Vector2(3, 4)
    assert Vector2.clamp_magnitude(Vector2(0.3, 0.4), 5) == Vector2(0.3, 0.4)
    assert Vector2.clamp_magnitude(Vector2(3, 4), -5) == Vector2(-3, -4)


@pytest.mark.parametrize("v", [
    Vector2(1, 2),
    Vector2(-7.5, 0.25),
    Vector2(1e-3, -2e-3),
    Vector2(1e150, -1e150),
])
def test_normalized_has_unit_length(v):
    assert v.normalized.magnitude == pytest.approx(1.0)


def test_is_close_rejects_other_vector_types():
    assert Vector2(1, 2).is_close(Vector2(1, 2 + 1e-9))
    with pytest.raises(TypeError):
        Vector2(1, 2).is_close(Vector3(1, 2, 0))


def test_instance_add_mutates():
    v = Vector2(1, 1)
    v.add(Vector2(2, 3))
    assert v == Vector2(3, 4)


def test_static_add_returns_new_vector():
    v = Vector2(1, 1)
    result = Vector2.add(v, Vector2(2, 3))
    assert result == Vector2(3, 4)
    assert v == Vector2(1, 1)


def test_scalar_broadcast():
    assert Vector2.subtract(Vector2(5, 6), 1) == Vector2(4, 5)
    assert Vector2.divide(Vector2(5, 6), 2) == Vector2(2.5, 3)
    v = Vector2(2, 3)
    v.multiply(-1)
    assert v == Vector2(-2, -3)


def test_divide_by_negative_zero():
    assert Vector2.divide(Vector2(1, -1), -0.0).to_tuple() == (-math.inf, math.inf)


def test_codec():
    v = Vector2(-1.25, 1e10)
    assert len(v.to_bytes()) == 16
    assert Vector2.from_bytes(v.to_bytes()) == v
    with pytest.raises(ValueError, match="Need 16"):
        Vector2.from_bytes(v.to_bytes(), offset=1)


def test_str_and_repr():
    assert str(Vector2(1, -2)) == "<1.00, -2.00>"
    assert repr(Vector2(1, -2)) == "Vector2(x=1.0, y=-2.0)"
