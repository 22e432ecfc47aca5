"""Vec3 helpers used by the geometry modules."""

from __future__ import annotations

import pytest

from markerpath.curve.vector import FORWARD, ZERO, Vec3


def test_normalized_zero_is_zero():
    assert ZERO.normalized() == ZERO
    assert ZERO.is_zero()


def test_horizontal_right_of_forward_is_plus_x():
    assert FORWARD.horizontal_right().as_tuple() == pytest.approx((1.0, 0.0, 0.0))


def test_angle_between_perpendicular_directions():
    assert Vec3(1, 0, 0).angle_to(Vec3(0, 0, 1)) == pytest.approx(90.0)
    assert Vec3(1, 0, 0).angle_to(ZERO) == 0.0


def test_of_accepts_any_iterable():
    assert Vec3.of([1, 2, 3]) == Vec3(1.0, 2.0, 3.0)
    assert Vec3.of((0.5, 0, -1)).as_tuple() == (0.5, 0.0, -1.0)


def test_vectors_are_hashable_and_compare_exactly():
    assert {Vec3(1, 2, 3), Vec3(1, 2, 3)} == {Vec3(1, 2, 3)}
    assert 2 * Vec3(1, 0, 0) == Vec3(2, 0, 0)
