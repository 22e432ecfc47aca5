"""ClosestPointProjector: sampled nearest-parameter search."""

from __future__ import annotations

import pytest

from markerpath.curve.lagrange import LagrangeCurve
from markerpath.curve.projector import ClosestPointProjector
from markerpath.curve.vector import Vec3

ARCH = [Vec3(0.0, 0.0, 0.0), Vec3(1.0, 0.0, 1.0), Vec3(2.0, 0.0, 0.0)]
LINE = [Vec3(0.0, 0.0, 0.0), Vec3(0.0, 0.0, 10.0)]


def test_point_on_curve_maps_back_to_its_parameter():
    projector = ClosestPointProjector(resolution=100)
    on_curve = LagrangeCurve().point(0.37, ARCH)
    t = projector.closest_parameter(on_curve, ARCH)
    assert abs(t - 0.37) <= 1 / 100


def test_off_curve_point_projects_perpendicular():
    projector = ClosestPointProjector(resolution=100)
    assert projector.closest_parameter(Vec3(5.0, 0.0, 2.5), LINE) == pytest.approx(0.25)


def test_points_beyond_the_ends_clamp():
    projector = ClosestPointProjector(resolution=50)
    assert projector.closest_parameter(Vec3(0.0, 0.0, -5.0), LINE) == 0.0
    assert projector.closest_parameter(Vec3(0.0, 0.0, 15.0), LINE) == 1.0


def test_coarse_resolution_snaps_to_sample_grid():
    projector = ClosestPointProjector(resolution=4)
    assert projector.closest_parameter(Vec3(0.0, 0.0, 3.0), LINE) == pytest.approx(0.25)


def test_no_curve_returns_none():
    projector = ClosestPointProjector()
    assert projector.closest_parameter(Vec3(), [Vec3()]) is None
    assert projector.closest_tangent(Vec3(), []) is None


def test_closest_tangent_on_line():
    projector = ClosestPointProjector()
    t, tangent = projector.closest_tangent(Vec3(1.0, 0.0, 7.0), LINE)
    assert t == pytest.approx(0.7)
    assert tangent.as_tuple() == pytest.approx((0.0, 0.0, 1.0))


def test_invalid_resolution_raises():
    with pytest.raises(ValueError):
        ClosestPointProjector(resolution=0)
