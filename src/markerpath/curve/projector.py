"""Closest-point projection of world positions onto the curve by sampled search."""

from __future__ import annotations

import math
from collections.abc import Sequence

from markerpath.curve.lagrange import LagrangeCurve
from markerpath.curve.vector import Vec3


class ClosestPointProjector:
    """Map a world position to the curve parameter whose point is nearest.

    The curve is sampled at ``resolution + 1`` uniform parameters and the
    nearest sample wins, so the answer carries an error of roughly
    ``curve_length / resolution``. Ties keep the lowest ``t``.

    Args:
        curve: Curve model used for evaluation.
        resolution: Number of sampling intervals (``K``).
    """

    def __init__(self, curve: LagrangeCurve | None = None, resolution: int = 100) -> None:
        if resolution < 1:
            raise ValueError("resolution must be >= 1")
        self.curve = curve or LagrangeCurve()
        self.resolution = resolution

    def closest_parameter(self, position: Vec3, control_points: Sequence[Vec3]) -> float | None:
        """Return the sampled ``t`` nearest to *position*, or None without a curve."""
        if not self.curve.is_usable(control_points):
            return None

        closest_t = 0.0
        min_distance = math.inf
        for i in range(self.resolution + 1):
            t = i / self.resolution
            point = self.curve.point(t, control_points)
            distance = position.distance_to(point)
            if distance < min_distance:
                min_distance = distance
                closest_t = t
        return closest_t

    def closest_tangent(self, position: Vec3, control_points: Sequence[Vec3]) -> tuple[float, Vec3] | None:
        """Return ``(t, unit_tangent)`` at the projection of *position*.

        The tangent is the zero vector where the curve is degenerate; callers
        skip reorientation in that case.
        """
        t = self.closest_parameter(position, control_points)
        if t is None:
            return None
        return t, self.curve.tangent(t, control_points)
