"""Lagrange interpolation over uniformly spaced parametric nodes.

N control points are treated as nodes at ``x_i = i / (N - 1)``. Both the
position basis and its derivative use this same spacing, so the tangent is the
exact derivative of the interpolated position curve.
"""

from __future__ import annotations

from collections.abc import Sequence

from markerpath.curve.vector import ZERO, Vec3


# ---------------------------------------------------------------------------
# Basis functions
# ---------------------------------------------------------------------------


def node(i: int, count: int) -> float:
    """Parametric position of node *i* among *count* uniformly spaced nodes."""
    return i / (count - 1)


def basis(t: float, i: int, count: int) -> float:
    """Lagrange basis ``L_i(t)`` for node *i* of *count* nodes.

    Requires ``count >= 2``; with a single node the spacing is undefined.
    """
    xi = node(i, count)
    result = 1.0
    for j in range(count):
        if j != i:
            xj = node(j, count)
            result *= (t - xj) / (xi - xj)
    return result


def derivative_basis(t: float, i: int, count: int) -> float:
    """First derivative ``L_i'(t)`` of :func:`basis` (same node spacing)."""
    xi = node(i, count)
    result = 0.0
    for j in range(count):
        if j == i:
            continue
        xj = node(j, count)
        product = 1.0
        for k in range(count):
            if k != i and k != j:
                xk = node(k, count)
                product *= (t - xk) / (xi - xk)
        result += product / (xi - xj)
    return result


# ---------------------------------------------------------------------------
# Curve model
# ---------------------------------------------------------------------------


def dedupe_consecutive(points: Sequence[Vec3]) -> list[Vec3]:
    """Drop points exactly equal to their predecessor."""
    result: list[Vec3] = []
    for p in points:
        if not result or result[-1] != p:
            result.append(p)
    return result


class LagrangeCurve:
    """Stateless N-th degree interpolating curve through a list of control points.

    The curve is re-derived from whatever control points are passed on each
    call; nothing is cached, so callers may hand in a fresh registry snapshot
    every time.
    """

    @staticmethod
    def is_usable(control_points: Sequence[Vec3]) -> bool:
        """True if *control_points* define a curve (at least two points)."""
        return len(control_points) >= 2

    def point(self, t: float, control_points: Sequence[Vec3]) -> Vec3 | None:
        """Evaluate the curve position at parameter *t*.

        Args:
            t: Curve parameter, nominally in ``[0, 1]``.
            control_points: Ordered control points ``[start, obstacles..., finish]``.

        Returns:
            The interpolated position. ``None`` for an empty list; the single
            point itself if every control point coincides.
        """
        points = dedupe_consecutive(control_points)
        count = len(points)
        if count == 0:
            return None
        if count == 1:
            return points[0]

        x = y = z = 0.0
        for i, p in enumerate(points):
            w = basis(t, i, count)
            x += w * p.x
            y += w * p.y
            z += w * p.z
        return Vec3(x, y, z)

    def derivative(self, t: float, control_points: Sequence[Vec3]) -> Vec3:
        """Unnormalised derivative ``dP/dt`` (zero for fewer than two distinct points)."""
        points = dedupe_consecutive(control_points)
        count = len(points)
        if count < 2:
            return ZERO

        x = y = z = 0.0
        for i, p in enumerate(points):
            w = derivative_basis(t, i, count)
            x += w * p.x
            y += w * p.y
            z += w * p.z
        return Vec3(x, y, z)

    def tangent(self, t: float, control_points: Sequence[Vec3]) -> Vec3:
        """Unit tangent at *t*; the zero vector where the derivative vanishes."""
        return self.derivative(t, control_points).normalized()
