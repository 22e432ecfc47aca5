"""Curve model: Lagrange interpolation through control points and closest-point projection."""

from markerpath.curve.lagrange import LagrangeCurve, basis, dedupe_consecutive, derivative_basis
from markerpath.curve.projector import ClosestPointProjector
from markerpath.curve.vector import FORWARD, ZERO, Vec3

__all__ = [
    "FORWARD",
    "ZERO",
    "ClosestPointProjector",
    "LagrangeCurve",
    "Vec3",
    "basis",
    "dedupe_consecutive",
    "derivative_basis",
]
