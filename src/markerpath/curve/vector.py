"""Minimal immutable 3D vector used by every geometry module.

World space is Y-up: ``x`` and ``z`` span the ground plane and ``y`` is height.
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass

_EPS = 1e-12


@dataclass(frozen=True)
class Vec3:
    """A point or direction in world space."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------

    @classmethod
    def of(cls, values: Iterable[float]) -> Vec3:
        """Build a vector from any 3-item iterable (tuple, list, pydantic field)."""
        x, y, z = (float(v) for v in values)
        return cls(x, y, z)

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def __add__(self, other: Vec3) -> Vec3:
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, k: float) -> Vec3:
        return Vec3(self.x * k, self.y * k, self.z * k)

    __rmul__ = __mul__

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def dot(self, other: Vec3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vec3) -> Vec3:
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    # ------------------------------------------------------------------
    # Metrics
    # ------------------------------------------------------------------

    def length(self) -> float:
        return math.sqrt(self.dot(self))

    def distance_to(self, other: Vec3) -> float:
        return (other - self).length()

    def is_zero(self) -> bool:
        """Return True if the vector is too short to normalise."""
        return self.length() < _EPS

    def normalized(self) -> Vec3:
        """Unit vector in the same direction, or the zero vector if degenerate."""
        n = self.length()
        if n < _EPS:
            return ZERO
        return Vec3(self.x / n, self.y / n, self.z / n)

    def with_y(self, y: float) -> Vec3:
        return Vec3(self.x, y, self.z)

    def horizontal_right(self) -> Vec3:
        """Unit vector perpendicular to this direction in the ground plane (``up × self``)."""
        return Vec3(self.z, 0.0, -self.x).normalized()

    def angle_to(self, other: Vec3) -> float:
        """Unsigned angle in degrees between two directions (0 if either is degenerate)."""
        a = self.normalized()
        b = other.normalized()
        if a.is_zero() or b.is_zero():
            return 0.0
        dot = max(-1.0, min(1.0, a.dot(b)))
        return math.degrees(math.acos(dot))


ZERO = Vec3(0.0, 0.0, 0.0)
FORWARD = Vec3(0.0, 0.0, 1.0)
