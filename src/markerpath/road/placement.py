"""Decoration placement along the middle stretch of the road."""

from __future__ import annotations

import logging
import random
from collections.abc import Sequence

from markerpath.curve.lagrange import LagrangeCurve
from markerpath.curve.vector import Vec3
from markerpath.road.models import PlacedObject

_logger = logging.getLogger(__name__)


class DecorationPlacer:
    """Scatter labelled objects along the curve between ``min_t`` and ``max_t``.

    Each object lands at a random ``t`` no earlier than the previous one plus a
    random gap, so objects stay in label order and spread out.

    Args:
        curve: Curve model.
        labels: Objects to place, in order.
        rng: Random source; pass a seeded ``random.Random`` for repeatable layouts.
        min_t: Lower bound of the placement window.
        max_t: Upper bound of the placement window.
        gap: ``(low, high)`` range of the random gap added after each placement.
    """

    def __init__(
        self,
        curve: LagrangeCurve,
        labels: Sequence[str] = (),
        rng: random.Random | None = None,
        min_t: float = 0.2,
        max_t: float = 0.8,
        gap: tuple[float, float] = (0.05, 0.15),
    ) -> None:
        if not 0.0 <= min_t <= max_t <= 1.0:
            raise ValueError("placement window must satisfy 0 <= min_t <= max_t <= 1")
        self.curve = curve
        self.labels = tuple(labels)
        self.rng = rng or random.Random()
        self.min_t = min_t
        self.max_t = max_t
        self.gap = gap
        self._placed: list[PlacedObject] = []

    @property
    def placed(self) -> tuple[PlacedObject, ...]:
        return tuple(self._placed)

    def place(self, control_points: Sequence[Vec3]) -> tuple[PlacedObject, ...]:
        """Discard the previous layout and place every label again."""
        self._placed.clear()
        if not self.curve.is_usable(control_points):
            _logger.warning("not enough control points to place decorations")
            return ()

        lower = self.min_t
        for label in self.labels:
            t = self.rng.uniform(lower, self.max_t)
            self._placed.append(
                PlacedObject(
                    label=label,
                    t=t,
                    position=self.curve.point(t, control_points),
                    forward=self.curve.tangent(t, control_points),
                )
            )
            lower = min(max(t + self.rng.uniform(*self.gap), self.min_t), self.max_t)

        if self._placed:
            _logger.info("placed %d decorations", len(self._placed))
        return self.placed
