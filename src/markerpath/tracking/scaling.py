"""Click-to-grow toggle for tracked obstacle visuals."""

from __future__ import annotations

import logging

from markerpath.tracking.tracked_objects import TrackedVisual

_logger = logging.getLogger(__name__)


class ClickScaler:
    """Grows a visual on each click until it hits the cap, then snaps it back.

    Args:
        scale_multiplier: Factor applied per click while growing.
        max_scale_factor: Cap relative to the visual's scale at its first click.
    """

    def __init__(self, scale_multiplier: float = 2.0, max_scale_factor: float = 3.0) -> None:
        if scale_multiplier <= 1.0:
            raise ValueError("scale_multiplier must be > 1")
        if max_scale_factor < 1.0:
            raise ValueError("max_scale_factor must be >= 1")
        self.scale_multiplier = scale_multiplier
        self.max_scale_factor = max_scale_factor
        self._original: dict[str, float] = {}
        self._at_max: set[str] = set()

    def click(self, visual: TrackedVisual) -> float:
        """Apply one click to *visual* and return its new scale."""
        original = self._original.setdefault(visual.label, visual.scale)
        target = original * self.max_scale_factor

        if visual.label in self._at_max:
            visual.scale = original
            self._at_max.discard(visual.label)
            _logger.debug("%s restored to scale %.3f", visual.label, visual.scale)
            return visual.scale

        visual.scale = min(visual.scale * self.scale_multiplier, target)
        if visual.scale >= target:
            self._at_max.add(visual.label)
        _logger.debug("%s grown to scale %.3f", visual.label, visual.scale)
        return visual.scale
