"""Control point registry: start, obstacles in arrival order, finish."""

from __future__ import annotations

import logging

from markerpath.curve.vector import Vec3
from markerpath.tracking.events import MarkerKind, TrackingEvent

_logger = logging.getLogger(__name__)


class ControlPointRegistry:
    """Holds the markers that shape the path.

    Obstacles form an insertion-ordered set keyed on exact position equality,
    so a marker that moves is registered again at its new position.
    :meth:`snapshot` always builds a fresh tuple; consumers must not assume
    the point count is stable between reads.
    """

    def __init__(self) -> None:
        self._start: Vec3 | None = None
        self._finish: Vec3 | None = None
        self._obstacles: list[Vec3] = []
        self._obstacle_set: set[Vec3] = set()

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def set_start(self, position: Vec3) -> bool:
        """Set the start point; return True if it changed."""
        if self._start == position:
            return False
        self._start = position
        return True

    def set_finish(self, position: Vec3) -> bool:
        """Set the finish point; return True if it changed."""
        if self._finish == position:
            return False
        self._finish = position
        return True

    def add_obstacle_if_absent(self, position: Vec3) -> bool:
        """Append an obstacle unless one already sits at exactly *position*."""
        if position in self._obstacle_set:
            return False
        self._obstacle_set.add(position)
        self._obstacles.append(position)
        return True

    def apply(self, event: TrackingEvent) -> bool:
        """Route a tracking event to the matching setter; return True on change.

        Labels that are neither start, finish nor obstacle are ignored.
        """
        kind = event.kind
        if kind is MarkerKind.START:
            changed = self.set_start(event.position)
        elif kind is MarkerKind.FINISH:
            changed = self.set_finish(event.position)
        elif kind is MarkerKind.OBSTACLE:
            changed = self.add_obstacle_if_absent(event.position)
        else:
            return False
        if changed:
            _logger.debug("control point %s -> %s", event.label, event.position)
        return changed

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def is_usable(self) -> bool:
        """True once both endpoints are known."""
        return self._start is not None and self._finish is not None

    def snapshot(self) -> tuple[Vec3, ...]:
        """Return ``(start?, *obstacles, finish?)``, omitting unknown endpoints."""
        points: list[Vec3] = []
        if self._start is not None:
            points.append(self._start)
        points.extend(self._obstacles)
        if self._finish is not None:
            points.append(self._finish)
        return tuple(points)

    def __len__(self) -> int:
        return len(self.snapshot())
