"""Path segment builder: re-tessellates the curve into pooled, oriented segments.

Each rebuild:
1. Return every live segment to the pool.
2. ``total = ceil(|finish - start| / segment_length)``.
3. For segment ``i`` take the chord from ``t = i/total`` to ``(i+1)/total``.
4. Map the turn angle against the previous chord to a forward scale with a
   two-piece linear ramp (gentle turns long, sharp turns short).
5. Past the threshold angle, push the segment outward in the ground plane to
   widen the outside of the curve.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence

from markerpath.config import RoadConfig
from markerpath.curve.lagrange import LagrangeCurve
from markerpath.curve.vector import Vec3
from markerpath.pool.object_pool import ObjectPool
from markerpath.road.models import SegmentInstance, SegmentTransform

_logger = logging.getLogger(__name__)


def _lerp(a: float, b: float, u: float) -> float:
    return a + (b - a) * u


def _show(segment: SegmentInstance) -> None:
    segment.active = True


def _hide(segment: SegmentInstance) -> None:
    segment.active = False


def make_segment_pool() -> ObjectPool[SegmentInstance]:
    """Pool of :class:`SegmentInstance` with visibility hooks."""
    return ObjectPool(SegmentInstance, on_acquire=_show, on_release=_hide)


class PathSegmentBuilder:
    """Owns the live roster of road segments and rebuilds it from control points.

    Parameters
    ----------
    curve:
        Curve model shared with the other consumers.
    pool:
        Pool segments are checked out of; a fresh one is created if omitted.
    config:
        Tessellation settings; a missing or non-positive ``segment_length``
        falls back to ``fallback_segment_length`` with a single warning.
    """

    def __init__(
        self,
        curve: LagrangeCurve,
        pool: ObjectPool[SegmentInstance] | None = None,
        config: RoadConfig | None = None,
    ) -> None:
        self.curve = curve
        self.pool = pool if pool is not None else make_segment_pool()
        self.config = config or RoadConfig()
        self.segment_length = self._resolve_segment_length()
        self._default_direction = Vec3.of(self.config.default_direction).normalized()
        self._roster: list[SegmentInstance] = []
        self._reported_insufficient = False

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @property
    def roster(self) -> list[SegmentInstance]:
        """Live segments from the last rebuild, in path order."""
        return list(self._roster)

    def transforms(self) -> tuple[SegmentTransform, ...]:
        return tuple(segment.transform() for segment in self._roster)

    def clear(self) -> None:
        """Return every live segment to the pool."""
        self.pool.release_all(self._roster)
        self._roster.clear()

    def rebuild(self, control_points: Sequence[Vec3]) -> bool:
        """Re-tessellate the path through *control_points*.

        *control_points* must run ``[start, obstacles..., finish]``. With fewer
        than two points nothing changes and False is returned.
        """
        if len(control_points) < 2:
            if not self._reported_insufficient:
                _logger.debug("insufficient control points (%d); rebuild skipped", len(control_points))
                self._reported_insufficient = True
            return False
        self._reported_insufficient = False

        self.clear()

        start, finish = control_points[0], control_points[-1]
        total = math.ceil(start.distance_to(finish) / self.segment_length)

        previous: Vec3 | None = None
        for i in range(total):
            t = i / total
            next_t = (i + 1) / total
            position = self.curve.point(t, control_points)
            next_position = self.curve.point(next_t, control_points)

            direction = (next_position - position).normalized()
            if direction.is_zero():
                direction = self._default_direction

            angle = 0.0 if previous is None else previous.angle_to(direction)

            segment = self.pool.acquire()
            segment.position = position + self._outward_offset(previous, direction, angle)
            segment.forward = direction
            segment.length_scale = self.length_scale_for(angle)
            self._roster.append(segment)
            previous = direction

        _logger.info(
            "rebuilt path: %d segments through %d control points", total, len(control_points)
        )
        return True

    def length_scale_for(self, angle_deg: float) -> float:
        """Forward scale for a turn of *angle_deg* degrees."""
        cfg = self.config
        threshold = cfg.turn_threshold_deg
        if angle_deg <= threshold:
            u = angle_deg / threshold if threshold > 0 else 1.0
            return _lerp(cfg.gentle_scale[0], cfg.gentle_scale[1], u)
        span = cfg.max_turn_deg - threshold
        u = 1.0 if span <= 0 else min(1.0, (angle_deg - threshold) / span)
        return _lerp(cfg.sharp_scale[0], cfg.sharp_scale[1], u)

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _outward_offset(self, previous: Vec3 | None, direction: Vec3, angle_deg: float) -> Vec3:
        """Ground-plane push toward the outside of a pronounced turn."""
        if previous is None or angle_deg <= self.config.turn_threshold_deg:
            return Vec3()
        right = direction.horizontal_right()
        if right.is_zero():
            return Vec3()
        # Turning right (toward the previous chord's right) means the outside is left.
        side = direction.dot(previous.horizontal_right())
        if side == 0.0:
            return Vec3()
        outward = right * (-1.0 if side > 0 else 1.0)
        return outward * (self.config.outward_offset_fraction * self.segment_length)

    def _resolve_segment_length(self) -> float:
        length = self.config.segment_length
        if length is None or length <= 0:
            _logger.warning(
                "segment length missing or non-positive (%r); using %.3f",
                length,
                self.config.fallback_segment_length,
            )
            return self.config.fallback_segment_length
        return length
