"""Label-matched visuals that follow tracked markers and face along the path."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from markerpath.curve.projector import ClosestPointProjector
from markerpath.curve.vector import FORWARD, Vec3
from markerpath.tracking.events import TrackingEvent

_logger = logging.getLogger(__name__)


@dataclass
class TrackedVisual:
    """A visual attached to a tracked marker."""

    label: str
    position: Vec3
    forward: Vec3 = FORWARD
    scale: float = 1.0


class TrackedObjectManager:
    """Instantiates visuals for known marker labels and reorients them onto the curve.

    Args:
        projector: Closest-point projector used to find each visual's curve parameter.
        visual_labels: Marker labels that get a visual. Any label may appear here,
            including ones the control point registry ignores.
    """

    def __init__(self, projector: ClosestPointProjector, visual_labels: Iterable[str] = ()) -> None:
        self.projector = projector
        self.visual_labels = frozenset(visual_labels)
        self._visuals: dict[str, TrackedVisual] = {}
        if not self.visual_labels:
            _logger.warning("no visual labels configured; tracked markers will have no visuals")

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def observe(self, event: TrackingEvent) -> TrackedVisual | None:
        """Create or move the visual for *event*'s label; None if the label has no visual."""
        visual = self._visuals.get(event.label)
        if visual is not None:
            visual.position = event.position
            return visual
        if event.label not in self.visual_labels:
            return None
        visual = TrackedVisual(label=event.label, position=event.position)
        self._visuals[event.label] = visual
        _logger.info("instantiated visual for %s", event.label)
        return visual

    def reorient(self, control_points: Sequence[Vec3]) -> dict[str, Vec3]:
        """Point every visual along the curve tangent at its closest parameter.

        Visuals whose tangent is degenerate keep their orientation.

        Returns:
            Mapping of label to new forward direction for the visuals that turned.
        """
        turned: dict[str, Vec3] = {}
        for label, visual in self._visuals.items():
            result = self.projector.closest_tangent(visual.position, control_points)
            if result is None:
                break
            _, tangent = result
            if tangent.is_zero():
                continue
            visual.forward = tangent
            turned[label] = tangent
        return turned

    def get(self, label: str) -> TrackedVisual | None:
        return self._visuals.get(label)

    def visuals(self) -> list[TrackedVisual]:
        return list(self._visuals.values())
