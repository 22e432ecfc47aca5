"""Marker tracking input: control point registry and tracked visuals."""

from markerpath.tracking.events import MarkerKind, TrackingEvent, classify_label
from markerpath.tracking.registry import ControlPointRegistry
from markerpath.tracking.scaling import ClickScaler
from markerpath.tracking.tracked_objects import TrackedObjectManager, TrackedVisual

__all__ = [
    "ClickScaler",
    "ControlPointRegistry",
    "MarkerKind",
    "TrackedObjectManager",
    "TrackedVisual",
    "TrackingEvent",
    "classify_label",
]
