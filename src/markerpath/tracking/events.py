"""Tracking input events and label classification."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from markerpath.curve.vector import Vec3

START_LABEL = "Tracking-Start"
FINISH_LABEL = "Tracking-Finish"
OBSTACLE_PREFIX = "Tracking-Obstacle"


class MarkerKind(str, Enum):
    """Role a tracked marker plays in the control point set."""

    START = "start"
    FINISH = "finish"
    OBSTACLE = "obstacle"
    OTHER = "other"


@dataclass(frozen=True)
class TrackingEvent:
    """A marker sighting reported by the position tracker."""

    label: str
    """Reference image name, e.g. ``"Tracking-Obstacle-2"``."""

    position: Vec3
    """World position of the marker."""

    @property
    def kind(self) -> MarkerKind:
        return classify_label(self.label)


def classify_label(label: str) -> MarkerKind:
    """Map a marker label to its role (exact match for start/finish, prefix for obstacles)."""
    if label == START_LABEL:
        return MarkerKind.START
    if label == FINISH_LABEL:
        return MarkerKind.FINISH
    if label.startswith(OBSTACLE_PREFIX):
        return MarkerKind.OBSTACLE
    return MarkerKind.OTHER
