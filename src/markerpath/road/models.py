"""Road segment data structures."""

from __future__ import annotations

from dataclasses import dataclass

from markerpath.curve.vector import FORWARD, ZERO, Vec3


@dataclass
class SegmentInstance:
    """A pooled visual road segment.

    Instances are owned by the pool and reconfigured on every rebuild, so
    consumers should copy what they need via :meth:`transform`.
    """

    position: Vec3 = ZERO
    forward: Vec3 = FORWARD
    length_scale: float = 1.0
    """Scale along the forward axis, as a multiple of the unit's native length."""

    active: bool = False

    def transform(self) -> SegmentTransform:
        return SegmentTransform(
            position=self.position,
            forward=self.forward,
            length_scale=self.length_scale,
        )


@dataclass(frozen=True)
class SegmentTransform:
    """Immutable snapshot of one segment's placement."""

    position: Vec3
    forward: Vec3
    length_scale: float


@dataclass(frozen=True)
class PlacedObject:
    """A decoration laid along the road at curve parameter ``t``."""

    label: str
    t: float
    position: Vec3
    forward: Vec3
