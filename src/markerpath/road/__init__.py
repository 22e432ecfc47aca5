"""Road tessellation: pooled segments and decorations laid along the curve."""

from markerpath.road.builder import PathSegmentBuilder, make_segment_pool
from markerpath.road.models import PlacedObject, SegmentInstance, SegmentTransform
from markerpath.road.placement import DecorationPlacer

__all__ = [
    "DecorationPlacer",
    "PathSegmentBuilder",
    "PlacedObject",
    "SegmentInstance",
    "SegmentTransform",
    "make_segment_pool",
]
