"""Object pooling for reusable visual instances."""

from markerpath.pool.object_pool import ObjectPool

__all__ = ["ObjectPool"]
