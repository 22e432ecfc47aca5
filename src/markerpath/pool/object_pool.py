"""Generic reuse pool for instances that are expensive to create."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterable
from typing import Generic, TypeVar

T = TypeVar("T")


class ObjectPool(Generic[T]):
    """Hands out idle instances before creating new ones.

    Every instance is either *active* (checked out) or *idle* (queued). The
    pool owns all instances for its whole lifetime: it only grows, and
    :meth:`release` of an instance that is not active is a no-op.

    Parameters
    ----------
    factory:
        Zero-argument callable that creates a new instance.
    on_acquire:
        Optional hook run on every checkout (e.g. mark visible).
    on_release:
        Optional hook run on every return (e.g. hide).
    """

    def __init__(
        self,
        factory: Callable[[], T],
        on_acquire: Callable[[T], None] | None = None,
        on_release: Callable[[T], None] | None = None,
    ) -> None:
        self._factory = factory
        self._on_acquire = on_acquire
        self._on_release = on_release
        self._idle: deque[T] = deque()
        self._active: dict[int, T] = {}
        self._created = 0

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def prewarm(self, count: int) -> None:
        """Create *count* idle instances up front."""
        for _ in range(count):
            obj = self._create()
            if self._on_release is not None:
                self._on_release(obj)
            self._idle.append(obj)

    def acquire(self) -> T:
        """Check out an idle instance, creating one if the queue is empty."""
        obj = self._idle.popleft() if self._idle else self._create()
        self._active[id(obj)] = obj
        if self._on_acquire is not None:
            self._on_acquire(obj)
        return obj

    def release(self, obj: T) -> bool:
        """Return *obj* to the idle queue.

        Returns False (and does nothing) if *obj* is not currently checked out.
        """
        if self._active.pop(id(obj), None) is None:
            return False
        if self._on_release is not None:
            self._on_release(obj)
        self._idle.append(obj)
        return True

    def release_all(self, objs: Iterable[T]) -> int:
        """Release every instance in *objs*; return how many were active."""
        return sum(1 for obj in list(objs) if self.release(obj))

    def is_active(self, obj: T) -> bool:
        return id(obj) in self._active

    @property
    def active_count(self) -> int:
        return len(self._active)

    @property
    def idle_count(self) -> int:
        return len(self._idle)

    @property
    def size(self) -> int:
        """Total instances ever created (active + idle)."""
        return self._created

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _create(self) -> T:
        self._created += 1
        return self._factory()
