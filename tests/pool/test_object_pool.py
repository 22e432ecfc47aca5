"""ObjectPool acquire/release discipline."""

from __future__ import annotations

from markerpath.pool.object_pool import ObjectPool


class Thing:
    def __init__(self) -> None:
        self.visible = False


def _pool() -> ObjectPool[Thing]:
    def show(t: Thing) -> None:
        t.visible = True

    def hide(t: Thing) -> None:
        t.visible = False

    return ObjectPool(Thing, on_acquire=show, on_release=hide)


def test_active_count_after_acquires_and_releases():
    pool = _pool()
    items = [pool.acquire() for _ in range(5)]
    for item in items[:2]:
        pool.release(item)
    assert pool.active_count == 3
    assert pool.idle_count == 2


def test_released_instance_is_reused():
    pool = _pool()
    first = pool.acquire()
    pool.release(first)
    again = pool.acquire()
    assert again is first
    assert pool.size == 1


def test_hooks_toggle_visibility():
    pool = _pool()
    item = pool.acquire()
    assert item.visible is True
    pool.release(item)
    assert item.visible is False


def test_release_of_inactive_instance_is_noop():
    pool = _pool()
    item = pool.acquire()
    assert pool.release(item) is True
    assert pool.release(item) is False
    assert pool.release(Thing()) is False
    assert pool.idle_count == 1


def test_instance_never_active_twice():
    pool = _pool()
    a = pool.acquire()
    b = pool.acquire()
    assert a is not b
    assert pool.is_active(a) and pool.is_active(b)


def test_prewarm_fills_idle_queue():
    pool = _pool()
    pool.prewarm(3)
    assert pool.idle_count == 3
    pool.acquire()
    assert pool.size == 3
    assert pool.active_count == 1


def test_release_all_counts_only_active():
    pool = _pool()
    items = [pool.acquire() for _ in range(3)]
    pool.release(items[0])
    assert pool.release_all(items) == 2
    assert pool.active_count == 0


def test_release_all_accepts_any_iterable():
    pool = ObjectPool(object)
    objs = [pool.acquire() for _ in range(3)]
    assert pool.release_all(o for o in objs) == 3
    assert pool.active_count == 0
    assert pool.idle_count == 3
