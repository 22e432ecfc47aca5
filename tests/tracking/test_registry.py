"""ControlPointRegistry ordering, deduplication and snapshots."""

from __future__ import annotations

from markerpath.curve.vector import Vec3
from markerpath.tracking.events import TrackingEvent
from markerpath.tracking.registry import ControlPointRegistry

S = Vec3(0.0, 0.0, 0.0)
F = Vec3(0.0, 0.0, 2.0)
O1 = Vec3(0.5, 0.0, 0.5)
O2 = Vec3(-0.5, 0.0, 1.5)


def test_snapshot_orders_start_obstacles_finish():
    reg = ControlPointRegistry()
    reg.set_finish(F)
    reg.add_obstacle_if_absent(O1)
    reg.set_start(S)
    reg.add_obstacle_if_absent(O2)
    assert reg.snapshot() == (S, O1, O2, F)


def test_snapshot_omits_unknown_endpoints():
    reg = ControlPointRegistry()
    reg.add_obstacle_if_absent(O1)
    assert reg.snapshot() == (O1,)
    reg.set_start(S)
    assert reg.snapshot() == (S, O1)
    assert not reg.is_usable()


def test_obstacle_insert_is_set_like():
    reg = ControlPointRegistry()
    assert reg.add_obstacle_if_absent(O1) is True
    assert reg.add_obstacle_if_absent(O1) is False
    assert reg.add_obstacle_if_absent(O2) is True
    assert reg.snapshot() == (O1, O2)


def test_moved_obstacle_is_registered_again():
    reg = ControlPointRegistry()
    reg.add_obstacle_if_absent(O1)
    reg.add_obstacle_if_absent(O1 + Vec3(0.01, 0.0, 0.0))
    assert len(reg) == 2


def test_set_endpoint_reports_change():
    reg = ControlPointRegistry()
    assert reg.set_start(S) is True
    assert reg.set_start(S) is False
    assert reg.set_start(F) is True


def test_snapshot_is_a_fresh_copy():
    reg = ControlPointRegistry()
    reg.set_start(S)
    reg.set_finish(F)
    before = reg.snapshot()
    reg.add_obstacle_if_absent(O1)
    assert before == (S, F)
    assert reg.snapshot() == (S, O1, F)


def test_apply_routes_events_by_label():
    reg = ControlPointRegistry()
    assert reg.apply(TrackingEvent("Tracking-Start", S)) is True
    assert reg.apply(TrackingEvent("Tracking-Obstacle-7", O1)) is True
    assert reg.apply(TrackingEvent("Tracking-Finish", F)) is True
    assert reg.apply(TrackingEvent("Tracking-Tree", O2)) is False
    assert reg.snapshot() == (S, O1, F)
    assert reg.is_usable()
