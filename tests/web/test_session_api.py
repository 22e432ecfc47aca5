"""Tracking, command, tick, state and closest-point endpoints."""

from __future__ import annotations

import pytest

from markerpath.tracking.events import FINISH_LABEL, START_LABEL


def post_marker(client, label: str, position) -> None:
    resp = client.post("/api/tracking", json={"label": label, "position": list(position)})
    assert resp.status_code == 200


def _build_path(client) -> dict:
    post_marker(client, START_LABEL, (0.0, 0.0, 0.0))
    post_marker(client, FINISH_LABEL, (0.0, 0.0, 2.0))
    return client.post("/api/tick", json={"dt": 0.0}).json()


def test_tracking_is_queued(client):
    resp = client.post("/api/tracking", json={"label": START_LABEL, "position": [0, 0, 0]})
    assert resp.json() == {"queued": 1}
    resp = client.post("/api/tracking", json={"label": FINISH_LABEL, "position": [0, 0, 2]})
    assert resp.json() == {"queued": 2}


def test_tracking_rejects_short_position(client):
    resp = client.post("/api/tracking", json={"label": START_LABEL, "position": [0, 0]})
    assert resp.status_code == 422


def test_tick_builds_path(client):
    data = _build_path(client)
    assert data["control_points_changed"] is True
    assert len(data["segments"]) == 2
    assert data["agent"]["position"] == [0.0, 0.0, 0.0]
    assert data["signals"] == {"start_enabled": True, "jump_enabled": True, "start_label": "Start"}
    assert "spawned" in data["events"]


def test_tick_without_path(client):
    data = client.post("/api/tick", json={"dt": 0.1}).json()
    assert data["agent"] is None
    assert data["segments"] is None
    assert data["signals"]["start_enabled"] is False


def test_negative_dt_rejected(client):
    resp = client.post("/api/tick", json={"dt": -0.1})
    assert resp.status_code == 422


def test_start_command_moves_agent(client):
    _build_path(client)
    resp = client.post("/api/commands", json={"command": "start"})
    assert resp.json() == {"queued": 1}

    data = client.post("/api/tick", json={"dt": 0.5}).json()
    assert "started" in data["events"]
    assert data["agent"]["position"][2] > 0.0


def test_set_speed_requires_value(client):
    resp = client.post("/api/commands", json={"command": "set_speed"})
    assert resp.status_code == 422


def test_set_speed_value_out_of_range(client):
    resp = client.post("/api/commands", json={"command": "set_speed", "value": 1.5})
    assert resp.status_code == 422


def test_click_requires_label(client):
    resp = client.post("/api/commands", json={"command": "click"})
    assert resp.status_code == 422


def test_unknown_command_rejected(client):
    resp = client.post("/api/commands", json={"command": "fly"})
    assert resp.status_code == 422


def test_state_reports_progress(client):
    _build_path(client)
    client.post("/api/commands", json={"command": "start"})
    client.post("/api/tick", json={"dt": 0.3})

    data = client.get("/api/state").json()
    assert data["control_points"] == [[0.0, 0.0, 0.0], [0.0, 0.0, 2.0]]
    assert data["phase"] == "moving"
    assert data["t"] == pytest.approx(0.2 * 0.3 / 2)
    assert data["jumping"] is False
    assert len(data["segments"]) == 2
    assert data["scoreboard"] == {"score": 0, "speed": pytest.approx(0.2)}
    assert data["hud"]["score_text"] == "Score: 0\nSpeed: 0.0 km/h"


def test_closest_404_without_path(client):
    resp = client.get("/api/closest", params={"x": 0, "y": 0, "z": 1})
    assert resp.status_code == 404


def test_closest_on_path(client):
    _build_path(client)
    data = client.get("/api/closest", params={"x": 0.2, "y": 0.0, "z": 0.5}).json()
    assert data["t"] == pytest.approx(0.25)
    assert data["tangent"] == pytest.approx([0.0, 0.0, 1.0])
