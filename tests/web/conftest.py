"""Shared fixtures for web tests."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from markerpath.web.app import app, get_service
from markerpath.web.service import SessionService


@pytest.fixture
def service():
    """Fresh session service per test, so state never leaks between tests."""
    return SessionService()


@pytest.fixture
def client(service):
    """FastAPI test client wired to the per-test service."""
    app.dependency_overrides[get_service] = lambda: service
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()

