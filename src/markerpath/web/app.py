"""FastAPI host driver — forwards tracking input and commands to a PathSession.

Run with::

    uv run uvicorn markerpath.web.app:app --reload
"""

from __future__ import annotations

import logging
from functools import lru_cache

from dotenv import load_dotenv
from fastapi import Depends, FastAPI, HTTPException

from markerpath.config import SessionConfig
from markerpath.curve.vector import Vec3
from markerpath.web.schemas import (
    ClosestResponse,
    CommandRequest,
    HealthResponse,
    QueuedResponse,
    StateResponse,
    TickRequest,
    TickResponse,
    TrackingRequest,
)
from markerpath.web.service import SessionService

load_dotenv()  # loads .env from project root; must run before env vars are consumed

_logger = logging.getLogger(__name__)

VERSION = "0.1.0"

app = FastAPI(title="Marker Path", version=VERSION)


@lru_cache(maxsize=1)
def get_service() -> SessionService:
    """Process-wide session service, built from the environment on first use."""
    _logger.info("creating path session")
    return SessionService(config=SessionConfig.from_env())


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------


@app.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    return HealthResponse(status="ok", version=VERSION)


@app.post("/api/tracking", response_model=QueuedResponse)
def post_tracking(req: TrackingRequest, svc: SessionService = Depends(get_service)) -> QueuedResponse:
    """Queue a marker sighting for the next tick."""
    return QueuedResponse(queued=svc.enqueue_tracking(req))


@app.post("/api/commands", response_model=QueuedResponse)
def post_command(req: CommandRequest, svc: SessionService = Depends(get_service)) -> QueuedResponse:
    """Queue a UI command for the next tick."""
    return QueuedResponse(queued=svc.enqueue_command(req))


@app.post("/api/tick", response_model=TickResponse)
def post_tick(req: TickRequest, svc: SessionService = Depends(get_service)) -> TickResponse:
    """Advance the session by ``dt`` seconds, consuming everything queued."""
    return svc.tick(req.dt)


@app.get("/api/state", response_model=StateResponse)
def get_state(svc: SessionService = Depends(get_service)) -> StateResponse:
    return svc.state()


@app.get("/api/closest", response_model=ClosestResponse)
def get_closest(
    x: float, y: float, z: float, svc: SessionService = Depends(get_service)
) -> ClosestResponse:
    """Closest curve parameter and tangent for a world position."""
    result = svc.closest(Vec3(x, y, z))
    if result is None:
        raise HTTPException(status_code=404, detail="Path not available yet")
    return result
