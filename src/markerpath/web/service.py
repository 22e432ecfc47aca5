"""SessionService — hosts one PathSession behind the Web API."""

from __future__ import annotations

import threading

from markerpath.config import SessionConfig
from markerpath.curve.vector import Vec3
from markerpath.motion.models import AgentPose
from markerpath.road.models import PlacedObject, SegmentTransform
from markerpath.session.models import ButtonSignals, Command, CommandKind, TickOutput
from markerpath.session.session import PathSession
from markerpath.tracking.events import TrackingEvent
from markerpath.web.schemas import (
    ClosestResponse,
    CommandRequest,
    DecorationModel,
    PoseModel,
    ScoreboardModel,
    SegmentModel,
    SignalsModel,
    StateResponse,
    TickResponse,
    TrackingRequest,
)


class SessionService:
    """Queues web input for a :class:`PathSession` and converts its outputs to schemas.

    FastAPI runs sync endpoints on a threadpool, so every call takes a lock;
    the session itself only ever sees one caller at a time.

    Parameters
    ----------
    session:
        Session to host. A new one is built from *config* if omitted.
    config:
        Used only when *session* is None.
    """

    def __init__(self, session: PathSession | None = None, config: SessionConfig | None = None) -> None:
        self.session = session or PathSession(config)
        self._lock = threading.Lock()

    def enqueue_tracking(self, req: TrackingRequest) -> int:
        with self._lock:
            self.session.submit_tracking(TrackingEvent(label=req.label, position=Vec3.of(req.position)))
            return self.session.pending[0]

    def enqueue_command(self, req: CommandRequest) -> int:
        with self._lock:
            self.session.submit_command(
                Command(kind=CommandKind(req.command), value=req.value, label=req.label)
            )
            return self.session.pending[1]

    def tick(self, dt: float) -> TickResponse:
        with self._lock:
            return _tick_response(self.session.tick(dt))

    def state(self) -> StateResponse:
        with self._lock:
            session = self.session
            traversal = session.controller.state
            board = session.controller.scoreboard
            return StateResponse(
                control_points=[p.as_tuple() for p in session.registry.snapshot()],
                phase=traversal.phase.value,
                t=traversal.t,
                jumping=traversal.jumping,
                agent=_pose(session.controller.agent),
                segments=[_segment(s) for s in session.builder.transforms()],
                scoreboard=ScoreboardModel(score=board.score, speed=board.speed),
                signals=_signals(session.signals()),
                hud=session.hud_view(),
            )

    def closest(self, position: Vec3) -> ClosestResponse | None:
        with self._lock:
            result = self.session.closest(position)
        if result is None:
            return None
        t, tangent = result
        return ClosestResponse(t=t, tangent=tangent.as_tuple())


# ---------------------------------------------------------------------------
# Conversion helpers
# ---------------------------------------------------------------------------


def _pose(pose: AgentPose | None) -> PoseModel | None:
    if pose is None:
        return None
    return PoseModel(position=pose.position.as_tuple(), forward=pose.forward.as_tuple())


def _segment(s: SegmentTransform) -> SegmentModel:
    return SegmentModel(position=s.position.as_tuple(), forward=s.forward.as_tuple(), length_scale=s.length_scale)


def _decoration(d: PlacedObject) -> DecorationModel:
    return DecorationModel(label=d.label, t=d.t, position=d.position.as_tuple(), forward=d.forward.as_tuple())


def _signals(s: ButtonSignals) -> SignalsModel:
    return SignalsModel(start_enabled=s.start_enabled, jump_enabled=s.jump_enabled, start_label=s.start_label)


def _tick_response(out: TickOutput) -> TickResponse:
    return TickResponse(
        tick=out.tick,
        time=out.time,
        signals=_signals(out.signals),
        agent=_pose(out.agent),
        segments=None if out.segments is None else [_segment(s) for s in out.segments],
        scoreboard=(
            None
            if out.scoreboard is None
            else ScoreboardModel(score=out.scoreboard.score, speed=out.scoreboard.speed)
        ),
        decorations=None if out.decorations is None else [_decoration(d) for d in out.decorations],
        events=[e.value for e in out.events],
        reoriented={label: v.as_tuple() for label, v in out.reoriented.items()},
        control_points_changed=out.control_points_changed,
    )
