"""AgentMotionController — time-driven traversal along the curve plus a parabolic jump.

Horizontal phase: ``IDLE → MOVING → COMPLETE → (restart) IDLE``. Jumping is an
independent flag, so the agent keeps advancing while airborne.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from markerpath.config import MotionConfig, SpeedMode
from markerpath.curve.lagrange import LagrangeCurve
from markerpath.curve.vector import FORWARD, Vec3
from markerpath.motion.models import AgentPose, MotionEvent, MotionPhase, Scoreboard, TraversalState
from markerpath.tracking.registry import ControlPointRegistry

_logger = logging.getLogger(__name__)

_LANDING_EPS = 1e-9


class AgentMotionController:
    """Advance the agent along the curve once per tick.

    Progress per tick is ``speed * dt / control_point_count``, so adding
    obstacles slows the pace as well as reshaping the path.

    Every command is a silent no-op (returning False) while no agent exists.

    Parameters
    ----------
    registry:
        Source of the current control points, re-read every tick.
    curve:
        Curve model used for positions.
    config:
        Speed, jump and lookahead tuning.
    """

    def __init__(
        self,
        registry: ControlPointRegistry,
        curve: LagrangeCurve,
        config: MotionConfig | None = None,
    ) -> None:
        self.registry = registry
        self.curve = curve
        self.config = config or MotionConfig()
        if self.config.jump_duration <= 0:
            raise ValueError("jump_duration must be > 0")
        if self.config.max_speed < self.config.initial_speed:
            raise ValueError("max_speed must be >= initial_speed")
        self.state = TraversalState(speed=self.config.initial_speed)
        self._agent: AgentPose | None = None
        self._events: list[MotionEvent] = []

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def agent(self) -> AgentPose | None:
        return self._agent

    @property
    def has_agent(self) -> bool:
        return self._agent is not None

    @property
    def scoreboard(self) -> Scoreboard:
        return Scoreboard(score=self.state.score, speed=self.state.speed)

    def drain_events(self) -> list[MotionEvent]:
        """Return and clear the events emitted since the last drain."""
        events, self._events = self._events, []
        return events

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def ensure_agent(self) -> bool:
        """Spawn the agent at the start point once the path is usable.

        Returns True only on the call that spawns it.
        """
        if self._agent is not None or not self.registry.is_usable():
            return False
        self._place_at(0.0, self.registry.snapshot())
        self._emit(MotionEvent.SPAWNED)
        _logger.info("agent spawned at %s", self._agent.position)
        return True

    def start(self) -> bool:
        """Begin moving; from the COMPLETE state this acts as :meth:`restart`."""
        if self._agent is None:
            _logger.debug("start ignored: no agent")
            return False
        if self.state.phase is MotionPhase.COMPLETE:
            return self.restart()
        if self.state.phase is not MotionPhase.IDLE or not self.registry.is_usable():
            return False
        self.state.phase = MotionPhase.MOVING
        self._emit(MotionEvent.STARTED)
        return True

    def restart(self) -> bool:
        """Teleport back to the start after finishing.

        Score, speed and any jump in progress carry over; only :meth:`reset`
        cancels a jump.
        """
        if self._agent is None or self.state.phase is not MotionPhase.COMPLETE:
            _logger.debug("restart ignored in phase %s", self.state.phase.value)
            return False
        self._return_to_start()
        self.state.phase = MotionPhase.IDLE
        self._emit(MotionEvent.RESTARTED)
        _logger.info("agent restarted (score=%d, speed=%.2f)", self.state.score, self.state.speed)
        return True

    def jump(self) -> bool:
        """Start a jump unless one is already in progress."""
        if self._agent is None or self.state.jumping:
            return False
        self.state.jumping = True
        self.state.jump_timer = 0.0
        self.state.jump_base_y = self._agent.position.y
        self._emit(MotionEvent.JUMP_STARTED)
        return True

    def set_speed(self, value: float) -> bool:
        """Map a slider value in [0, 1] onto ``[initial_speed, max_speed]``.

        Only honoured in :attr:`SpeedMode.SLIDER`; in score mode speed belongs
        to the finish bonus.
        """
        if self.config.speed_mode is not SpeedMode.SLIDER:
            _logger.debug("set_speed ignored in %s mode", self.config.speed_mode.value)
            return False
        u = max(0.0, min(1.0, value))
        speed = self.config.initial_speed + u * (self.config.max_speed - self.config.initial_speed)
        if speed == self.state.speed:
            return False
        self.state.speed = speed
        self._emit(MotionEvent.SPEED_CHANGED)
        return True

    def reset(self) -> bool:
        """Return to IDLE at ``t = 0`` with initial speed and zero score; cancels any jump."""
        self.state.t = 0.0
        self.state.speed = self.config.initial_speed
        self.state.score = 0
        self.state.phase = MotionPhase.IDLE
        self.state.jumping = False
        self.state.jump_timer = 0.0
        if self._agent is not None:
            self._return_to_start()
        self._emit(MotionEvent.RESET)
        _logger.info("agent reset")
        return True

    # ------------------------------------------------------------------
    # Per-tick update
    # ------------------------------------------------------------------

    def tick(self, dt: float) -> AgentPose | None:
        """Advance traversal and jump by *dt* seconds; return the new pose."""
        if self._agent is None:
            return None
        dt = max(0.0, dt)
        if self.state.phase is MotionPhase.MOVING:
            self._advance(dt)
        if self.state.jumping:
            self._advance_jump(dt)
        return self._agent

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _advance(self, dt: float) -> None:
        control_points = self.registry.snapshot()
        if not self.curve.is_usable(control_points):
            return

        state = self.state
        state.t += state.speed * dt / len(control_points)
        if state.t < 1.0:
            self._place_at(state.t, control_points)
            return

        state.t = 1.0
        self._place_at(1.0, control_points)
        state.phase = MotionPhase.COMPLETE
        state.score += 1
        if self.config.speed_mode is SpeedMode.SCORE:
            state.speed += self.config.speed_increment
        self._emit(MotionEvent.REACHED_END)
        _logger.info("reached end: score=%d speed=%.2f", state.score, state.speed)

    def _advance_jump(self, dt: float) -> None:
        state = self.state
        state.jump_timer += dt
        u = state.jump_timer / self.config.jump_duration
        position = self._agent.position

        if u >= 1.0 - _LANDING_EPS:
            self._agent = AgentPose(position=position.with_y(state.jump_base_y), forward=self._agent.forward)
            state.jumping = False
            state.jump_timer = 0.0
            self._emit(MotionEvent.JUMP_LANDED)
            return

        height = 4.0 * self.config.jump_height * u * (1.0 - u)
        self._agent = AgentPose(position=position.with_y(state.jump_base_y + height), forward=self._agent.forward)

    def _place_at(self, t: float, control_points: Sequence[Vec3]) -> None:
        """Move the agent to the curve at *t*, facing toward ``t + lookahead``."""
        position = self.curve.point(t, control_points)
        if position is None:
            return
        ahead = self.curve.point(min(t + self.config.lookahead, 1.0), control_points)
        direction = (ahead - position).normalized()
        if direction.is_zero():
            direction = self._agent.forward if self._agent is not None else FORWARD
        self._agent = AgentPose(position=position, forward=direction)

    def _return_to_start(self) -> None:
        self.state.t = 0.0
        self._place_at(0.0, self.registry.snapshot())

    def _emit(self, event: MotionEvent) -> None:
        self._events.append(event)
