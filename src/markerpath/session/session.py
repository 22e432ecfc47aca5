"""PathSession — owns every component and advances them in a fixed per-tick order."""

from __future__ import annotations

import logging
import random
from collections.abc import Iterable

from markerpath.config import SessionConfig
from markerpath.curve.lagrange import LagrangeCurve
from markerpath.curve.projector import ClosestPointProjector
from markerpath.curve.vector import Vec3
from markerpath.hud.renderer import HudData, HudRenderer
from markerpath.motion.controller import AgentMotionController
from markerpath.motion.models import MotionEvent, MotionPhase
from markerpath.road.builder import PathSegmentBuilder, make_segment_pool
from markerpath.road.placement import DecorationPlacer
from markerpath.session.models import ButtonSignals, Command, CommandKind, TickOutput
from markerpath.tracking.events import TrackingEvent
from markerpath.tracking.registry import ControlPointRegistry
from markerpath.tracking.scaling import ClickScaler
from markerpath.tracking.tracked_objects import TrackedObjectManager

_logger = logging.getLogger(__name__)


class PathSession:
    """Single-threaded driver for the marker path.

    The host calls :meth:`tick` once per frame. Within a tick the order is
    fixed:

    1. apply pending tracking events to the registry,
    2. rebuild road segments if the control points changed,
    3. apply commands, then advance motion and jump,
    4. reorient tracked visuals if the control points changed.

    Parameters
    ----------
    config:
        Session configuration; defaults are used if omitted.
    rng:
        Random source for decoration placement. Defaults to
        ``random.Random(config.placement_seed)``.
    """

    def __init__(self, config: SessionConfig | None = None, rng: random.Random | None = None) -> None:
        self.config = config or SessionConfig()
        self.curve = LagrangeCurve()
        self.registry = ControlPointRegistry()
        self.projector = ClosestPointProjector(self.curve, self.config.projection_resolution)
        self.builder = PathSegmentBuilder(self.curve, make_segment_pool(), self.config.road)
        self.controller = AgentMotionController(self.registry, self.curve, self.config.motion)
        self.tracked = TrackedObjectManager(self.projector, self.config.visual_labels)
        self.scaler = ClickScaler()
        self.placer = DecorationPlacer(
            self.curve,
            self.config.decoration_labels,
            rng=rng or random.Random(self.config.placement_seed),
        )
        self.hud = HudRenderer(self.config.motion)

        self._pending_tracking: list[TrackingEvent] = []
        self._pending_commands: list[Command] = []
        self._tick = 0
        self._time = 0.0

    # ------------------------------------------------------------------
    # Input queues
    # ------------------------------------------------------------------

    def submit_tracking(self, event: TrackingEvent) -> None:
        """Queue a tracking event for the next tick."""
        self._pending_tracking.append(event)

    def submit_command(self, command: Command) -> None:
        """Queue a command for the next tick."""
        self._pending_commands.append(command)

    @property
    def pending(self) -> tuple[int, int]:
        """``(tracking_events, commands)`` waiting for the next tick."""
        return len(self._pending_tracking), len(self._pending_commands)

    # ------------------------------------------------------------------
    # Tick
    # ------------------------------------------------------------------

    def tick(
        self,
        dt: float,
        commands: Iterable[Command] = (),
        tracking: Iterable[TrackingEvent] = (),
    ) -> TickOutput:
        """Advance the whole session by *dt* seconds.

        Queued input is consumed before the *commands*/*tracking* passed here.
        """
        tracking_events = self._pending_tracking + list(tracking)
        pending_commands = self._pending_commands + list(commands)
        self._pending_tracking = []
        self._pending_commands = []

        # 1. Control point updates
        changed = False
        for event in tracking_events:
            self.tracked.observe(event)
            if self.registry.apply(event):
                changed = True
        control_points = self.registry.snapshot()
        usable = self.registry.is_usable()

        # 2. Segment rebuild
        segments = None
        decorations = None
        if changed and usable:
            self.builder.rebuild(control_points)
            segments = self.builder.transforms()
        elif tracking_events and not usable:
            _logger.debug("start or finish missing; skipping road generation")

        if self.controller.ensure_agent():
            decorations = self.placer.place(control_points)

        # 3. Commands, then motion
        before = self.controller.scoreboard
        for command in pending_commands:
            self._dispatch(command)
        agent = self.controller.tick(dt)
        events = self.controller.drain_events()
        if MotionEvent.RESTARTED in events:
            decorations = self.placer.place(control_points)
        after = self.controller.scoreboard

        # 4. Tracked visual reorientation
        reoriented = self.tracked.reorient(control_points) if changed and usable else {}

        self._tick += 1
        self._time += max(0.0, dt)
        return TickOutput(
            tick=self._tick,
            time=self._time,
            signals=self.signals(),
            agent=agent,
            segments=segments,
            scoreboard=after if after != before else None,
            decorations=decorations,
            events=events,
            reoriented=reoriented,
            control_points_changed=changed,
        )

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def signals(self) -> ButtonSignals:
        finished = self.controller.state.phase is MotionPhase.COMPLETE
        return ButtonSignals(
            start_enabled=self.registry.is_usable(),
            jump_enabled=self.controller.has_agent,
            start_label="Restart" if finished else "Start",
        )

    def hud_view(self) -> dict:
        signals = self.signals()
        board = self.controller.scoreboard
        return self.hud.render(
            HudData(
                score=board.score,
                speed=board.speed,
                start_enabled=signals.start_enabled,
                jump_enabled=signals.jump_enabled,
                finished=self.controller.state.phase is MotionPhase.COMPLETE,
            )
        )

    def closest(self, position: Vec3) -> tuple[float, Vec3] | None:
        """Closest curve parameter and tangent for *position* (None without a curve)."""
        return self.projector.closest_tangent(position, self.registry.snapshot())

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _dispatch(self, command: Command) -> bool:
        kind = command.kind
        if kind is CommandKind.START:
            return self.controller.start()
        if kind is CommandKind.RESTART:
            return self.controller.restart()
        if kind is CommandKind.JUMP:
            return self.controller.jump()
        if kind is CommandKind.RESET:
            return self.controller.reset()
        if kind is CommandKind.SET_SPEED:
            if command.value is None:
                _logger.debug("set_speed without a value ignored")
                return False
            return self.controller.set_speed(command.value)
        if kind is CommandKind.CLICK:
            visual = self.tracked.get(command.label) if command.label else None
            if visual is None:
                _logger.debug("click on unknown visual %r ignored", command.label)
                return False
            self.scaler.click(visual)
            return True
        return False
