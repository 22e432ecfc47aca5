"""Commands accepted by a path session and the outputs it produces each tick."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from markerpath.curve.vector import Vec3
from markerpath.motion.models import AgentPose, MotionEvent, Scoreboard
from markerpath.road.models import PlacedObject, SegmentTransform


class CommandKind(str, Enum):
    START = "start"
    RESTART = "restart"
    JUMP = "jump"
    SET_SPEED = "set_speed"
    RESET = "reset"
    CLICK = "click"


@dataclass(frozen=True)
class Command:
    """A discrete UI (or collision) command.

    ``value`` is required for ``SET_SPEED`` and ``label`` for ``CLICK``.
    """

    kind: CommandKind
    value: float | None = None
    label: str | None = None

    @classmethod
    def start(cls) -> Command:
        return cls(CommandKind.START)

    @classmethod
    def restart(cls) -> Command:
        return cls(CommandKind.RESTART)

    @classmethod
    def jump(cls) -> Command:
        return cls(CommandKind.JUMP)

    @classmethod
    def reset(cls) -> Command:
        return cls(CommandKind.RESET)

    @classmethod
    def set_speed(cls, value: float) -> Command:
        return cls(CommandKind.SET_SPEED, value=value)

    @classmethod
    def click(cls, label: str) -> Command:
        return cls(CommandKind.CLICK, label=label)


@dataclass(frozen=True)
class ButtonSignals:
    start_enabled: bool
    """Both start and finish markers are known."""

    jump_enabled: bool
    """An agent exists."""

    start_label: str = "Start"


@dataclass
class TickOutput:
    """Everything the host needs to render after one tick.

    ``segments``, ``scoreboard`` and ``decorations`` are None when unchanged
    this tick.
    """

    tick: int
    time: float
    signals: ButtonSignals
    agent: AgentPose | None = None
    segments: tuple[SegmentTransform, ...] | None = None
    scoreboard: Scoreboard | None = None
    decorations: tuple[PlacedObject, ...] | None = None
    events: list[MotionEvent] = field(default_factory=list)
    reoriented: dict[str, Vec3] = field(default_factory=dict)
    control_points_changed: bool = False
