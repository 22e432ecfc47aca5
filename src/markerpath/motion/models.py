"""Traversal state and outputs of the agent motion controller."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from markerpath.curve.vector import FORWARD, Vec3


class MotionPhase(str, Enum):
    """Horizontal traversal phase. Jumping is tracked separately."""

    IDLE = "idle"
    MOVING = "moving"
    COMPLETE = "complete"
    """Reached the finish; waiting for Start/Restart."""


class MotionEvent(str, Enum):
    SPAWNED = "spawned"
    STARTED = "started"
    REACHED_END = "reached_end"
    RESTARTED = "restarted"
    RESET = "reset"
    JUMP_STARTED = "jump_started"
    JUMP_LANDED = "jump_landed"
    SPEED_CHANGED = "speed_changed"


@dataclass
class TraversalState:
    """Mutable traversal counters owned by the controller."""

    t: float = 0.0
    """Curve parameter [0.0, 1.0]."""

    speed: float = 0.2
    score: int = 0
    phase: MotionPhase = MotionPhase.IDLE

    jumping: bool = False
    jump_timer: float = 0.0
    """Seconds elapsed in the current jump."""

    jump_base_y: float = 0.0
    """Agent height when the jump started."""


@dataclass(frozen=True)
class AgentPose:
    """Agent position and facing direction for one tick."""

    position: Vec3
    forward: Vec3 = FORWARD


@dataclass(frozen=True)
class Scoreboard:
    score: int
    speed: float
