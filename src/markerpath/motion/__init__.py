"""Agent traversal along the curve: start/restart/reset, jump, speed control."""

from markerpath.motion.controller import AgentMotionController
from markerpath.motion.models import AgentPose, MotionEvent, MotionPhase, Scoreboard, TraversalState

__all__ = [
    "AgentMotionController",
    "AgentPose",
    "MotionEvent",
    "MotionPhase",
    "Scoreboard",
    "TraversalState",
]
