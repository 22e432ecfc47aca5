"""Tick-driven session wiring registry, curve, builder, controller and tracked visuals."""

from markerpath.session.models import ButtonSignals, Command, CommandKind, TickOutput
from markerpath.session.session import PathSession

__all__ = ["ButtonSignals", "Command", "CommandKind", "PathSession", "TickOutput"]
