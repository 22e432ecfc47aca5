"""HUD formatting for score, speed and button state."""

from markerpath.hud.renderer import HudData, HudRenderer

__all__ = ["HudData", "HudRenderer"]
