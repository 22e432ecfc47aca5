"""HUD rendering — data formatting for the score panel and buttons."""

from __future__ import annotations

from dataclasses import dataclass

from markerpath.config import MotionConfig


@dataclass
class HudData:
    """Snapshot of data to display on the HUD.

    Parameters
    ----------
    score:
        Number of completed runs since the last reset.
    speed:
        Current traversal speed (curve parameter units per second, before the
        control-point scaling).
    start_enabled:
        Whether the start button can be pressed.
    jump_enabled:
        Whether the jump button can be pressed.
    finished:
        True while the agent waits at the finish for a restart.
    """

    score: int
    speed: float
    start_enabled: bool = False
    jump_enabled: bool = False
    finished: bool = False


class HudRenderer:
    """Formats :class:`HudData` for display.

    Pure data transformations with no side effects.

    Parameters
    ----------
    motion:
        Speed range used to normalise the displayed speed.
    display_scale_kmh:
        Displayed speed at ``max_speed``.
    """

    def __init__(self, motion: MotionConfig | None = None, display_scale_kmh: float = 20.0) -> None:
        self.motion = motion or MotionConfig()
        self.display_scale_kmh = display_scale_kmh

    def speed_kmh(self, speed: float) -> float:
        """Map traversal speed to the displayed km/h value.

        Examples
        --------
        >>> HudRenderer().speed_kmh(0.2)
        0.0
        >>> HudRenderer().speed_kmh(1.0)
        20.0
        """
        span = self.motion.max_speed - self.motion.initial_speed
        if span <= 0:
            return 0.0
        return (speed - self.motion.initial_speed) / span * self.display_scale_kmh

    def score_text(self, score: int, speed: float) -> str:
        return f"Score: {score}\nSpeed: {self.speed_kmh(speed):.1f} km/h"

    def render(self, data: HudData) -> dict:
        """Return a display-ready dict from a :class:`HudData` snapshot.

        Returns
        -------
        dict with keys:
            ``score_text``    – two-line score/speed label
            ``start_label``   – ``'Restart'`` while finished, else ``'Start'``
            ``start_enabled`` – bool
            ``jump_enabled``  – bool
        """
        return {
            "score_text": self.score_text(data.score, data.speed),
            "start_label": "Restart" if data.finished else "Start",
            "start_enabled": data.start_enabled,
            "jump_enabled": data.jump_enabled,
        }
