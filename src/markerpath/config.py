"""Runtime configuration — dataclass defaults with ``MARKERPATH_*`` environment overrides.

Entry points call :func:`dotenv.load_dotenv` before :meth:`SessionConfig.from_env`
so a ``.env`` file in the project root is honoured.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum

_ENV_PREFIX = "MARKERPATH_"


class SpeedMode(str, Enum):
    """Which mechanism owns the agent's speed.

    ``SCORE``: every finish adds ``speed_increment``; slider input is ignored.
    ``SLIDER``: speed follows the external slider; finishing only scores.
    """

    SCORE = "score"
    SLIDER = "slider"


@dataclass
class RoadConfig:
    """Tessellation settings for the path segment builder."""

    segment_length: float | None = None
    """Bounding length of one visual segment along its forward axis."""

    fallback_segment_length: float = 1.0
    turn_threshold_deg: float = 20.0
    gentle_scale: tuple[float, float] = (2.1, 1.6)
    """Forward scale at 0° and at the threshold angle."""

    sharp_scale: tuple[float, float] = (1.6, 1.1)
    """Forward scale at the threshold angle and at ``max_turn_deg``."""

    max_turn_deg: float = 90.0
    outward_offset_fraction: float = 0.1
    default_direction: tuple[float, float, float] = (0.0, 0.0, 1.0)


@dataclass
class MotionConfig:
    """Traversal and jump tuning for the agent."""

    initial_speed: float = 0.2
    speed_increment: float = 0.1
    max_speed: float = 1.0
    jump_height: float = 0.04
    jump_duration: float = 0.8  # seconds
    lookahead: float = 0.01
    speed_mode: SpeedMode = SpeedMode.SCORE


@dataclass
class SessionConfig:
    """Everything a :class:`~markerpath.session.PathSession` needs."""

    road: RoadConfig = field(default_factory=RoadConfig)
    motion: MotionConfig = field(default_factory=MotionConfig)
    projection_resolution: int = 100
    visual_labels: tuple[str, ...] = ()
    decoration_labels: tuple[str, ...] = ()
    placement_seed: int | None = None

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> SessionConfig:
        """Build a config from ``MARKERPATH_*`` variables, defaulting anything unset.

        Raises:
            ValueError: If a variable is set but cannot be parsed.
        """
        env = os.environ if environ is None else environ
        cfg = cls()

        cfg.road.segment_length = _get_float(env, "SEGMENT_LENGTH", cfg.road.segment_length)
        cfg.motion.initial_speed = _get_float(env, "INITIAL_SPEED", cfg.motion.initial_speed)
        cfg.motion.speed_increment = _get_float(env, "SPEED_INCREMENT", cfg.motion.speed_increment)
        cfg.motion.max_speed = _get_float(env, "MAX_SPEED", cfg.motion.max_speed)
        cfg.motion.jump_height = _get_float(env, "JUMP_HEIGHT", cfg.motion.jump_height)
        cfg.motion.jump_duration = _get_float(env, "JUMP_DURATION", cfg.motion.jump_duration)

        mode = env.get(_ENV_PREFIX + "SPEED_MODE")
        if mode:
            try:
                cfg.motion.speed_mode = SpeedMode(mode.strip().lower())
            except ValueError as exc:
                raise ValueError(f"{_ENV_PREFIX}SPEED_MODE: unknown mode {mode!r}") from exc

        cfg.projection_resolution = _get_int(env, "PROJECTION_RESOLUTION", cfg.projection_resolution)

        cfg.visual_labels = _get_list(env, "VISUAL_LABELS", cfg.visual_labels)
        cfg.decoration_labels = _get_list(env, "DECORATIONS", cfg.decoration_labels)

        cfg.placement_seed = _get_int(env, "PLACEMENT_SEED", cfg.placement_seed)
        return cfg


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _get_float(env: Mapping[str, str], name: str, default: float | None) -> float | None:
    raw = env.get(_ENV_PREFIX + name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise ValueError(f"{_ENV_PREFIX}{name}: expected a number, got {raw!r}") from exc


def _get_int(env: Mapping[str, str], name: str, default: int | None) -> int | None:
    raw = env.get(_ENV_PREFIX + name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{_ENV_PREFIX}{name}: expected an integer, got {raw!r}") from exc


def _get_list(env: Mapping[str, str], name: str, default: tuple[str, ...]) -> tuple[str, ...]:
    raw = env.get(_ENV_PREFIX + name)
    if raw is None:
        return default
    return tuple(item.strip() for item in raw.split(",") if item.strip())
