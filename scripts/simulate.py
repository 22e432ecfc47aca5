"""Headless simulation — feeds a marker layout to a PathSession and prints each run.

Usage:
    uv run python scripts/simulate.py
    uv run python scripts/simulate.py --obstacle 0.3,0,0.5 --obstacle -0.2,0,1.0
    uv run python scripts/simulate.py --runs 3 --jump-every 1.5 --dt 0.02
    uv run python scripts/simulate.py --speed-mode slider --slider 0.5
"""

from __future__ import annotations

import argparse
import logging
import sys

from dotenv import load_dotenv

load_dotenv()

from markerpath.config import SessionConfig, SpeedMode  # noqa: E402
from markerpath.curve.vector import Vec3  # noqa: E402
from markerpath.motion.models import MotionEvent  # noqa: E402
from markerpath.session import Command, PathSession  # noqa: E402
from markerpath.tracking.events import FINISH_LABEL, OBSTACLE_PREFIX, START_LABEL, TrackingEvent  # noqa: E402


def _parse_vec(text: str) -> Vec3:
    try:
        return Vec3.of(float(v) for v in text.split(","))
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected x,y,z — got {text!r}") from exc


def _layout(args: argparse.Namespace) -> list[TrackingEvent]:
    events = [TrackingEvent(START_LABEL, args.start)]
    for i, pos in enumerate(args.obstacle, start=1):
        events.append(TrackingEvent(f"{OBSTACLE_PREFIX}-{i}", pos))
    events.append(TrackingEvent(FINISH_LABEL, args.finish))
    return events


def main() -> None:
    ap = argparse.ArgumentParser(description="Marker path — headless traversal simulation")
    ap.add_argument("--start", type=_parse_vec, default=Vec3(0.0, 0.0, 0.0), help="Start marker x,y,z")
    ap.add_argument("--finish", type=_parse_vec, default=Vec3(0.0, 0.0, 2.0), help="Finish marker x,y,z")
    ap.add_argument("--obstacle", type=_parse_vec, action="append", default=[], help="Obstacle x,y,z (repeatable)")
    ap.add_argument("--runs", type=int, default=2, help="Number of completed runs to simulate")
    ap.add_argument("--dt", type=float, default=1.0 / 60.0, help="Tick interval in seconds")
    ap.add_argument("--jump-every", type=float, default=0.0, help="Jump interval in seconds (0 = never)")
    ap.add_argument("--speed-mode", choices=[m.value for m in SpeedMode], default=None)
    ap.add_argument("--slider", type=float, default=None, help="Slider value [0, 1] (slider mode)")
    ap.add_argument("--max-ticks", type=int, default=200_000, help="Safety cap on ticks")
    ap.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = ap.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    cfg = SessionConfig.from_env()
    if args.speed_mode:
        cfg.motion.speed_mode = SpeedMode(args.speed_mode)
    session = PathSession(cfg)

    out = session.tick(0.0, tracking=_layout(args))
    if not out.signals.start_enabled:
        print("Start or finish marker missing — nothing to simulate.", file=sys.stderr)
        sys.exit(1)
    print(f"Path built: {len(out.segments or ())} segments, {len(session.registry)} control points.")

    commands = [Command.start()]
    if args.slider is not None:
        commands.insert(0, Command.set_speed(args.slider))

    completed = 0
    since_jump = 0.0
    for _ in range(args.max_ticks):
        if args.jump_every > 0 and since_jump >= args.jump_every:
            commands.append(Command.jump())
            since_jump = 0.0
        out = session.tick(args.dt, commands=commands)
        commands = []
        since_jump += args.dt

        for event in out.events:
            if event is MotionEvent.JUMP_STARTED:
                print(f"  t={session.controller.state.t:.3f}  jump")
        if MotionEvent.REACHED_END in out.events:
            completed += 1
            print(f"Run {completed} finished at {out.time:.2f}s")
            print("  " + session.hud_view()["score_text"].replace("\n", "  |  "))
            if completed >= args.runs:
                break
            commands = [Command.restart(), Command.start()]
    else:
        print(f"Stopped after {args.max_ticks} ticks without finishing.", file=sys.stderr)


if __name__ == "__main__":
    main()
