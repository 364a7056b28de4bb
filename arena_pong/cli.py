"""
Command line entry point for Arena Pong
"""

import argparse
import logging
import random

from arena_pong.core.entities import InputState
from arena_pong.core.physics import PhysicsEngine


def run_headless(frames: int, dt: float, seed: int | None = None) -> tuple[int, int]:
    """Run the simulation without a window, with idle paddles, and return the score"""
    engine = PhysicsEngine(rng=random.Random(seed))
    inputs = InputState.idle()
    for _ in range(frames):
        engine.step(inputs, dt)
    return engine.score


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Arena Pong")
    parser.add_argument("--headless", action="store_true", help="Run without a window")
    parser.add_argument("--frames", type=int, default=3600, help="Frames to simulate headless")
    parser.add_argument("--dt", type=float, default=1 / 60, help="Seconds per headless frame")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the ball re-aim")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    if args.dt < 0:
        raise SystemExit("--dt must not be negative")

    if args.headless:
        left, right = run_headless(args.frames, args.dt, args.seed)
        print(f"Final score: {left} - {right}")
        return

    # Imported here so headless runs never open a display
    from arena_pong.gui.game_app import main as gui_main

    gui_main()
