"""Run the IMU motion simulation in the terminal.

Prints one line per tick::

    t=  1.20s | A:  -3.12   -2.10   10.91 | G:    1.40    4.80   28.11 | Normal move

Stop with Ctrl+C, or pass ``--ticks`` to stop after a fixed number of ticks.
Defaults come from ``IMUSIM_``-prefixed environment variables. Run it with
``python -m imusim`` or the ``imusim`` console script.
"""

import argparse
import asyncio
import contextlib
import logging
import sys
from typing import TextIO

from imusim.config import Settings, configure_logging
from imusim.motion import create_generator
from imusim.simulation import HISTORY_LENGTHS, Frame, SimulationRunner

logger = logging.getLogger(__name__)


class ConsoleSink:
    """Render sink writing one text line per frame."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream if stream is not None else sys.stdout

    def publish(self, frame: Frame) -> None:
        self._stream.write(format_frame_line(frame) + "\n")
        self._stream.flush()


def format_frame_line(frame: Frame) -> str:
    s = frame.sample
    return (
        f"t={s.time:6.2f}s"
        f" | A: {s.accel_x:7.2f} {s.accel_y:7.2f} {s.accel_z:7.2f}"
        f" | G: {s.gyro_x:7.2f} {s.gyro_y:7.2f} {s.gyro_z:7.2f}"
        f" | {frame.motion_state.label}"
    )


def _positive_int(value: str) -> int:
    number = int(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be positive, got {value}")
    return number


def parse_args(argv: list[str] | None, defaults: Settings) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Simulated IMU motion stream")
    parser.add_argument(
        "--generator",
        choices=["circular", "oscillatory"],
        default=defaults.generator,
        help=f"Motion model (default: {defaults.generator})",
    )
    parser.add_argument(
        "--ticks",
        type=_positive_int,
        default=None,
        help="Stop after this many ticks (default: run until Ctrl+C)",
    )
    parser.add_argument(
        "--interval",
        type=float,
        default=defaults.tick_interval_seconds,
        help=f"Seconds between ticks (default: {defaults.tick_interval_seconds})",
    )
    parser.add_argument(
        "--history-length",
        type=int,
        choices=HISTORY_LENGTHS,
        default=defaults.history_length,
        help=f"Samples kept in history (default: {defaults.history_length})",
    )
    return parser.parse_args(argv)


async def run(runner: SimulationRunner, ticks: int | None) -> None:
    """Start the runner and wait until it pauses after *ticks* ticks, or forever."""
    runner.start(tick_limit=ticks)
    try:
        while runner.scheduler.running:
            await asyncio.sleep(runner.scheduler.interval / 2)
    finally:
        runner.pause()


def main(argv: list[str] | None = None) -> None:
    defaults = Settings()
    configure_logging(defaults.log_level)
    args = parse_args(argv, defaults)

    runner = SimulationRunner(
        generator=create_generator(args.generator),
        sink=ConsoleSink(),
        history_length=args.history_length,
        trajectory_length=defaults.trajectory_length,
        tick_interval=args.interval,
        time_step=defaults.time_step_seconds,
    )
    logger.info("Running %s generator, Ctrl+C to stop", args.generator)
    with contextlib.suppress(KeyboardInterrupt):
        asyncio.run(run(runner, args.ticks))
    print("\nStopped.")

