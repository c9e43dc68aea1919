"""Simulation runner wiring generator, state, scheduler and render sink."""

import logging
from dataclasses import dataclass

from imusim.motion.generator import MotionGenerator
from imusim.motion.trajectory import TRAJECTORY_LENGTH
from imusim.motion.types import IMUSample, Position
from imusim.simulation.scheduler import PeriodicScheduler
from imusim.simulation.sink import NullSink, RenderSink
from imusim.simulation.state import (
    DEFAULT_HISTORY_LENGTH,
    TIME_STEP,
    Frame,
    SimulationState,
    advance,
    reset,
    resize_history,
)

__all__ = ["SimulationRunner", "SimulationStatus"]

logger = logging.getLogger(__name__)

TICK_INTERVAL = 0.1  # wall-clock seconds between ticks


@dataclass(frozen=True)
class SimulationStatus:
    """Snapshot of the runner's observable state."""

    running: bool
    time: float
    history_length: int
    history_size: int
    trajectory_size: int
    generator: str


class SimulationRunner:
    """Drive the generate -> classify -> publish loop from a periodic timer.

    The runner is single-threaded: every operation, including the timer
    callback, runs on the same event loop.

    Args:
        generator: Motion model producing samples.
        sink: Render sink receiving one frame per tick.
        history_length: Initial history capacity (one of 30, 50, 100, 200).
        trajectory_length: Trajectory capacity.
        tick_interval: Wall-clock seconds between ticks.
        time_step: Simulated seconds per tick.
    """

    def __init__(
        self,
        generator: MotionGenerator,
        sink: RenderSink | None = None,
        history_length: int = DEFAULT_HISTORY_LENGTH,
        trajectory_length: int = TRAJECTORY_LENGTH,
        tick_interval: float = TICK_INTERVAL,
        time_step: float = TIME_STEP,
    ) -> None:
        self._generator = generator
        self._sink = sink if sink is not None else NullSink()
        self.state = SimulationState.create(
            history_length=history_length,
            trajectory_length=trajectory_length,
            time_step=time_step,
        )
        self._scheduler = PeriodicScheduler(
            tick_interval, self._timer_tick, on_error=self._timer_failed
        )
        self._remaining_ticks: int | None = None

    @property
    def running(self) -> bool:
        return self.state.running

    @property
    def scheduler(self) -> PeriodicScheduler:
        return self._scheduler

    def tick(self) -> Frame:
        """Produce, record and publish one frame."""
        frame = advance(self.state, self._generator)
        self._sink.publish(frame)
        return frame

    def _timer_tick(self) -> None:
        self.tick()
        if self._remaining_ticks is not None:
            self._remaining_ticks -= 1
            if self._remaining_ticks == 0:
                self.pause()

    def _timer_failed(self, exc: Exception) -> None:
        self.state.running = False
        self._remaining_ticks = None
        logger.error("Simulation stopped at t=%.2fs: %s", self.state.time, exc)

    def start(self, tick_limit: int | None = None) -> None:
        """Start the periodic timer. Requires a running event loop.

        Args:
            tick_limit: Pause automatically after this many timer ticks.
                ``None`` runs until paused.

        Raises:
            ValueError: If *tick_limit* is not positive.
        """
        if tick_limit is not None and tick_limit <= 0:
            raise ValueError(f"tick_limit must be positive, got {tick_limit}")
        self._remaining_ticks = tick_limit
        self._scheduler.start()
        self.state.running = True
        logger.info("Simulation started at t=%.2fs", self.state.time)

    def pause(self) -> None:
        """Stop the periodic timer, keeping history and time."""
        self._remaining_ticks = None
        self._scheduler.stop()
        self.state.running = False
        logger.info("Simulation paused at t=%.2fs", self.state.time)

    def toggle(self) -> bool:
        """Flip between running and paused; return the new running flag."""
        if self.state.running:
            self.pause()
        else:
            self.start()
        return self.state.running

    def reset(self) -> None:
        """Zero simulated time and clear history; the timer keeps its state."""
        reset(self.state)
        logger.info("Simulation reset")

    def set_history_length(self, length: int) -> None:
        """Change the history capacity.

        Raises:
            ValueError: If *length* is not one of 30, 50, 100, 200.
        """
        resize_history(self.state, length)
        logger.info("History length set to %d", length)

    def history(self) -> list[IMUSample]:
        return list(self.state.history)

    def trajectory(self) -> list[Position]:
        return self.state.trajectory.as_list()

    def status(self) -> SimulationStatus:
        return SimulationStatus(
            running=self.state.running,
            time=self.state.time,
            history_length=self.state.history_length,
            history_size=len(self.state.history),
            trajectory_size=len(self.state.trajectory),
            generator=self._generator.name,
        )
