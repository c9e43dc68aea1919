"""Explicit simulation state and the per-tick update function.

All per-tick mutable data lives in :class:`SimulationState` and is only
changed through :func:`advance`, :func:`reset` and :func:`resize_history`.

Simulated time is derived from a tick counter rather than accumulated by
repeated float addition, so ``time`` after *n* ticks is exactly
``n * time_step`` and stays monotonic.
"""

from collections import deque
from dataclasses import dataclass, field

from imusim.motion.classifier import classify
from imusim.motion.generator import MotionGenerator
from imusim.motion.trajectory import (
    TRAJECTORY_LENGTH,
    Trajectory,
    ideal_heading,
    ideal_position,
)
from imusim.motion.types import IMUSample, MotionState, Position

__all__ = [
    "DEFAULT_HISTORY_LENGTH",
    "HISTORY_LENGTHS",
    "TIME_STEP",
    "Frame",
    "SimulationState",
    "advance",
    "reset",
    "resize_history",
    "validate_history_length",
]

HISTORY_LENGTHS: tuple[int, ...] = (30, 50, 100, 200)
DEFAULT_HISTORY_LENGTH = 50
TIME_STEP = 0.1  # simulated seconds per tick


@dataclass(frozen=True)
class Frame:
    """Everything a render sink receives for one tick.

    Attributes:
        sample: The noisy sensor readout.
        motion_state: State classified from ``sample``.
        position: Ideal position of the displayed body. Computed from time
            only, never from ``sample``.
        heading: Yaw of the displayed body in radians.
    """

    sample: IMUSample
    motion_state: MotionState
    position: Position
    heading: float


def validate_history_length(length: int) -> int:
    """Return *length* if it is one of :data:`HISTORY_LENGTHS`.

    Raises:
        ValueError: If *length* is not a selectable history length.
    """
    if length not in HISTORY_LENGTHS:
        choices = ", ".join(str(n) for n in HISTORY_LENGTHS)
        raise ValueError(f"history length must be one of {choices}, got {length}")
    return length


def _new_history(length: int) -> deque[IMUSample]:
    return deque(maxlen=validate_history_length(length))


@dataclass
class SimulationState:
    """Mutable state threaded through :func:`advance`.

    Attributes:
        ticks: Number of ticks since the last reset.
        time_step: Simulated seconds added per tick.
        history: Most recent samples, oldest first, bounded by the history
            length.
        trajectory: Most recent ideal positions, oldest first.
        running: Whether the periodic timer should be producing ticks.
    """

    ticks: int = 0
    time_step: float = TIME_STEP
    history: deque[IMUSample] = field(
        default_factory=lambda: _new_history(DEFAULT_HISTORY_LENGTH)
    )
    trajectory: Trajectory = field(
        default_factory=lambda: Trajectory(TRAJECTORY_LENGTH)
    )
    running: bool = False

    @classmethod
    def create(
        cls,
        history_length: int = DEFAULT_HISTORY_LENGTH,
        trajectory_length: int = TRAJECTORY_LENGTH,
        time_step: float = TIME_STEP,
    ) -> "SimulationState":
        """Build a fresh state, validating the history length."""
        return cls(
            time_step=time_step,
            history=_new_history(history_length),
            trajectory=Trajectory(trajectory_length),
        )

    @property
    def time(self) -> float:
        """Simulated time in seconds of the next sample to be produced."""
        return self.ticks * self.time_step

    @property
    def history_length(self) -> int:
        return self.history.maxlen or 0


def advance(state: SimulationState, generator: MotionGenerator) -> Frame:
    """Run one tick: generate, classify, place, record, then advance time.

    The returned frame carries the sample taken at the current time; the
    state's time moves forward by one step afterwards.
    """
    t = state.time
    sample = generator.generate(t)
    frame = Frame(
        sample=sample,
        motion_state=classify(sample),
        position=ideal_position(t),
        heading=ideal_heading(t),
    )
    state.history.append(sample)
    state.trajectory.append(frame.position)
    state.ticks += 1
    return frame


def reset(state: SimulationState) -> None:
    """Zero simulated time and clear history and trajectory.

    ``running`` is left untouched.
    """
    state.ticks = 0
    state.history.clear()
    state.trajectory.clear()


def resize_history(state: SimulationState, length: int) -> None:
    """Change the history capacity, keeping the newest samples.

    Raises:
        ValueError: If *length* is not a selectable history length.
    """
    state.history = deque(state.history, maxlen=validate_history_length(length))
