"""Tick-driven simulation loop: state, scheduler, runner and render sinks."""

from imusim.simulation.runner import SimulationRunner, SimulationStatus
from imusim.simulation.scheduler import PeriodicScheduler
from imusim.simulation.sink import NullSink, RenderSink
from imusim.simulation.state import (
    HISTORY_LENGTHS,
    Frame,
    SimulationState,
    advance,
    reset,
    resize_history,
)

__all__ = [
    "HISTORY_LENGTHS",
    "Frame",
    "NullSink",
    "PeriodicScheduler",
    "RenderSink",
    "SimulationRunner",
    "SimulationState",
    "SimulationStatus",
    "advance",
    "reset",
    "resize_history",
]
