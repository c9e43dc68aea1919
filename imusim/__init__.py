"""Simulated IMU streams with motion state classification."""

from imusim.motion import (
    CircularMotionGenerator,
    IMUSample,
    MotionState,
    OscillatoryMotionGenerator,
    Position,
    classify,
    create_generator,
)
from imusim.simulation import Frame, SimulationRunner

__all__ = [
    "CircularMotionGenerator",
    "Frame",
    "IMUSample",
    "MotionState",
    "OscillatoryMotionGenerator",
    "Position",
    "SimulationRunner",
    "classify",
    "create_generator",
]
