"""Synthetic IMU sample generation and motion state classification."""

from imusim.motion.arrows import Arrow, acceleration_arrow, gyro_arrow
from imusim.motion.classifier import (
    classify,
    classify_magnitudes,
    dynamic_acceleration,
    gyro_magnitude,
)
from imusim.motion.generator import (
    CircularMotionGenerator,
    MotionGenerator,
    OscillatoryMotionGenerator,
    create_generator,
    no_noise,
    uniform_noise,
)
from imusim.motion.trajectory import Trajectory, ideal_heading, ideal_position
from imusim.motion.types import IMUSample, MotionState, Position

__all__ = [
    "Arrow",
    "CircularMotionGenerator",
    "IMUSample",
    "MotionGenerator",
    "MotionState",
    "OscillatoryMotionGenerator",
    "Position",
    "Trajectory",
    "acceleration_arrow",
    "classify",
    "classify_magnitudes",
    "create_generator",
    "dynamic_acceleration",
    "gyro_magnitude",
    "gyro_arrow",
    "ideal_heading",
    "ideal_position",
    "no_noise",
    "uniform_noise",
]
