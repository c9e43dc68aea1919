"""Threshold classifier mapping an IMU sample to a motion state.

The classifier looks at two instantaneous magnitudes:

    dynamic acceleration: ``sqrt(ax² + ay² + (az - 9.8)²)``, i.e. the
        accelerometer magnitude with the gravity baseline removed from the
        vertical axis.
    gyro magnitude:       ``sqrt(gx² + gy² + gz²)`` in deg/s.

Thresholds are checked in order and the first satisfied branch wins, so a
sample sitting exactly on a boundary belongs to the first branch whose strict
inequalities hold. Note that a gyro magnitude of exactly 100 deg/s with a
dynamic acceleration of 5 m/s² or more matches neither NORMAL_MOVE nor
FAST_ROTATION and falls through to VIOLENT.
"""

import math

from imusim.motion.generator import GRAVITY
from imusim.motion.types import IMUSample, MotionState

__all__ = [
    "classify",
    "classify_magnitudes",
    "dynamic_acceleration",
    "gyro_magnitude",
]

# (max dynamic acceleration m/s², max gyro magnitude deg/s, state)
_THRESHOLDS: tuple[tuple[float, float, MotionState], ...] = (
    (0.5, 20.0, MotionState.STATIONARY),
    (2.0, 50.0, MotionState.SLOW_MOVE),
    (5.0, 100.0, MotionState.NORMAL_MOVE),
)

_FAST_ROTATION_GYRO = 100.0  # deg/s


def dynamic_acceleration(sample: IMUSample) -> float:
    """Gravity-compensated acceleration magnitude in m/s²."""
    return math.sqrt(
        sample.accel_x**2 + sample.accel_y**2 + (sample.accel_z - GRAVITY) ** 2
    )


def gyro_magnitude(sample: IMUSample) -> float:
    """Angular rate magnitude in deg/s."""
    return math.sqrt(sample.gyro_x**2 + sample.gyro_y**2 + sample.gyro_z**2)


def classify_magnitudes(dynamic_acc: float, gyro_mag: float) -> MotionState:
    """Apply the ordered threshold cascade to precomputed magnitudes."""
    for max_acc, max_gyro, state in _THRESHOLDS:
        if dynamic_acc < max_acc and gyro_mag < max_gyro:
            return state
    if gyro_mag > _FAST_ROTATION_GYRO:
        return MotionState.FAST_ROTATION
    return MotionState.VIOLENT


def classify(sample: IMUSample) -> MotionState:
    """Classify *sample* into one of the five motion states.

    Pure function: the same sample always yields the same state.
    """
    return classify_magnitudes(dynamic_acceleration(sample), gyro_magnitude(sample))
