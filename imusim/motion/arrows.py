"""Direction arrows drawn at the displayed body.

Sensor axes map to display axes as ``(x, z, y)``: the sensor's vertical
``z`` becomes the display's up axis ``y``. The acceleration arrow shows the
gravity-compensated vector and the gyro arrow the rotation axis.
"""

import math
from dataclasses import dataclass

from imusim.motion.classifier import dynamic_acceleration
from imusim.motion.generator import GRAVITY
from imusim.motion.types import IMUSample, Position

__all__ = ["Arrow", "acceleration_arrow", "gyro_arrow"]

MAX_ACCEL_ARROW_LENGTH = 10.0
GYRO_ARROW_LENGTH = 5.0


@dataclass(frozen=True)
class Arrow:
    """An arrow anchored at the body.

    Attributes:
        direction: Unit vector in display axes, or all zeros when the
            source vector vanishes.
        length: Arrow length in display units.
    """

    direction: Position
    length: float


def _unit(x: float, y: float, z: float) -> Position:
    norm = math.sqrt(x * x + y * y + z * z)
    if norm == 0.0:
        return Position(0.0, 0.0, 0.0)
    return Position(x / norm, y / norm, z / norm)


def acceleration_arrow(sample: IMUSample) -> Arrow:
    """Dynamic acceleration direction, length capped at 10."""
    return Arrow(
        direction=_unit(sample.accel_x, sample.accel_z - GRAVITY, sample.accel_y),
        length=min(dynamic_acceleration(sample), MAX_ACCEL_ARROW_LENGTH),
    )


def gyro_arrow(sample: IMUSample) -> Arrow:
    return Arrow(
        direction=_unit(sample.gyro_x, sample.gyro_z, sample.gyro_y),
        length=GYRO_ARROW_LENGTH,
    )
