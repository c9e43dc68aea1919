"""Motion data types for simulated IMU readings."""

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class IMUSample:
    """A single simulated IMU sample with accelerometer and gyroscope readings.

    Samples are immutable once produced and are ordered by ``time``.

    Attributes:
        time: Simulated time in seconds since the last reset.

        accel_x: Acceleration along X-axis in m/s².
        accel_y: Acceleration along Y-axis in m/s² (second horizontal axis).
        accel_z: Acceleration along Z-axis in m/s² (vertical, carries gravity).

        gyro_x: Angular rate around X-axis in deg/s.
        gyro_y: Angular rate around Y-axis in deg/s.
        gyro_z: Angular rate around Z-axis in deg/s.

    Example:
        >>> sample = CircularMotionGenerator(noise=no_noise).generate(0.0)
        >>> sample.accel_z  # gravity baseline when the bobbing term is zero
        9.8
        >>> sample.accel_x  # centripetal term -R * omega**2
        -3.75
    """

    time: float
    accel_x: float
    accel_y: float
    accel_z: float
    gyro_x: float
    gyro_y: float
    gyro_z: float


class MotionState(Enum):
    """Qualitative motion state derived from a sample.

    Each member carries a display ``label`` and a hex ``color``. The colors
    are presentational and may be re-themed freely.
    """

    STATIONARY = ("stationary", "Stationary", "#10b981")
    SLOW_MOVE = ("slow_move", "Slow move", "#3b82f6")
    NORMAL_MOVE = ("normal_move", "Normal move", "#f59e0b")
    FAST_ROTATION = ("fast_rotation", "Fast rotation", "#ec4899")
    VIOLENT = ("violent", "Violent", "#ef4444")

    def __init__(self, key: str, label: str, color: str) -> None:
        self.key = key
        self.label = label
        self.color = color


@dataclass(frozen=True)
class Position:
    """A point of the displayed body in scene coordinates (Y is up)."""

    x: float
    y: float
    z: float

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)
