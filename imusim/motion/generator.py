"""Closed-form IMU sample generators.

Two motion models are provided. They compute different signals and are not
interchangeable simulations of the same phenomenon:

    circular:    A body walking around a circle of radius 15 m at
                 0.5 rad/s. The accelerometer sees the centripetal
                 acceleration on the horizontal axes and gravity plus a gait
                 bobbing term on the vertical axis. The gyroscope sees the
                 constant turn rate on Z plus a small X/Y wobble.

    oscillatory: Independent sinusoids per axis around a gravity baseline.
                 Useful as a generic chart demo; it has no kinematic meaning.

Noise model:
    Every noisy channel adds a value drawn uniformly from
    ``[-level / 2, level / 2]``. The noise source is injectable so the
    closed-form part can be checked exactly; the default draws from the
    ``random`` module and is not seeded, so runs are not reproducible
    bit-for-bit.
"""

import math
import random
from collections.abc import Callable
from typing import Protocol

from imusim.motion.types import IMUSample

__all__ = [
    "CircularMotionGenerator",
    "MotionGenerator",
    "NoiseSource",
    "OscillatoryMotionGenerator",
    "create_generator",
    "no_noise",
    "uniform_noise",
]

# --- Physical constants ------------------------------------------------------

GRAVITY = 9.8  # m/s²

# --- Circular motion parameters ----------------------------------------------

CIRCLE_RADIUS = 15.0  # m
ANGULAR_SPEED = 0.5  # rad/s

_BOBBING_FREQUENCY = 10.0  # rad/s
_BOBBING_AMPLITUDE = 2.0  # m/s²
_WOBBLE_FREQUENCY = 5.0  # rad/s
_WOBBLE_AMPLITUDE = 5.0  # deg/s

_CIRCULAR_ACCEL_NOISE = 0.2
_CIRCULAR_VERTICAL_NOISE = 0.5
_CIRCULAR_GYRO_NOISE = 2.0

# --- Oscillatory demo noise levels -------------------------------------------

_OSCILLATORY_ACCEL_NOISE = 0.3
_OSCILLATORY_VERTICAL_NOISE = 0.2
_OSCILLATORY_GYRO_NOISE = 10.0


NoiseSource = Callable[[float], float]
"""Returns an additive noise value for a channel with the given level."""


def uniform_noise(rng: random.Random | None = None) -> NoiseSource:
    """Build a noise source drawing uniformly from ``[-level/2, level/2]``.

    Args:
        rng: Random generator to draw from. Defaults to the module-level
            generator of :mod:`random`.

    Returns:
        A callable mapping a noise level to one noise value.
    """
    source = rng if rng is not None else random

    def _draw(level: float) -> float:
        return (source.random() - 0.5) * level

    return _draw


def no_noise(_level: float) -> float:
    """Noise source that always returns zero."""
    return 0.0


class MotionGenerator(Protocol):
    """Produces one synthetic 6-axis sample for a given simulated time."""

    name: str

    def generate(self, t: float) -> IMUSample: ...


class CircularMotionGenerator:
    """Sensor readout of a body walking around a circle.

    Args:
        noise: Noise source applied to the noisy channels. Defaults to
            :func:`uniform_noise` over the :mod:`random` module.
        radius: Circle radius in meters.
        angular_speed: Turn rate in rad/s.
    """

    name = "circular"

    def __init__(
        self,
        noise: NoiseSource | None = None,
        radius: float = CIRCLE_RADIUS,
        angular_speed: float = ANGULAR_SPEED,
    ) -> None:
        self._noise = noise if noise is not None else uniform_noise()
        self.radius = radius
        self.angular_speed = angular_speed

    def generate(self, t: float) -> IMUSample:
        """Return the sample at simulated time *t* (seconds)."""
        omega = self.angular_speed
        centripetal = -self.radius * omega**2
        bobbing = math.sin(t * _BOBBING_FREQUENCY) * _BOBBING_AMPLITUDE

        return IMUSample(
            time=t,
            accel_x=centripetal * math.cos(omega * t)
            + self._noise(_CIRCULAR_ACCEL_NOISE),
            accel_y=centripetal * math.sin(omega * t)
            + self._noise(_CIRCULAR_ACCEL_NOISE),
            accel_z=GRAVITY + bobbing + self._noise(_CIRCULAR_VERTICAL_NOISE),
            gyro_x=math.sin(t * _WOBBLE_FREQUENCY) * _WOBBLE_AMPLITUDE,
            gyro_y=math.cos(t * _WOBBLE_FREQUENCY) * _WOBBLE_AMPLITUDE,
            gyro_z=math.degrees(omega) + self._noise(_CIRCULAR_GYRO_NOISE),
        )


class OscillatoryMotionGenerator:
    """Independent per-axis sinusoids around a gravity baseline."""

    name = "oscillatory"

    def __init__(self, noise: NoiseSource | None = None) -> None:
        self._noise = noise if noise is not None else uniform_noise()

    def generate(self, t: float) -> IMUSample:
        """Return the sample at simulated time *t* (seconds)."""
        noise = self._noise
        return IMUSample(
            time=t,
            accel_x=math.sin(t * 0.5) * 2.0 + noise(_OSCILLATORY_ACCEL_NOISE),
            accel_y=math.cos(t * 0.3) * 1.5 + noise(_OSCILLATORY_ACCEL_NOISE),
            accel_z=GRAVITY
            + math.sin(t * 0.2) * 0.5
            + noise(_OSCILLATORY_VERTICAL_NOISE),
            gyro_x=math.sin(t * 0.7) * 50.0 + noise(_OSCILLATORY_GYRO_NOISE),
            gyro_y=math.cos(t * 0.4) * 40.0 + noise(_OSCILLATORY_GYRO_NOISE),
            gyro_z=math.sin(t * 0.6) * 30.0 + noise(_OSCILLATORY_GYRO_NOISE),
        )


_GENERATORS: dict[str, Callable[[NoiseSource | None], MotionGenerator]] = {
    CircularMotionGenerator.name: CircularMotionGenerator,
    OscillatoryMotionGenerator.name: OscillatoryMotionGenerator,
}


def create_generator(name: str, noise: NoiseSource | None = None) -> MotionGenerator:
    """Instantiate a generator by name.

    Args:
        name: ``"circular"`` or ``"oscillatory"``.
        noise: Optional noise source forwarded to the generator.

    Raises:
        ValueError: If *name* is not a known generator.
    """
    try:
        factory = _GENERATORS[name]
    except KeyError:
        known = ", ".join(sorted(_GENERATORS))
        raise ValueError(f"Unknown generator {name!r} (expected one of: {known})") from None
    return factory(noise)
