"""Ideal placement of the displayed body and its bounded trail.

The displayed position is not integrated from acceleration. It is placed
directly on the ideal circle from simulated time, using the same radius and
angular speed as the circular generator, so the visual motion stays
independent of the sensor noise fed into the charts.
"""

import math
from collections import deque
from collections.abc import Iterator

from imusim.motion.generator import ANGULAR_SPEED, CIRCLE_RADIUS
from imusim.motion.types import Position

__all__ = ["TRAJECTORY_LENGTH", "Trajectory", "ideal_heading", "ideal_position"]

TRAJECTORY_LENGTH = 200

_BOB_FREQUENCY = 10.0  # rad/s
_BOB_HEIGHT = 0.5  # m


def ideal_position(
    t: float,
    radius: float = CIRCLE_RADIUS,
    angular_speed: float = ANGULAR_SPEED,
) -> Position:
    """Position on the circle at time *t*, with a small vertical bob."""
    return Position(
        x=radius * math.cos(angular_speed * t),
        y=math.sin(t * _BOB_FREQUENCY) * _BOB_HEIGHT,
        z=radius * math.sin(angular_speed * t),
    )


def ideal_heading(t: float, angular_speed: float = ANGULAR_SPEED) -> float:
    """Yaw in radians keeping the body tangent to the circle."""
    return -(angular_speed * t)


class Trajectory:
    """FIFO of the most recent positions, capped at *max_length*."""

    def __init__(self, max_length: int = TRAJECTORY_LENGTH) -> None:
        if max_length <= 0:
            raise ValueError(f"max_length must be positive, got {max_length}")
        self._points: deque[Position] = deque(maxlen=max_length)

    @property
    def max_length(self) -> int:
        return self._points.maxlen or 0

    def append(self, position: Position) -> None:
        self._points.append(position)

    def clear(self) -> None:
        self._points.clear()

    def as_list(self) -> list[Position]:
        return list(self._points)

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[Position]:
        return iter(self._points)
