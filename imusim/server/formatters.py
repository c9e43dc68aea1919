"""JSON formatting utilities for simulation frames and status."""

import dataclasses
import json
from typing import Any

from imusim.motion import (
    Arrow,
    IMUSample,
    Position,
    acceleration_arrow,
    dynamic_acceleration,
    gyro_arrow,
    gyro_magnitude,
)
from imusim.simulation import Frame, SimulationStatus

__all__ = [
    "arrow_to_dict",
    "format_frame_message",
    "format_status_message",
    "position_to_list",
    "sample_to_dict",
]


def sample_to_dict(sample: IMUSample) -> dict[str, Any]:
    """Convert a sample into a JSON-ready dict with time rounded to 10 ms."""
    return {
        "time": round(sample.time, 2),
        "accel_x": sample.accel_x,
        "accel_y": sample.accel_y,
        "accel_z": sample.accel_z,
        "gyro_x": sample.gyro_x,
        "gyro_y": sample.gyro_y,
        "gyro_z": sample.gyro_z,
    }


def position_to_list(position: Position) -> list[float]:
    return list(position.as_tuple())


def arrow_to_dict(arrow: Arrow) -> dict[str, Any]:
    return {"direction": position_to_list(arrow.direction), "length": arrow.length}


def format_frame_message(frame: Frame) -> str:
    """Serialize one tick into a JSON string for WebSocket transmission."""
    state = frame.motion_state
    return json.dumps({
        "type": "imu",
        **sample_to_dict(frame.sample),
        "dynamic_acceleration": dynamic_acceleration(frame.sample),
        "gyro_magnitude": gyro_magnitude(frame.sample),
        "motion_state": state.key,
        "label": state.label,
        "color": state.color,
        "position": position_to_list(frame.position),
        "heading": frame.heading,
        "accel_arrow": arrow_to_dict(acceleration_arrow(frame.sample)),
        "gyro_arrow": arrow_to_dict(gyro_arrow(frame.sample)),
    })


def format_status_message(status: SimulationStatus) -> str:
    """Serialize the runner status into a JSON string."""
    return json.dumps({"type": "status", **dataclasses.asdict(status)})
