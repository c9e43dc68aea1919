"""Helper factories for server tests."""

from fastapi.testclient import TestClient

from imusim.motion import IMUSample, MotionState, ideal_heading, ideal_position
from imusim.simulation import Frame, SimulationRunner


def make_sample(time: float = 0.0) -> IMUSample:
    return IMUSample(
        time=time,
        accel_x=-3.75,
        accel_y=0.0,
        accel_z=9.8,
        gyro_x=0.0,
        gyro_y=5.0,
        gyro_z=28.6,
    )


def make_frame(time: float = 0.0) -> Frame:
    return Frame(
        sample=make_sample(time),
        motion_state=MotionState.NORMAL_MOVE,
        position=ideal_position(time),
        heading=ideal_heading(time),
    )


def tick(client: TestClient, runner: SimulationRunner, count: int = 1) -> None:
    """Run *count* ticks on the server's event loop."""
    for _ in range(count):
        client.portal.call(runner.tick)
