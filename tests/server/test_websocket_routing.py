"""Tests for websocket payload routing logic."""

import pytest
from fastapi.testclient import TestClient

from imusim.simulation import SimulationRunner
from tests.server.helpers import tick


def test_imu_message_routing(client: TestClient, runner: SimulationRunner) -> None:
    with client.websocket_connect("/ws") as websocket:
        websocket.receive_json()
        tick(client, runner)
        data = websocket.receive_json()
        assert data["type"] == "imu"
        assert data["time"] == 0.0
        assert data["motion_state"] in {
            "stationary",
            "slow_move",
            "normal_move",
            "fast_rotation",
            "violent",
        }
        assert data["color"].startswith("#")
        assert data["position"][0] == pytest.approx(15.0)


def test_frames_arrive_in_time_order(client: TestClient, runner: SimulationRunner) -> None:
    with client.websocket_connect("/ws") as websocket:
        websocket.receive_json()
        tick(client, runner, count=3)
        times = [websocket.receive_json()["time"] for _ in range(3)]
        assert times == [0.0, 0.1, 0.2]


def test_reset_broadcasts_status(client: TestClient, runner: SimulationRunner) -> None:
    with client.websocket_connect("/ws") as websocket:
        websocket.receive_json()
        tick(client, runner)
        assert websocket.receive_json()["type"] == "imu"
        client.post("/api/reset")
        data = websocket.receive_json()
        assert data["type"] == "status"
        assert data["history_size"] == 0
        assert data["time"] == 0.0


def test_history_length_change_broadcasts_status(client: TestClient) -> None:
    with client.websocket_connect("/ws") as websocket:
        websocket.receive_json()
        client.put("/api/history-length", json={"history_length": 200})
        data = websocket.receive_json()
        assert data["type"] == "status"
        assert data["history_length"] == 200


def test_started_server_streams_frames(client: TestClient) -> None:
    with client.websocket_connect("/ws") as websocket:
        websocket.receive_json()
        client.post("/api/start")
        assert websocket.receive_json()["type"] == "status"
        assert websocket.receive_json()["type"] == "imu"
        client.post("/api/pause")
