"""Pytest fixtures for server module testing."""

from collections.abc import Iterator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from imusim.config import Settings
from imusim.server.main import create_app
from imusim.simulation import SimulationRunner


@pytest.fixture
def settings() -> Settings:
    return Settings(
        autostart=False,
        tick_interval_seconds=0.01,
        client_timeout_seconds=5.0,
        queue_max_size=10,
    )


@pytest.fixture
def app(settings: Settings) -> FastAPI:
    return create_app(settings)


@pytest.fixture
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def runner(app: FastAPI, client: TestClient) -> SimulationRunner:
    return app.state.runner
