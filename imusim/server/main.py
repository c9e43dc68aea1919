"""FastAPI web server streaming a simulated IMU to a browser dashboard.

Start with::

    uvicorn imusim.server.main:app --host 0.0.0.0 --port 8000

Then open ``http://<host>:8000/`` in a browser to access the dashboard.
WebSocket clients connect to ``ws://<host>:8000/ws``. The first message is a
``type="status"`` snapshot, followed by one ``type="imu"`` message per tick
(10 Hz by default). Control actions broadcast a fresh ``type="status"``
message to every client.

Control endpoints:

    GET  /api/status          current status
    POST /api/start           start the timer
    POST /api/pause           stop the timer
    POST /api/toggle          flip between running and paused
    POST /api/reset           zero time, clear history and trajectory
    PUT  /api/history-length  select 30, 50, 100 or 200 buffered samples
    GET  /api/history         buffered samples, oldest first
    GET  /api/trajectory      buffered positions, oldest first
"""

import asyncio
import dataclasses
import logging
from collections.abc import AsyncIterator, Callable
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any

from fastapi import (
    APIRouter,
    Depends,
    FastAPI,
    HTTPException,
    Request,
    WebSocket,
    WebSocketDisconnect,
)
from fastapi.staticfiles import StaticFiles
from pydantic import BaseModel

from imusim.config import Settings, configure_logging
from imusim.motion import create_generator
from imusim.server.broadcaster import Broadcaster
from imusim.server.formatters import (
    format_status_message,
    position_to_list,
    sample_to_dict,
)
from imusim.server.sinks import BroadcastSink
from imusim.simulation import SimulationRunner

logger = logging.getLogger(__name__)

_STATIC_DIR = Path(__file__).parent / "static"


class HistoryLengthRequest(BaseModel):
    history_length: int


def _get_runner(request: Request) -> SimulationRunner:
    return request.app.state.runner


def _get_broadcaster(request: Request) -> Broadcaster:
    return request.app.state.broadcaster


def _status_payload(runner: SimulationRunner) -> dict[str, Any]:
    return dataclasses.asdict(runner.status())


def _publish_status(
    runner: SimulationRunner, broadcaster: Broadcaster
) -> dict[str, Any]:
    broadcaster.publish(format_status_message(runner.status()))
    return _status_payload(runner)


async def _send_messages_until_disconnect(
    queue: asyncio.Queue[str],
    websocket: WebSocket,
    heartbeat: Callable[[], str],
    timeout: float,
) -> None:
    try:
        while True:
            try:
                message = await asyncio.wait_for(queue.get(), timeout=timeout)
            except TimeoutError:
                message = heartbeat()
            await websocket.send_text(message)
    except WebSocketDisconnect:
        pass


router = APIRouter()


@router.get("/api/status")
async def get_status(runner: SimulationRunner = Depends(_get_runner)) -> dict[str, Any]:
    return _status_payload(runner)


@router.post("/api/start")
async def start(
    runner: SimulationRunner = Depends(_get_runner),
    broadcaster: Broadcaster = Depends(_get_broadcaster),
) -> dict[str, Any]:
    runner.start()
    return _publish_status(runner, broadcaster)


@router.post("/api/pause")
async def pause(
    runner: SimulationRunner = Depends(_get_runner),
    broadcaster: Broadcaster = Depends(_get_broadcaster),
) -> dict[str, Any]:
    runner.pause()
    return _publish_status(runner, broadcaster)


@router.post("/api/toggle")
async def toggle(
    runner: SimulationRunner = Depends(_get_runner),
    broadcaster: Broadcaster = Depends(_get_broadcaster),
) -> dict[str, Any]:
    runner.toggle()
    return _publish_status(runner, broadcaster)


@router.post("/api/reset")
async def reset(
    runner: SimulationRunner = Depends(_get_runner),
    broadcaster: Broadcaster = Depends(_get_broadcaster),
) -> dict[str, Any]:
    """Clear history and zero time without touching the running flag."""
    runner.reset()
    return _publish_status(runner, broadcaster)


@router.put("/api/history-length")
async def set_history_length(
    body: HistoryLengthRequest,
    runner: SimulationRunner = Depends(_get_runner),
    broadcaster: Broadcaster = Depends(_get_broadcaster),
) -> dict[str, Any]:
    try:
        runner.set_history_length(body.history_length)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return _publish_status(runner, broadcaster)


@router.get("/api/history")
async def get_history(
    runner: SimulationRunner = Depends(_get_runner),
) -> list[dict[str, Any]]:
    return [sample_to_dict(sample) for sample in runner.history()]


@router.get("/api/trajectory")
async def get_trajectory(
    runner: SimulationRunner = Depends(_get_runner),
) -> list[list[float]]:
    return [position_to_list(position) for position in runner.trajectory()]


@router.websocket("/ws")
async def websocket_endpoint(websocket: WebSocket) -> None:
    """Stream status and IMU JSON messages to a connected WebSocket client.

    Each client gets its own bounded queue from the app's broadcaster, which
    drops the oldest message when full. While paused no frames arrive; a
    status heartbeat is sent whenever ``client_timeout_seconds`` pass
    without one.

    Args:
        websocket: The incoming WebSocket connection.
    """
    runner: SimulationRunner = websocket.app.state.runner
    settings: Settings = websocket.app.state.settings
    broadcaster: Broadcaster = websocket.app.state.broadcaster

    # Registered before accept so no frame is missed once the client is in.
    queue = broadcaster.subscribe()
    try:
        await websocket.accept()
        await websocket.send_text(format_status_message(runner.status()))
        await _send_messages_until_disconnect(
            queue,
            websocket,
            lambda: format_status_message(runner.status()),
            settings.client_timeout_seconds,
        )
    except WebSocketDisconnect:
        pass
    finally:
        broadcaster.unsubscribe(queue)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application with its own runner.

    Args:
        settings: Configuration to use. Defaults to values read from the
            environment.
    """
    settings = settings if settings is not None else Settings()
    broadcaster = Broadcaster(settings.queue_max_size)

    @asynccontextmanager
    async def _lifespan(application: FastAPI) -> AsyncIterator[None]:
        runner = SimulationRunner(
            generator=create_generator(settings.generator),
            sink=BroadcastSink(broadcaster),
            history_length=settings.history_length,
            trajectory_length=settings.trajectory_length,
            tick_interval=settings.tick_interval_seconds,
            time_step=settings.time_step_seconds,
        )
        application.state.runner = runner
        if settings.autostart:
            runner.start()
        logger.info("Serving %s generator", settings.generator)
        yield
        runner.pause()

    application = FastAPI(title="IMU Motion Simulator", lifespan=_lifespan)
    application.state.settings = settings
    application.state.broadcaster = broadcaster
    application.include_router(router)
    application.mount("/", StaticFiles(directory=_STATIC_DIR, html=True), name="static")
    return application


_settings = Settings()
configure_logging(_settings.log_level)
app = create_app(_settings)
