"""Runtime configuration loaded from ``IMUSIM_``-prefixed environment variables."""

import logging
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from imusim.motion.trajectory import TRAJECTORY_LENGTH
from imusim.simulation.state import (
    DEFAULT_HISTORY_LENGTH,
    TIME_STEP,
    validate_history_length,
)

__all__ = ["Settings", "configure_logging"]

_LOG_FORMAT = "%(asctime)s - imusim - %(levelname)s - %(name)s - %(message)s"


class Settings(BaseSettings):
    """Simulation and server settings."""

    model_config = SettingsConfigDict(
        env_prefix="IMUSIM_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Simulation
    generator: Literal["circular", "oscillatory"] = Field(
        default="circular",
        description="Motion model producing the samples",
    )
    tick_interval_seconds: float = Field(
        default=0.1,
        gt=0,
        description="Wall-clock seconds between ticks",
    )
    time_step_seconds: float = Field(
        default=TIME_STEP,
        gt=0,
        description="Simulated seconds added per tick",
    )
    history_length: int = Field(
        default=DEFAULT_HISTORY_LENGTH,
        description="Number of samples kept for the charts",
    )
    trajectory_length: int = Field(
        default=TRAJECTORY_LENGTH,
        gt=0,
        description="Number of positions kept for the trail",
    )
    autostart: bool = Field(
        default=True,
        description="Start ticking as soon as the server is up",
    )

    # WebSocket streaming
    queue_max_size: int = Field(default=10, gt=0)
    client_timeout_seconds: float = Field(
        default=5.0,
        gt=0,
        description="Send a status heartbeat when no frame arrives in time",
    )

    log_level: str = "INFO"

    @field_validator("history_length")
    @classmethod
    def _check_history_length(cls, value: int) -> int:
        return validate_history_length(value)


def configure_logging(level: str) -> None:
    """Configure root logging for an entry point."""
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO), format=_LOG_FORMAT)
