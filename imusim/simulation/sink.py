"""Render sink interface consumed by the simulation runner."""

from typing import Protocol

from imusim.simulation.state import Frame

__all__ = ["NullSink", "RenderSink"]


class RenderSink(Protocol):
    """Anything that can display or forward a frame.

    ``publish`` is called synchronously once per tick and must return before
    the next tick.
    """

    def publish(self, frame: Frame) -> None: ...


class NullSink:
    """Sink that discards every frame."""

    def publish(self, frame: Frame) -> None:
        pass
