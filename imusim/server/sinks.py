"""Render sink forwarding frames to WebSocket subscribers."""

from imusim.server.broadcaster import Broadcaster
from imusim.server.formatters import format_frame_message
from imusim.simulation import Frame

__all__ = ["BroadcastSink"]


class BroadcastSink:
    """Serialize each frame once and fan it out to every connected client."""

    def __init__(self, broadcaster: Broadcaster) -> None:
        self._broadcaster = broadcaster

    def publish(self, frame: Frame) -> None:
        self._broadcaster.publish(format_frame_message(frame))
