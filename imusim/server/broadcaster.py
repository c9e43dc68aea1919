"""Fan-out of serialized messages to WebSocket client queues."""

import asyncio
import logging

__all__ = ["Broadcaster"]

logger = logging.getLogger(__name__)


class Broadcaster:
    """Per-application registry of bounded client queues.

    Every connected client owns one queue of at most ``queue_max_size``
    messages. A full queue loses its oldest message, so a slow client only
    ever sees the freshest frames and never stalls the simulation.

    All methods must be called from the event loop that owns the queues.

    Args:
        queue_max_size: Capacity of each client queue.
    """

    def __init__(self, queue_max_size: int) -> None:
        if queue_max_size <= 0:
            raise ValueError(f"queue_max_size must be positive, got {queue_max_size}")
        self.queue_max_size = queue_max_size
        self.dropped = 0
        self._queues: list[asyncio.Queue[str]] = []

    def __len__(self) -> int:
        return len(self._queues)

    def subscribe(self) -> asyncio.Queue[str]:
        """Register and return a new client queue."""
        queue: asyncio.Queue[str] = asyncio.Queue(maxsize=self.queue_max_size)
        self._queues.append(queue)
        return queue

    def unsubscribe(self, queue: asyncio.Queue[str]) -> None:
        self._queues.remove(queue)

    def publish(self, message: str) -> None:
        """Offer *message* to every client queue, evicting the oldest if full."""
        for queue in self._queues:
            if queue.full():
                queue.get_nowait()
                self.dropped += 1
                logger.debug("Client queue full; dropped oldest message")
            queue.put_nowait(message)
