"""Periodic callback scheduler running on the asyncio event loop.

Each period the callback is invoked synchronously and then the task sleeps
for ``interval`` seconds. There is no drift correction and no catch-up for
missed periods: a slow callback simply delays the next tick.
"""

import asyncio
import logging
from collections.abc import Callable

__all__ = ["PeriodicScheduler"]

logger = logging.getLogger(__name__)


class PeriodicScheduler:
    """Invoke *callback* every *interval* seconds while started.

    The scheduler owns a single asyncio task. :meth:`start` and :meth:`stop`
    are idempotent. If the callback raises, the exception is logged and the
    scheduler stops, calling *on_error* so the owner can update its own state.

    Args:
        interval: Seconds to sleep between callback invocations.
        callback: Zero-argument callable run once per period.
        on_error: Called with the exception after a failed callback.
    """

    def __init__(
        self,
        interval: float,
        callback: Callable[[], object],
        on_error: Callable[[Exception], object] | None = None,
    ) -> None:
        if interval <= 0:
            raise ValueError(f"interval must be positive, got {interval}")
        self.interval = interval
        self._callback = callback
        self._on_error = on_error
        self._task: asyncio.Task[None] | None = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        """Start ticking on the running event loop.

        Raises:
            RuntimeError: If called without a running event loop.
        """
        if self.running:
            return
        loop = asyncio.get_running_loop()
        self._task = loop.create_task(self._run())

    def stop(self) -> None:
        """Cancel the ticking task, if any."""
        if self._task is not None:
            self._task.cancel()
            self._task = None

    async def _run(self) -> None:
        while True:
            try:
                self._callback()
            except Exception as exc:
                logger.exception("Scheduler callback failed; stopping")
                self._task = None
                if self._on_error is not None:
                    self._on_error(exc)
                return
            await asyncio.sleep(self.interval)
