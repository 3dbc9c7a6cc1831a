"""Cancellable delayed calls on the running event loop."""

import asyncio
import logging
from collections.abc import Callable
from typing import Any

logger = logging.getLogger(__name__)


class Debouncer:
    """Runs a callback once input has been quiet for a fixed delay.

    Every call to :meth:`call` cancels the pending run and schedules a new
    one. Runs are tagged with a generation number so a run that was already
    past its sleep when superseded never fires.
    """

    def __init__(self, delay: float) -> None:
        """Initialise debouncer.

        Args:
            delay: Quiet interval in seconds.
        """
        self.delay = delay
        self._generation = 0
        self._task: asyncio.Task[None] | None = None

    @property
    def pending(self) -> bool:
        return self._task is not None and not self._task.done()

    def call(self, func: Callable[..., Any], *args: Any) -> None:
        """Schedule ``func(*args)`` after the quiet interval.

        Must be called from inside a running event loop.

        Args:
            func: Callback to run.
            *args: Positional arguments for the callback.
        """
        self.cancel()
        self._generation += 1
        loop = asyncio.get_running_loop()
        self._task = loop.create_task(self._run(self._generation, func, args))

    def cancel(self) -> None:
        """Drop the pending run, if any."""
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._task = None

    async def wait(self) -> None:
        """Wait until the pending run has fired or been cancelled."""
        task = self._task
        if task is None:
            return
        try:
            await task
        except asyncio.CancelledError:
            if not task.cancelled():
                raise

    async def _run(self, generation: int, func: Callable[..., Any], args: tuple[Any, ...]) -> None:
        await asyncio.sleep(self.delay)
        if generation != self._generation:
            logger.debug("Skipping superseded run %d", generation)
            return
        func(*args)
