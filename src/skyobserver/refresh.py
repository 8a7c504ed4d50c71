"""Periodic sky recomputation.

The engine is synchronous and pure; this wraps it in an asyncio task that
recomputes immediately and then every ``interval_sec`` seconds, handing each
result to a callback (sync or async).
"""

import asyncio
import inspect
from collections.abc import Callable
from typing import Any

from skyobserver.config import DEFAULT_REFRESH_SECONDS
from skyobserver.logging_config import get_logger

logger = get_logger(__name__)


class SkyRefresher:
    """Runs ``compute()`` on a fixed interval until stopped."""

    def __init__(
        self,
        compute: Callable[[], Any],
        on_update: Callable[[Any], Any],
        interval_sec: float = DEFAULT_REFRESH_SECONDS,
    ):
        if not interval_sec > 0:
            raise ValueError(f"interval_sec must be positive, got {interval_sec}")
        self._compute = compute
        self._on_update = on_update
        self.interval_sec = interval_sec
        self._task: asyncio.Task | None = None
        self.update_count = 0
        self.last_error: Exception | None = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def refresh_once(self) -> Any:
        """Compute once and deliver the result."""
        result = self._compute()
        outcome = self._on_update(result)
        if inspect.isawaitable(outcome):
            await outcome
        self.update_count += 1
        return result

    async def _loop(self):
        while True:
            try:
                await self.refresh_once()
                self.last_error = None
            except asyncio.CancelledError:
                raise
            except Exception as e:
                # Geocoder outages and the like should not kill the loop
                self.last_error = e
                logger.error(f"Refresh error: {e}")
            await asyncio.sleep(self.interval_sec)

    async def start(self):
        """Start background refresh. No-op if already running."""
        if self.running:
            return
        self._task = asyncio.create_task(self._loop())
        logger.info(f"Started sky refresh with {self.interval_sec}s interval")

    async def stop(self):
        """Cancel the refresh task and wait for it to finish."""
        if self._task is None:
            return
        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        self._task = None
        logger.info("Stopped sky refresh")

    async def run_forever(self):
        """Start and block until cancelled (used by ``skyobserver --watch``)."""
        await self.start()
        try:
            await asyncio.Event().wait()
        finally:
            await self.stop()
