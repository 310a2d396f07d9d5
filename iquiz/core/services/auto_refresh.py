"""Periodic forced refresh of the topic feed while the network is available."""

from __future__ import annotations

import asyncio
import logging
from typing import Callable

from iquiz.core.errors import QuizError
from iquiz.core.services.reachability import ReachabilityMonitor
from iquiz.core.services.sync_engine import RefreshResult, SyncEngine

logger = logging.getLogger(__name__)


class AutoRefresher:
    """Fires ``refresh(url, force_remote=True)`` every ``interval_seconds``.

    A tick is skipped while the network is unavailable or while the previous
    tick's refresh has not finished.
    """

    def __init__(
        self,
        sync_engine: SyncEngine,
        reachability: ReachabilityMonitor,
        url_provider: Callable[[], str],
        interval_seconds: float,
        on_refreshed: Callable[[RefreshResult], None] | None = None,
    ) -> None:
        self._sync_engine = sync_engine
        self._url_provider = url_provider
        self._on_refreshed = on_refreshed
        self._interval_seconds = _validate_interval(interval_seconds)
        self._available = reachability.is_available()
        self._loop_task: asyncio.Task[None] | None = None
        self._pending: asyncio.Task[RefreshResult | None] | None = None
        reachability.availability_changed.connect(self._on_availability_changed)

    def start(self) -> None:
        """Start ticking on the running event loop."""
        if self.is_running():
            return
        self._loop_task = asyncio.get_running_loop().create_task(self._run())
        logger.info("Auto-refresh started (every %g s)", self._interval_seconds)

    def stop(self) -> None:
        """Stop ticking. A refresh already under way is left to finish."""
        if self._loop_task is not None:
            self._loop_task.cancel()
            self._loop_task = None
            logger.info("Auto-refresh stopped")

    def is_running(self) -> bool:
        return self._loop_task is not None and not self._loop_task.done()

    def get_interval_seconds(self) -> float:
        return self._interval_seconds

    def set_interval_seconds(self, interval_seconds: float) -> None:
        """Takes effect from the next tick."""
        self._interval_seconds = _validate_interval(interval_seconds)

    def tick(self) -> asyncio.Task[RefreshResult | None] | None:
        """Kick off one refresh unless it has to be skipped. Returns the refresh task."""
        if not self._available:
            logger.debug("Auto-refresh tick skipped: network unavailable")
            return None
        if self._pending is not None and not self._pending.done():
            logger.debug("Auto-refresh tick skipped: previous refresh still running")
            return None
        self._pending = asyncio.ensure_future(self._refresh())
        return self._pending

    async def _run(self) -> None:
        while True:
            await asyncio.sleep(self._interval_seconds)
            self.tick()

    async def _refresh(self) -> RefreshResult | None:
        url = self._url_provider()
        try:
            result = await self._sync_engine.refresh(url, force_remote=True)
        except (QuizError, OSError) as exc:
            logger.error("Auto-refresh could not load any topics: %s", exc)
            return None
        if self._on_refreshed is not None:
            try:
                self._on_refreshed(result)
            except Exception:
                logger.exception("Auto-refresh listener failed")
        return result

    def _on_availability_changed(self, available: bool) -> None:
        self._available = available


def _validate_interval(interval_seconds: float) -> float:
    if interval_seconds <= 0:
        raise ValueError("Refresh interval must be a positive number of seconds.")
    return float(interval_seconds)
