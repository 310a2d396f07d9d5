"""Reconcile the remote topic feed with the local cache."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from enum import Enum
import logging

from iquiz.core.errors import CorruptData, DecodeError, LocalStoreError, NotFound, QuizError
from iquiz.core.models import TopicSet
from iquiz.core.services.local_store import LocalStore
from iquiz.core.services.reachability import ReachabilityMonitor
from iquiz.core.services.remote_source import RemoteSource

logger = logging.getLogger(__name__)


class RefreshSource(str, Enum):
    REMOTE = "remote"
    CACHE = "cache"


@dataclass(frozen=True, slots=True)
class RefreshResult:
    """Topics to display, where they came from, and the remote failure to report, if any."""

    topic_set: TopicSet
    source: RefreshSource
    error: Exception | None = None


class SyncEngine:
    """Decides between remote and cache and always hands back something to show.

    The remote fetch is best-effort. The cache is the source of truth for
    display: a successful fetch replaces it wholesale, a failed fetch falls
    back to it. Only when both fail does an exception escape ``refresh``.
    """

    def __init__(
        self,
        remote: RemoteSource,
        store: LocalStore,
        reachability: ReachabilityMonitor,
    ) -> None:
        self._remote = remote
        self._store = store
        self._reachability = reachability
        self._in_flight: dict[str, asyncio.Task[TopicSet]] = {}

    async def refresh(self, url: str, force_remote: bool = False) -> RefreshResult:
        if not force_remote or not self._reachability.is_available():
            return RefreshResult(self.load_cached(), RefreshSource.CACHE)

        try:
            topic_set = await self._fetch_and_save(url)
        except (QuizError, OSError) as exc:
            self._log_remote_failure(url, exc)
            try:
                fallback = self.load_cached()
            except (LocalStoreError, OSError) as local_exc:
                raise local_exc from exc
            return RefreshResult(fallback, RefreshSource.CACHE, error=exc)

        return RefreshResult(topic_set, RefreshSource.REMOTE)

    def load_cached(self) -> TopicSet:
        """Load the cache, seeding it first and re-seeding it if it is unreadable."""
        self._store.ensure_seeded()
        try:
            return self._store.load()
        except (NotFound, CorruptData) as exc:
            logger.error("Replacing topic cache with defaults: %s", exc)
            return self._store.reseed()

    def is_fetching(self, url: str) -> bool:
        return url in self._in_flight

    async def _fetch_and_save(self, url: str) -> TopicSet:
        task = self._in_flight.get(url)
        if task is None:
            task = asyncio.ensure_future(self._run_fetch(url))
            self._in_flight[url] = task
            task.add_done_callback(lambda done, key=url: self._forget(key, done))
        else:
            logger.debug("Joining in-flight fetch of %s", url)
        # A caller giving up must not cancel the fetch other callers share.
        return await asyncio.shield(task)

    async def _run_fetch(self, url: str) -> TopicSet:
        topic_set = await self._remote.fetch(url)
        await asyncio.to_thread(self._store.save, topic_set)
        return topic_set

    def _forget(self, url: str, task: asyncio.Task[TopicSet]) -> None:
        if self._in_flight.get(url) is task:
            del self._in_flight[url]
        if not task.cancelled():
            task.exception()  # marks the exception as retrieved

    @staticmethod
    def _log_remote_failure(url: str, exc: Exception) -> None:
        logger.warning("Remote refresh from %s failed, using cached topics: %s", url, exc)
        if isinstance(exc, DecodeError) and exc.body_preview:
            logger.warning("Received body (truncated): %s", exc.body_preview)
