"""Composition root: build one instance of each quiz service and wire them together."""

from __future__ import annotations

from pathlib import Path

import httpx

from iquiz.core.quiz_manager import QuizManager
from iquiz.core.services.local_store import LocalStore, default_cache_path
from iquiz.core.services.reachability import ReachabilityMonitor
from iquiz.core.services.remote_source import RemoteSource
from iquiz.core.services.settings_store import SettingsStore
from iquiz.core.services.sync_engine import SyncEngine
from iquiz.utils.logging_config import configure_logging


def build_quiz_manager(
    settings_path: Path | None = None,
    cache_path: Path | None = None,
    client: httpx.AsyncClient | None = None,
    reachability: ReachabilityMonitor | None = None,
    use_platform_reachability: bool = True,
) -> QuizManager:
    """Create the services for one process and return the facade over them.

    The presentation layer keeps the returned manager for the lifetime of
    the app and calls ``initialize()`` once before showing the topic list.
    Platform reachability needs a Qt application instance to exist first.
    """
    logger = configure_logging()

    if reachability is None:
        reachability = ReachabilityMonitor()
        if use_platform_reachability:
            reachability.attach_network_information()

    store = LocalStore(cache_path or default_cache_path())
    remote = RemoteSource(reachability, client=client)
    sync_engine = SyncEngine(remote, store, reachability)
    settings_store = SettingsStore(settings_path)

    logger.info("Topic cache at %s", store.path)
    return QuizManager(
        settings_store=settings_store,
        sync_engine=sync_engine,
        reachability=reachability,
    )
