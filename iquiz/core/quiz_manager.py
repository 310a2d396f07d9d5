"""Business logic shared between the presentation layer and the quiz services."""

from __future__ import annotations

from threading import Lock
from typing import Callable

from iquiz.core.models import Answer, Question, Score, TopicEntry, TopicSet
from iquiz.core.services.auto_refresh import AutoRefresher
from iquiz.core.services.reachability import ReachabilityMonitor
from iquiz.core.services.session_engine import SessionEngine, SessionState
from iquiz.core.services.settings_store import QuizSettings, SettingsStore
from iquiz.core.services.sync_engine import RefreshResult, SyncEngine

RefreshListener = Callable[[RefreshResult], None]


class QuizManager:
    """Facade for quiz services: SettingsStore, SyncEngine, SessionEngine and AutoRefresher.

    Holds the topic snapshot the topic list displays. A running session keeps
    its own copy of the questions, so a refresh never changes a quiz that is
    under way.
    """

    def __init__(
        self,
        settings_store: SettingsStore,
        sync_engine: SyncEngine,
        reachability: ReachabilityMonitor,
        session: SessionEngine | None = None,
    ) -> None:
        self._lock = Lock()

        # Services
        self._settings_store = settings_store
        self._sync_engine = sync_engine
        self._reachability = reachability
        self._session = session or SessionEngine()
        self._auto_refresher: AutoRefresher | None = None

        self._topics: TopicSet = ()
        self._refresh_listeners: list[RefreshListener] = []

    # --- Topic Delegation ---

    def initialize(self) -> TopicSet:
        """Seed the cache if needed, load the cached topics and apply stored settings.

        Starts auto-refresh when it was left enabled, so it must be called on
        the thread running the asyncio event loop in that case.
        """
        topics = self._sync_engine.load_cached()
        with self._lock:
            self._topics = topics
        self._configure_auto_refresh(self._settings_store.load())
        return topics

    async def refresh_topics(self, force_remote: bool = False) -> RefreshResult:
        url = self._settings_store.get_data_source_url()
        result = await self._sync_engine.refresh(url, force_remote=force_remote)
        self._apply_refresh_result(result)
        return result

    async def check_now(self) -> RefreshResult:
        return await self.refresh_topics(force_remote=True)

    def add_refresh_listener(self, listener: RefreshListener) -> None:
        with self._lock:
            self._refresh_listeners.append(listener)

    def get_topics(self) -> TopicSet:
        with self._lock:
            return self._topics

    def get_topic_count(self) -> int:
        with self._lock:
            return len(self._topics)

    def get_topic(self, index: int) -> TopicEntry:
        with self._lock:
            if not 0 <= index < len(self._topics):
                raise IndexError(f"Topic index {index} out of range")
            return self._topics[index]

    def is_network_available(self) -> bool:
        return self._reachability.is_available()

    # --- Session Delegation ---

    def start_quiz(self, topic_index: int) -> Question:
        entry = self.get_topic(topic_index)
        with self._lock:
            self._session.start(entry.questions, topic_index=topic_index)
            return self._session.get_current_question()

    def end_quiz(self) -> None:
        with self._lock:
            self._session.reset()

    def has_active_quiz(self) -> bool:
        with self._lock:
            return self._session.is_active()

    def get_current_question(self) -> Question:
        with self._lock:
            return self._session.get_current_question()

    def get_current_question_index(self) -> int:
        with self._lock:
            return self._session.get_current_question_index()

    def get_question_count(self) -> int:
        with self._lock:
            return self._session.get_question_count()

    def get_tentative_selection(self) -> int | None:
        with self._lock:
            return self._session.get_tentative_selection()

    def get_answers(self) -> list[Answer]:
        with self._lock:
            return self._session.get_answers()

    def select_option(self, option_index: int) -> None:
        with self._lock:
            self._session.select_option(option_index)

    def submit_answer(self) -> SessionState:
        with self._lock:
            return self._session.submit()

    def go_to_question(self, index: int) -> None:
        with self._lock:
            self._session.go_to_question(index)

    def previous_question(self) -> None:
        with self._lock:
            self._session.previous_question()

    def is_answer_correct(self, question_index: int) -> bool | None:
        with self._lock:
            return self._session.is_answer_correct(question_index)

    def is_quiz_complete(self) -> bool:
        with self._lock:
            return self._session.is_completed()

    def get_score(self) -> Score:
        with self._lock:
            return self._session.score()

    # --- Settings & Auto Refresh ---

    def get_settings(self) -> QuizSettings:
        return self._settings_store.load()

    def apply_settings(self, settings: QuizSettings) -> QuizSettings:
        """Persist ``settings`` and start or stop auto-refresh to match.

        Must be called on the thread running the asyncio event loop.
        """
        self._settings_store.save(settings)
        stored = self._settings_store.load()
        self._configure_auto_refresh(stored)
        return stored

    def reset_settings(self) -> QuizSettings:
        defaults = self._settings_store.reset_to_defaults()
        self._configure_auto_refresh(defaults)
        return defaults

    def is_auto_refresh_running(self) -> bool:
        return self._auto_refresher is not None and self._auto_refresher.is_running()

    def shutdown(self) -> None:
        if self._auto_refresher is not None:
            self._auto_refresher.stop()

    def _configure_auto_refresh(self, settings: QuizSettings) -> None:
        if not settings.auto_refresh_enabled:
            if self._auto_refresher is not None:
                self._auto_refresher.stop()
            return
        if self._auto_refresher is None:
            self._auto_refresher = AutoRefresher(
                sync_engine=self._sync_engine,
                reachability=self._reachability,
                url_provider=self._settings_store.get_data_source_url,
                interval_seconds=settings.refresh_interval_seconds,
                on_refreshed=self._apply_refresh_result,
            )
        else:
            self._auto_refresher.set_interval_seconds(settings.refresh_interval_seconds)
        self._auto_refresher.start()

    def _apply_refresh_result(self, result: RefreshResult) -> None:
        with self._lock:
            self._topics = result.topic_set
            listeners = list(self._refresh_listeners)
        for listener in listeners:
            listener(result)
