"""Services behind the QuizManager facade."""

from .auto_refresh import AutoRefresher
from .local_store import LocalStore, default_cache_path
from .reachability import ReachabilityMonitor
from .remote_source import RemoteSource
from .session_engine import SessionEngine, SessionState, classify_score
from .settings_store import QuizSettings, SettingsStore
from .sync_engine import RefreshResult, RefreshSource, SyncEngine

__all__ = [
    "AutoRefresher",
    "LocalStore",
    "QuizSettings",
    "ReachabilityMonitor",
    "RefreshResult",
    "RefreshSource",
    "RemoteSource",
    "SessionEngine",
    "SessionState",
    "SettingsStore",
    "SyncEngine",
    "classify_score",
    "default_cache_path",
]
