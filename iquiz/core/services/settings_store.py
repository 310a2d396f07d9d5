"""Persisted user settings: data source URL and auto-refresh preferences."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from PySide6.QtCore import QSettings

from iquiz.constants.quiz_constants import (
    DEFAULT_AUTO_REFRESH_ENABLED,
    DEFAULT_DATA_SOURCE_URL,
    DEFAULT_REFRESH_INTERVAL_SECONDS,
    SETTINGS_APPLICATION,
    SETTINGS_ORGANIZATION,
)

_URL_KEY = "dataSourceURL"
_AUTO_REFRESH_KEY = "autoRefreshEnabled"
_INTERVAL_KEY = "refreshInterval"


@dataclass(slots=True)
class QuizSettings:
    """Settings consumed by the sync engine and the refresh timer."""

    data_source_url: str = DEFAULT_DATA_SOURCE_URL
    auto_refresh_enabled: bool = DEFAULT_AUTO_REFRESH_ENABLED
    refresh_interval_seconds: int = DEFAULT_REFRESH_INTERVAL_SECONDS


class SettingsStore:
    """Reads and writes QuizSettings through QSettings (INI format)."""

    def __init__(self, path: Path | None = None) -> None:
        if path is None:
            self._settings = QSettings(
                QSettings.Format.IniFormat,
                QSettings.Scope.UserScope,
                SETTINGS_ORGANIZATION,
                SETTINGS_APPLICATION,
            )
        else:
            self._settings = QSettings(str(path), QSettings.Format.IniFormat)
        if not self._settings.contains(_URL_KEY):
            self.reset_to_defaults()

    def load(self) -> QuizSettings:
        url = self._settings.value(_URL_KEY, DEFAULT_DATA_SOURCE_URL, type=str)
        auto_refresh = self._settings.value(
            _AUTO_REFRESH_KEY, DEFAULT_AUTO_REFRESH_ENABLED, type=bool
        )
        interval = self._settings.value(_INTERVAL_KEY, 0, type=int)
        return QuizSettings(
            data_source_url=url.strip() or DEFAULT_DATA_SOURCE_URL,
            auto_refresh_enabled=bool(auto_refresh),
            refresh_interval_seconds=interval if interval > 0 else DEFAULT_REFRESH_INTERVAL_SECONDS,
        )

    def save(self, settings: QuizSettings) -> None:
        """Persist ``settings``. A blank URL or non-positive interval keeps the stored value."""
        url = settings.data_source_url.strip()
        if url:
            self._settings.setValue(_URL_KEY, url)
        self._settings.setValue(_AUTO_REFRESH_KEY, bool(settings.auto_refresh_enabled))
        if settings.refresh_interval_seconds > 0:
            self._settings.setValue(_INTERVAL_KEY, int(settings.refresh_interval_seconds))
        self._settings.sync()

    def reset_to_defaults(self) -> QuizSettings:
        defaults = QuizSettings()
        self.save(defaults)
        return defaults

    def get_data_source_url(self) -> str:
        return self.load().data_source_url
