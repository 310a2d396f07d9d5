"""Tests for persisted settings."""

from __future__ import annotations

from iquiz.constants.quiz_constants import (
    DEFAULT_DATA_SOURCE_URL,
    DEFAULT_REFRESH_INTERVAL_SECONDS,
)
from iquiz.core.services.settings_store import QuizSettings, SettingsStore


def test_fresh_store_has_defaults(tmp_path):
    settings = SettingsStore(tmp_path / "settings.ini").load()

    assert settings == QuizSettings(
        data_source_url=DEFAULT_DATA_SOURCE_URL,
        auto_refresh_enabled=False,
        refresh_interval_seconds=1800,
    )


def test_saved_settings_survive_reopen(tmp_path):
    path = tmp_path / "settings.ini"
    SettingsStore(path).save(
        QuizSettings("https://quiz.example.test/q.json", True, 600)
    )

    reopened = SettingsStore(path).load()

    assert reopened.data_source_url == "https://quiz.example.test/q.json"
    assert reopened.auto_refresh_enabled is True
    assert reopened.refresh_interval_seconds == 600


def test_blank_url_and_zero_interval_keep_stored_values(tmp_path):
    store = SettingsStore(tmp_path / "settings.ini")
    store.save(QuizSettings("https://quiz.example.test/q.json", False, 900))

    store.save(QuizSettings("   ", True, 0))
    settings = store.load()

    assert settings.data_source_url == "https://quiz.example.test/q.json"
    assert settings.auto_refresh_enabled is True
    assert settings.refresh_interval_seconds == 900


def test_reset_to_defaults(tmp_path):
    store = SettingsStore(tmp_path / "settings.ini")
    store.save(QuizSettings("https://quiz.example.test/q.json", True, 60))

    store.reset_to_defaults()

    assert store.load() == QuizSettings()
    assert store.get_data_source_url() == DEFAULT_DATA_SOURCE_URL
    assert store.load().refresh_interval_seconds == DEFAULT_REFRESH_INTERVAL_SECONDS
