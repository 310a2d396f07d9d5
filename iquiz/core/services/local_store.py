"""Durable cache of the last known-good TopicSet."""

from __future__ import annotations

import logging
import os
from pathlib import Path
import tempfile
from threading import RLock

from PySide6.QtCore import QStandardPaths

from iquiz.constants.quiz_constants import CACHE_FILE_NAME
from iquiz.core.default_topics import default_topic_set
from iquiz.core.errors import CorruptData, DecodeError, NotFound
from iquiz.core.models import TopicSet
from iquiz.core.topic_exporter import encode_topic_set
from iquiz.core.topic_importer import decode_topic_set

logger = logging.getLogger(__name__)


def default_cache_path() -> Path:
    """Per-install location of the cache file."""
    location = QStandardPaths.writableLocation(QStandardPaths.StandardLocation.AppDataLocation)
    return Path(location) / CACHE_FILE_NAME


class LocalStore:
    """Owns the cache file. All reads and writes go through one lock."""

    def __init__(self, path: Path) -> None:
        self._path = path
        self._lock = RLock()

    @property
    def path(self) -> Path:
        return self._path

    def exists(self) -> bool:
        with self._lock:
            return self._path.is_file()

    def load(self) -> TopicSet:
        with self._lock:
            try:
                data = self._path.read_bytes()
            except FileNotFoundError as exc:
                raise NotFound(f"No topic cache at {self._path}.") from exc
            try:
                return decode_topic_set(data)
            except DecodeError as exc:
                raise CorruptData(f"Topic cache at {self._path} is unreadable: {exc}") from exc

    def save(self, topic_set: TopicSet) -> None:
        """Replace the cache in one step; readers never see a half-written file."""
        document = encode_topic_set(topic_set)
        with self._lock:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            fd, temp_name = tempfile.mkstemp(
                prefix=f".{self._path.name}.", suffix=".tmp", dir=self._path.parent
            )
            try:
                with os.fdopen(fd, "wb") as handle:
                    handle.write(document)
                    handle.flush()
                    os.fsync(handle.fileno())
                os.replace(temp_name, self._path)
            except BaseException:
                Path(temp_name).unlink(missing_ok=True)
                raise
            logger.debug("Saved %d topic(s) to %s", len(topic_set), self._path)

    def ensure_seeded(self) -> bool:
        """Write the built-in topics if no cache exists. Returns True if it seeded."""
        with self._lock:
            if self._path.is_file():
                return False
            logger.info("Seeding topic cache at %s with default topics", self._path)
            self.save(default_topic_set())
            return True

    def reseed(self) -> TopicSet:
        """Overwrite the cache with the built-in topics and return them."""
        topics = default_topic_set()
        with self._lock:
            logger.info("Re-seeding topic cache at %s with default topics", self._path)
            self.save(topics)
        return topics
