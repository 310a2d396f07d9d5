"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Callable

import httpx
import pytest

from iquiz.core.models import Question
from iquiz.core.services.local_store import LocalStore
from iquiz.core.services.reachability import ReachabilityMonitor
from iquiz.core.services.remote_source import RemoteSource
from iquiz.core.services.sync_engine import SyncEngine

FEED_URL = "https://quiz.example.test/questions.json"

REMOTE_FEED = [
    {
        "title": "Science!",
        "desc": "Because SCIENCE!",
        "questions": [
            {
                "text": "What is fire?",
                "answer": "1",
                "answers": [
                    "One of the four classical elements",
                    "A magical reaction given to us by God",
                    "A band that hasn't yet been discovered",
                    "Fire! Fire! Fire! heh-heh",
                ],
            }
        ],
    },
    {
        "title": "Marvel Super Heroes",
        "desc": "Avengers, Assemble!",
        "questions": [
            {
                "text": "Who is Iron Man?",
                "answer": "1",
                "answers": ["Tony Stark", "Obadiah Stane", "A rock hit by Megadeth", "Nobody knows"],
            },
            {
                "text": "Who founded the X-Men?",
                "answer": "2",
                "answers": ["Tony Stark", "Professor X", "The X-Institute", "Erik Lensherr"],
            },
        ],
    },
    {
        "title": "Mathematics",
        "desc": "Did you pass the third grade?",
        "questions": [
            {
                "text": "What is 2+2?",
                "answer": "1",
                "answers": ["4", "22", "An irrational number", "Nobody knows"],
            }
        ],
    },
]


class RecordingHandler:
    """MockTransport handler that counts requests and replays a canned response."""

    def __init__(self, status_code: int = 200, content: bytes = b"", exc: Exception | None = None):
        self.status_code = status_code
        self.content = content
        self.exc = exc
        self.calls = 0

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.calls += 1
        if self.exc is not None:
            raise self.exc
        return httpx.Response(self.status_code, content=self.content, request=request)


@pytest.fixture
def feed_bytes() -> bytes:
    return json.dumps(REMOTE_FEED).encode("utf-8")


@pytest.fixture
def online() -> ReachabilityMonitor:
    return ReachabilityMonitor(available=True)


@pytest.fixture
def offline() -> ReachabilityMonitor:
    return ReachabilityMonitor(available=False)


@pytest.fixture
def store(tmp_path: Path) -> LocalStore:
    return LocalStore(tmp_path / "cache" / "quizzes.json")


@pytest.fixture
def make_client() -> Callable[[RecordingHandler], httpx.AsyncClient]:
    def factory(handler: RecordingHandler) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(handler))

    return factory


@pytest.fixture
def make_engine(store, make_client):
    def factory(handler: RecordingHandler, reachability: ReachabilityMonitor) -> SyncEngine:
        remote = RemoteSource(reachability, client=make_client(handler))
        return SyncEngine(remote, store, reachability)

    return factory


@pytest.fixture
def three_questions() -> list[Question]:
    return [
        Question("First?", ("a", "b", "c"), 1),
        Question("Second?", ("a", "b", "c"), 2),
        Question("Third?", ("a", "b"), 0),
    ]
