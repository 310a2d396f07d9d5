"""Domain models for quiz topics, questions and session answers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


@dataclass(frozen=True, slots=True)
class Topic:
    """Named quiz category shown in the topic list."""

    title: str
    description: str
    icon_key: str


@dataclass(frozen=True, slots=True)
class Question:
    """Multiple-choice question with a single correct option."""

    text: str
    options: tuple[str, ...]
    correct_index: int

    def __post_init__(self) -> None:
        if len(self.options) < 2:
            raise ValueError("A question needs at least two options.")
        if not 0 <= self.correct_index < len(self.options):
            raise ValueError(
                f"Correct index {self.correct_index} out of range for {len(self.options)} options."
            )


@dataclass(frozen=True, slots=True)
class TopicEntry:
    """A topic paired with its questions."""

    topic: Topic
    questions: tuple[Question, ...]


# Topics are identified by their position in this tuple.
TopicSet = tuple[TopicEntry, ...]


@dataclass(frozen=True, slots=True)
class Answered:
    """A recorded answer for one question slot."""

    index: int


@dataclass(frozen=True, slots=True)
class Unanswered:
    """Marker for a question slot that has no recorded answer yet."""


UNANSWERED = Unanswered()

Answer = Union[Answered, Unanswered]


class ScoreTier(str, Enum):
    """Qualitative bucket for a session's score."""

    PERFECT = "perfect"
    GREAT = "great"
    GOOD = "good"
    PRACTICE = "practice"


@dataclass(frozen=True, slots=True)
class Score:
    """Snapshot of a session's result."""

    correct: int
    total: int
    tier: ScoreTier

    @property
    def fraction(self) -> float:
        return self.correct / self.total
