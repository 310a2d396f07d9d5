"""Decode topic documents (remote feed or local cache) into a TopicSet.

Document format: a JSON array of topic records.

    [
      {
        "title": "Mathematics",
        "desc": "Did you pass the third grade?",      # or "description"
        "iconKey": "function",                        # optional
        "questions": [
          {"text": "What is 2+2?", "answer": "1", "answers": ["4", "22"]},
          {"text": "What is 3+3?", "options": ["6", "33"], "correctAnswerIndex": 0}
        ]
      }
    ]

Two question encodings are in circulation:

    indexed        ``correctAnswerIndex`` (or ``correctIndex``), 0-based int.
                   Written by ``topic_exporter`` and used by the local cache.
    answer-string  ``answer``, a 1-based numeric string. Used by the remote
                   feed.

A record is routed to a strategy by which of those fields it carries. Which
encoding the remote feed will settle on is not known, so both stay supported.

Decoding is all-or-nothing: a single bad question rejects the whole document.
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, StrictInt, ValidationError

from iquiz.constants.quiz_constants import MIN_OPTION_COUNT
from iquiz.core.errors import DecodeError
from iquiz.core.icons import icon_for
from iquiz.core.models import Question, Topic, TopicEntry, TopicSet

_INDEX_FIELDS = ("correctAnswerIndex", "correctIndex")


class TopicRecord(BaseModel):
    """Schema for one topic record; questions are decoded separately."""

    model_config = ConfigDict(extra="ignore")

    title: str
    description: str = Field(validation_alias=AliasChoices("description", "desc"))
    icon_key: str | None = Field(default=None, validation_alias=AliasChoices("iconKey", "iconName"))
    questions: list[dict[str, Any]]


class _QuestionRecord(BaseModel):
    model_config = ConfigDict(extra="ignore")

    text: str
    options: list[str] = Field(
        min_length=MIN_OPTION_COUNT,
        validation_alias=AliasChoices("options", "answers"),
    )


class IndexedQuestionRecord(_QuestionRecord):
    """Question carrying its 0-based correct index."""

    correct_index: StrictInt = Field(validation_alias=AliasChoices(*_INDEX_FIELDS))


class AnswerStringQuestionRecord(_QuestionRecord):
    """Question carrying a 1-based numeric answer string."""

    answer: str


def decode_topic_set(data: bytes | str) -> TopicSet:
    """Parse a JSON array of topic records into a TopicSet."""
    if isinstance(data, bytes):
        try:
            text = data.decode("utf-8-sig")
        except UnicodeDecodeError as exc:
            raise DecodeError("Topic document is not valid UTF-8.") from exc
    else:
        text = data

    try:
        document = json.loads(text)
    except json.JSONDecodeError as exc:
        raise DecodeError(f"Topic document is not valid JSON: {exc.msg}.") from exc

    if not isinstance(document, list):
        raise DecodeError("Topic document must be a JSON array of topics.")

    return tuple(_decode_topic(position, raw) for position, raw in enumerate(document))


def _decode_topic(position: int, raw: Any) -> TopicEntry:
    if not isinstance(raw, dict):
        raise DecodeError(f"Topic {position} is not a JSON object.")
    try:
        record = TopicRecord.model_validate(raw)
    except ValidationError as exc:
        raise DecodeError(f"Topic {position}: {_describe(exc)}") from exc

    questions = tuple(
        _decode_question(f"Topic {position} question {index}", raw_question)
        for index, raw_question in enumerate(record.questions)
    )
    topic = Topic(
        title=record.title,
        description=record.description,
        icon_key=record.icon_key or icon_for(record.title),
    )
    return TopicEntry(topic=topic, questions=questions)


def _decode_question(label: str, raw: dict[str, Any]) -> Question:
    try:
        if any(field in raw for field in _INDEX_FIELDS):
            indexed = IndexedQuestionRecord.model_validate(raw)
            text, options, correct_index = indexed.text, indexed.options, indexed.correct_index
        elif "answer" in raw:
            answered = AnswerStringQuestionRecord.model_validate(raw)
            text, options = answered.text, answered.options
            correct_index = _parse_answer(label, answered.answer)
        else:
            raise DecodeError(f"{label}: missing 'answer' or 'correctAnswerIndex'.")
    except ValidationError as exc:
        raise DecodeError(f"{label}: {_describe(exc)}") from exc

    if not 0 <= correct_index < len(options):
        raise DecodeError(
            f"{label}: correct index {correct_index} is out of range for {len(options)} options."
        )
    return Question(text=text, options=tuple(options), correct_index=correct_index)


def _parse_answer(label: str, answer: str) -> int:
    """Convert a 1-based answer string into a 0-based index."""
    stripped = answer.strip()
    if not stripped.isascii() or not stripped.isdigit():
        raise DecodeError(f"{label}: answer '{answer}' is not a number.")
    return int(stripped) - 1


def _describe(exc: ValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"]) or "record"
        parts.append(f"{location}: {error['msg']}")
    return "; ".join(parts)
