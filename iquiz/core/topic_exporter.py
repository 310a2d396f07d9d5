"""Serialise a TopicSet into the canonical (indexed) JSON document."""

from __future__ import annotations

import json
from typing import Any

from iquiz.core.models import Question, TopicEntry, TopicSet


def encode_topic_set(topic_set: TopicSet) -> bytes:
    """Return the UTF-8 JSON document that ``decode_topic_set`` reads back unchanged."""
    document = [_serialize_entry(entry) for entry in topic_set]
    return json.dumps(document, ensure_ascii=False, indent=2).encode("utf-8")


def _serialize_entry(entry: TopicEntry) -> dict[str, Any]:
    return {
        "title": entry.topic.title,
        "description": entry.topic.description,
        "iconKey": entry.topic.icon_key,
        "questions": [_serialize_question(question) for question in entry.questions],
    }


def _serialize_question(question: Question) -> dict[str, Any]:
    return {
        "text": question.text,
        "options": list(question.options),
        "correctAnswerIndex": question.correct_index,
    }
