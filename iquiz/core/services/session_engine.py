"""State machine for a single quiz attempt."""

from __future__ import annotations

from enum import Enum
from typing import Iterable

from iquiz.core.errors import (
    EmptyQuestionSet,
    InvalidOptionIndex,
    InvalidQuestionIndex,
    InvalidSessionState,
    NoSelection,
)
from iquiz.core.models import UNANSWERED, Answer, Answered, Question, Score, ScoreTier


class SessionState(str, Enum):
    IN_PROGRESS = "in_progress"
    AWAITING_SUBMIT = "awaiting_submit"
    COMPLETED = "completed"


def classify_score(correct: int, total: int) -> ScoreTier:
    """Bucket ``correct`` out of ``total`` into a tier, checked from the top down."""
    if total <= 0:
        raise EmptyQuestionSet("Cannot score a session without questions.")
    if correct == total:
        return ScoreTier.PERFECT
    if correct * 10 >= total * 7:
        return ScoreTier.GREAT
    if correct * 2 >= total:
        return ScoreTier.GOOD
    return ScoreTier.PRACTICE


class SessionEngine:
    """Tracks the current question, the tentative choice and recorded answers.

    Nothing here is persisted; a session lives until ``reset`` or the next
    ``start``.
    """

    def __init__(self) -> None:
        self.reset()

    def start(self, questions: Iterable[Question], topic_index: int | None = None) -> None:
        prepared = tuple(questions)
        if not prepared:
            raise EmptyQuestionSet("A quiz session needs at least one question.")
        self._topic_index = topic_index
        self._questions = prepared
        self._answers = [UNANSWERED] * len(prepared)
        self._enter_question(0)

    def reset(self) -> None:
        self._state: SessionState | None = None
        self._topic_index: int | None = None
        self._questions: tuple[Question, ...] = ()
        self._answers: list[Answer] = []
        self._current_index: int = 0
        self._tentative: int | None = None

    def is_active(self) -> bool:
        return self._state is not None

    def is_completed(self) -> bool:
        return self._state is SessionState.COMPLETED

    def get_state(self) -> SessionState:
        return self._require_active()

    def get_topic_index(self) -> int | None:
        return self._topic_index

    def get_questions(self) -> tuple[Question, ...]:
        return self._questions

    def get_question_count(self) -> int:
        return len(self._questions)

    def get_current_question_index(self) -> int:
        self._require_active()
        return self._current_index

    def get_current_question(self) -> Question:
        self._require_active()
        return self._questions[self._current_index]

    def get_tentative_selection(self) -> int | None:
        return self._tentative

    def get_answers(self) -> list[Answer]:
        return list(self._answers)

    def select_option(self, index: int) -> None:
        self._require_active(SessionState.IN_PROGRESS, SessionState.AWAITING_SUBMIT)
        option_count = len(self._questions[self._current_index].options)
        if not 0 <= index < option_count:
            raise InvalidOptionIndex(
                f"Option {index} does not exist; question has {option_count} options."
            )
        self._tentative = index
        self._state = SessionState.AWAITING_SUBMIT

    def submit(self) -> SessionState:
        """Record the tentative choice and move on. Returns the new state."""
        state = self._require_active(SessionState.IN_PROGRESS, SessionState.AWAITING_SUBMIT)
        if state is SessionState.IN_PROGRESS or self._tentative is None:
            raise NoSelection("Select an option before submitting.")

        self._answers[self._current_index] = Answered(self._tentative)
        if self._current_index == len(self._questions) - 1:
            self._state = SessionState.COMPLETED
        else:
            self._enter_question(self._current_index + 1)
        return self._state

    def go_to_question(self, index: int) -> None:
        """Jump to a question, restoring its recorded answer as the tentative choice."""
        self._require_active()
        self._check_question_index(index)
        self._enter_question(index)

    def previous_question(self) -> None:
        state = self._require_active()
        # From the finished screen "back" means the last question.
        target = self._current_index if state is SessionState.COMPLETED else self._current_index - 1
        self.go_to_question(target)

    def is_answer_correct(self, question_index: int) -> bool | None:
        """None while the question is unanswered."""
        self._require_active()
        self._check_question_index(question_index)
        answer = self._answers[question_index]
        if not isinstance(answer, Answered):
            return None
        return answer.index == self._questions[question_index].correct_index

    def score(self) -> Score:
        """Score over the answers recorded so far."""
        self._require_active()
        correct = sum(
            1
            for answer, question in zip(self._answers, self._questions)
            if isinstance(answer, Answered) and answer.index == question.correct_index
        )
        total = len(self._questions)
        return Score(correct=correct, total=total, tier=classify_score(correct, total))

    def _enter_question(self, index: int) -> None:
        self._current_index = index
        recorded = self._answers[index]
        if isinstance(recorded, Answered):
            self._tentative = recorded.index
            self._state = SessionState.AWAITING_SUBMIT
        else:
            self._tentative = None
            self._state = SessionState.IN_PROGRESS

    def _check_question_index(self, index: int) -> None:
        if not 0 <= index < len(self._questions):
            raise InvalidQuestionIndex(f"Question index {index} out of range")

    def _require_active(self, *allowed: SessionState) -> SessionState:
        if self._state is None:
            raise InvalidSessionState("No quiz session has been started.")
        if allowed and self._state not in allowed:
            raise InvalidSessionState(f"Not allowed while the session is {self._state.value}.")
        return self._state
