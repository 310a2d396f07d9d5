"""Tests for the quiz session state machine and scoring."""

from __future__ import annotations

import pytest

from iquiz.core.errors import (
    EmptyQuestionSet,
    InvalidOptionIndex,
    InvalidQuestionIndex,
    InvalidSessionState,
    NoSelection,
)
from iquiz.core.models import UNANSWERED, Answered, ScoreTier
from iquiz.core.services.session_engine import SessionEngine, SessionState, classify_score


def _answer_all(session: SessionEngine, choices: list[int]) -> None:
    for choice in choices:
        session.select_option(choice)
        session.submit()


def test_start_requires_questions():
    with pytest.raises(EmptyQuestionSet):
        SessionEngine().start([])


def test_start_begins_at_first_question(three_questions):
    session = SessionEngine()
    session.start(three_questions, topic_index=2)

    assert session.get_state() is SessionState.IN_PROGRESS
    assert session.get_current_question_index() == 0
    assert session.get_topic_index() == 2
    assert session.get_answers() == [UNANSWERED] * 3
    assert session.get_tentative_selection() is None


def test_select_then_submit_advances(three_questions):
    session = SessionEngine()
    session.start(three_questions)

    session.select_option(0)
    assert session.get_state() is SessionState.AWAITING_SUBMIT
    session.select_option(1)
    assert session.submit() is SessionState.IN_PROGRESS

    assert session.get_current_question_index() == 1
    assert session.get_answers()[0] == Answered(1)
    assert session.is_answer_correct(0) is True
    assert session.is_answer_correct(1) is None


def test_submit_without_selection_fails(three_questions):
    session = SessionEngine()
    session.start(three_questions)

    with pytest.raises(NoSelection):
        session.submit()


def test_invalid_option_leaves_state_unchanged(three_questions):
    session = SessionEngine()
    session.start(three_questions)
    session.select_option(2)

    with pytest.raises(InvalidOptionIndex):
        session.select_option(3)
    with pytest.raises(InvalidOptionIndex):
        session.select_option(-1)

    assert session.get_state() is SessionState.AWAITING_SUBMIT
    assert session.get_tentative_selection() == 2
    assert session.get_current_question_index() == 0


def test_last_submit_completes_session(three_questions):
    session = SessionEngine()
    session.start(three_questions)

    _answer_all(session, [1, 1, 0])

    assert session.is_completed()
    with pytest.raises(InvalidSessionState):
        session.select_option(0)
    with pytest.raises(InvalidSessionState):
        session.submit()


def test_score_with_two_of_three_is_good(three_questions):
    session = SessionEngine()
    session.start(three_questions)
    _answer_all(session, [1, 1, 0])

    score = session.score()

    assert (score.correct, score.total, score.tier) == (2, 3, ScoreTier.GOOD)


def test_score_perfect_and_practice(three_questions):
    perfect = SessionEngine()
    perfect.start(three_questions)
    _answer_all(perfect, [1, 2, 0])

    practice = SessionEngine()
    practice.start(three_questions)
    _answer_all(practice, [0, 0, 1])

    assert perfect.score().tier is ScoreTier.PERFECT
    assert perfect.score().fraction == 1.0
    assert (practice.score().correct, practice.score().tier) == (0, ScoreTier.PRACTICE)


def test_score_is_available_mid_session(three_questions):
    session = SessionEngine()
    session.start(three_questions)
    _answer_all(session, [1])

    score = session.score()

    assert (score.correct, score.total) == (1, 3)
    assert not session.is_completed()


@pytest.mark.parametrize(
    ("correct", "total", "tier"),
    [
        (10, 10, ScoreTier.PERFECT),
        (7, 10, ScoreTier.GREAT),
        (9, 10, ScoreTier.GREAT),
        (6, 10, ScoreTier.GOOD),
        (5, 10, ScoreTier.GOOD),
        (1, 2, ScoreTier.GOOD),
        (4, 10, ScoreTier.PRACTICE),
        (0, 1, ScoreTier.PRACTICE),
    ],
)
def test_classify_score_thresholds(correct, total, tier):
    assert classify_score(correct, total) is tier


def test_classify_score_rejects_empty_total():
    with pytest.raises(EmptyQuestionSet):
        classify_score(0, 0)


def test_revisiting_restores_recorded_selection(three_questions):
    session = SessionEngine()
    session.start(three_questions)
    _answer_all(session, [2, 1])

    session.go_to_question(0)

    assert session.get_current_question_index() == 0
    assert session.get_state() is SessionState.AWAITING_SUBMIT
    assert session.get_tentative_selection() == 2


def test_resubmitting_revisited_question_moves_forward(three_questions):
    session = SessionEngine()
    session.start(three_questions)
    _answer_all(session, [2, 1])
    session.go_to_question(0)

    session.select_option(1)
    session.submit()

    assert session.get_answers()[0] == Answered(1)
    assert session.get_current_question_index() == 1
    assert session.get_tentative_selection() == 1
    session.submit()
    assert session.get_current_question_index() == 2
    assert session.get_tentative_selection() is None


def test_previous_question_from_completed_reopens_last(three_questions):
    session = SessionEngine()
    session.start(three_questions)
    _answer_all(session, [1, 2, 1])

    session.previous_question()

    assert session.get_current_question_index() == 2
    assert session.get_tentative_selection() == 1
    session.previous_question()
    assert session.get_current_question_index() == 1
    assert session.get_tentative_selection() == 2


def test_previous_question_before_first_fails(three_questions):
    session = SessionEngine()
    session.start(three_questions)

    with pytest.raises(InvalidQuestionIndex):
        session.previous_question()
    assert session.get_current_question_index() == 0


def test_operations_need_a_started_session():
    session = SessionEngine()

    with pytest.raises(InvalidSessionState):
        session.select_option(0)
    with pytest.raises(InvalidSessionState):
        session.score()
    assert not session.is_active()


def test_reset_discards_session(three_questions):
    session = SessionEngine()
    session.start(three_questions)
    _answer_all(session, [1])

    session.reset()

    assert not session.is_active()
    assert session.get_answers() == []


def test_question_indexes_are_range_checked(three_questions):
    session = SessionEngine()
    session.start(three_questions)
    _answer_all(session, [1, 2, 0])

    with pytest.raises(InvalidQuestionIndex):
        session.go_to_question(3)
    with pytest.raises(InvalidQuestionIndex):
        session.is_answer_correct(-1)
    with pytest.raises(InvalidQuestionIndex):
        session.is_answer_correct(3)
    assert session.is_completed()


def test_bad_question_index_is_a_session_error(three_questions):
    from iquiz.core.errors import SessionError

    session = SessionEngine()
    session.start(three_questions)

    with pytest.raises(SessionError):
        session.go_to_question(-1)
