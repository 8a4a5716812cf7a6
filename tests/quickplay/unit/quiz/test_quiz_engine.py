from __future__ import annotations

import random

import pytest

from quickplay.games.quiz import QuestionBank, QuizEngine, QuizQuestion, default_bank
from quickplay.games.tiers import ScoreTier


def _answer(engine: QuizEngine, option: str) -> None:
    assert engine.select_option(option)
    assert engine.submit_answer()
    assert engine.next_question()


def test_capital_of_france_scenario() -> None:
    engine = QuizEngine()
    question = engine.current_question
    assert question.text == "What is the capital of France?"
    assert question.correct_answer == "Paris"

    assert engine.select_option("Paris")
    assert engine.score == 0
    assert engine.submit_answer()

    assert engine.score == 1
    assert engine.answered
    assert engine.answer_log[0].is_correct
    assert engine.answer_log[0].selected_option == "Paris"


def test_default_bank_has_five_valid_questions() -> None:
    assert QuizEngine().question_count == 5
    for question in default_bank():
        assert len(question.options) == 4
        assert question.correct_answer in question.options


def test_wrong_answer_is_logged_without_scoring() -> None:
    engine = QuizEngine()
    engine.select_option("London")
    engine.submit_answer()

    entry = engine.answer_log[0]
    assert engine.score == 0
    assert not entry.is_correct
    assert entry.correct_answer == "Paris"
    assert entry.question == "What is the capital of France?"


def test_selection_can_change_until_submitted() -> None:
    engine = QuizEngine()
    engine.select_option("London")
    engine.select_option("Paris")
    engine.submit_answer()
    assert engine.score == 1

    assert not engine.select_option("Berlin")
    assert engine.selected_option == "Paris"


def test_invalid_operations_are_no_ops() -> None:
    engine = QuizEngine()
    assert not engine.submit_answer()
    assert not engine.next_question()
    assert not engine.select_option("Atlantis")
    assert engine.selected_option is None

    engine.select_option("Paris")
    engine.submit_answer()
    assert not engine.submit_answer()
    assert engine.score == 1
    assert len(engine.answer_log) == 1


def test_next_question_advances_and_clears_selection() -> None:
    engine = QuizEngine()
    _answer(engine, "Paris")

    assert engine.question_index == 1
    assert engine.selected_option is None
    assert not engine.answered
    assert engine.current_question.text == "Which planet is known as the Red Planet?"


def test_full_run_produces_result() -> None:
    engine = QuizEngine()
    for choice in ("Paris", "Mars", "Atlantic Ocean", "7", "Leonardo da Vinci"):
        _answer(engine, choice)

    assert engine.finished
    assert not engine.next_question()
    assert not engine.select_option("Paris")

    result = engine.result()
    assert result.score == 4
    assert result.question_count == 5
    assert result.percentage == 80
    assert result.tier is ScoreTier.SUCCESS
    assert [entry.is_correct for entry in engine.review()] == [True, True, False, True, True]


def test_restart_resets_session() -> None:
    engine = QuizEngine()
    _answer(engine, "Paris")
    engine.select_option("Venus")
    engine.restart()

    assert engine.question_index == 0
    assert engine.score == 0
    assert engine.answer_log == ()
    assert engine.selected_option is None
    assert not engine.answered
    assert not engine.finished


def test_score_never_exceeds_question_count() -> None:
    rng = random.Random(3)
    engine = QuizEngine()
    for _ in range(20):
        engine.restart()
        while not engine.finished:
            engine.select_option(rng.choice(engine.current_question.options))
            engine.submit_answer()
            engine.next_question()
            assert 0 <= engine.score <= engine.question_count
        assert 0 <= engine.result().percentage <= 100


def test_single_question_bank() -> None:
    bank = QuestionBank(
        [QuizQuestion("2 + 2?", ("3", "4", "5", "22"), "4")],
    )
    engine = QuizEngine(bank)
    assert engine.is_last_question
    _answer(engine, "5")
    assert engine.finished
    assert engine.result().tier is ScoreTier.ERROR


@pytest.mark.parametrize(
    "questions",
    [
        [],
        [QuizQuestion("", ("a", "b", "c", "d"), "a")],
        [QuizQuestion("Q?", ("a", "b", "c"), "a")],
        [QuizQuestion("Q?", ("a", "b", "c", "d"), "e")],
        [QuizQuestion("Q?", ("a", "a", "c", "d"), "a")],
    ],
)
def test_invalid_banks_are_refused(questions: list[QuizQuestion]) -> None:
    with pytest.raises(ValueError):
        QuestionBank(questions)
