"""Quiz session state machine."""

from __future__ import annotations

import logging

from quickplay.games.quiz.bank import QuestionBank, default_bank
from quickplay.games.quiz.models import AnsweredQuestion, QuizQuestion, QuizResult
from quickplay.games.tiers import percentage, score_tier

logger = logging.getLogger(__name__)


class QuizEngine:
    """Walks a question bank: select, submit, advance, then report."""

    def __init__(self, bank: QuestionBank | None = None) -> None:
        self._bank = bank or default_bank()
        self._question_index = 0
        self._selected_option: str | None = None
        self._answered = False
        self._finished = False
        self._score = 0
        self._answer_log: list[AnsweredQuestion] = []

    @property
    def question_count(self) -> int:
        return len(self._bank)

    @property
    def question_index(self) -> int:
        return self._question_index

    @property
    def current_question(self) -> QuizQuestion:
        return self._bank[self._question_index]

    @property
    def is_last_question(self) -> bool:
        return self._question_index == len(self._bank) - 1

    @property
    def selected_option(self) -> str | None:
        return self._selected_option

    @property
    def answered(self) -> bool:
        return self._answered

    @property
    def finished(self) -> bool:
        return self._finished

    @property
    def score(self) -> int:
        return self._score

    @property
    def answer_log(self) -> tuple[AnsweredQuestion, ...]:
        return tuple(self._answer_log)

    def select_option(self, option: str) -> bool:
        """Pick an option for the current question without scoring it."""
        if self._answered or self._finished:
            return False
        if option not in self.current_question.options:
            logger.debug("quiz_option_rejected option=%r", option)
            return False
        self._selected_option = option
        return True

    def submit_answer(self) -> bool:
        """Lock in the selected option and score it."""
        if self._selected_option is None or self._answered or self._finished:
            return False
        question = self.current_question
        is_correct = question.is_correct(self._selected_option)
        if is_correct:
            self._score += 1
        self._answer_log.append(
            AnsweredQuestion(
                question=question.text,
                selected_option=self._selected_option,
                correct_answer=question.correct_answer,
                is_correct=is_correct,
            )
        )
        self._answered = True
        return True

    def next_question(self) -> bool:
        """Advance after an answer, or finish on the last question."""
        if not self._answered or self._finished:
            return False
        if self.is_last_question:
            self._finished = True
            result = self.result()
            logger.info(
                "quiz_finished score=%d total=%d percentage=%d",
                result.score,
                result.question_count,
                result.percentage,
            )
            return True
        self._question_index += 1
        self._selected_option = None
        self._answered = False
        return True

    def result(self) -> QuizResult:
        """Score summary; meaningful once the quiz is finished."""
        percent = percentage(self._score, len(self._bank))
        return QuizResult(
            score=self._score,
            question_count=len(self._bank),
            percentage=percent,
            tier=score_tier(percent),
            answers=tuple(self._answer_log),
        )

    def review(self) -> tuple[AnsweredQuestion, ...]:
        return self.answer_log

    def restart(self) -> None:
        self._question_index = 0
        self._selected_option = None
        self._answered = False
        self._finished = False
        self._score = 0
        self._answer_log = []
