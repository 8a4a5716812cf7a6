"""Quiz domain models."""

from __future__ import annotations

from dataclasses import dataclass

from quickplay.games.tiers import ScoreTier

OPTIONS_PER_QUESTION = 4


@dataclass(frozen=True, slots=True)
class QuizQuestion:
    """Multiple-choice question."""

    text: str
    options: tuple[str, ...]
    correct_answer: str

    def is_correct(self, option: str) -> bool:
        return option == self.correct_answer


@dataclass(frozen=True, slots=True)
class AnsweredQuestion:
    """One entry of the review log."""

    question: str
    selected_option: str
    correct_answer: str
    is_correct: bool


@dataclass(frozen=True, slots=True)
class QuizResult:
    """Final outcome of a quiz run."""

    score: int
    question_count: int
    percentage: int
    tier: ScoreTier
    answers: tuple[AnsweredQuestion, ...]


def validate_question(question: QuizQuestion) -> tuple[bool, str]:
    """Validate a question's shape."""
    if not question.text.strip():
        return False, "Question text cannot be empty."
    if len(question.options) != OPTIONS_PER_QUESTION:
        return False, f"Question must have exactly {OPTIONS_PER_QUESTION} options."
    if len(set(question.options)) != len(question.options):
        return False, "Question options must be distinct."
    if question.correct_answer not in question.options:
        return False, "Correct answer must be one of the options."
    return True, ""
