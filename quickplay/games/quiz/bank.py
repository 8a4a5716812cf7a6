"""Ordered question banks."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from quickplay.games.quiz.models import QuizQuestion, validate_question


class QuestionBank:
    """Fixed, ordered, validated sequence of questions."""

    def __init__(self, questions: Iterable[QuizQuestion]) -> None:
        items = tuple(questions)
        if not items:
            raise ValueError("Question bank must contain at least one question.")
        for position, question in enumerate(items):
            valid, reason = validate_question(question)
            if not valid:
                raise ValueError(f"Question {position} is invalid: {reason}")
        self._questions = items

    def __len__(self) -> int:
        return len(self._questions)

    def __getitem__(self, index: int) -> QuizQuestion:
        return self._questions[index]

    def __iter__(self) -> Iterator[QuizQuestion]:
        return iter(self._questions)


DEFAULT_QUESTIONS: tuple[QuizQuestion, ...] = (
    QuizQuestion(
        text="What is the capital of France?",
        options=("London", "Berlin", "Paris", "Madrid"),
        correct_answer="Paris",
    ),
    QuizQuestion(
        text="Which planet is known as the Red Planet?",
        options=("Venus", "Mars", "Jupiter", "Saturn"),
        correct_answer="Mars",
    ),
    QuizQuestion(
        text="What is the largest ocean on Earth?",
        options=("Atlantic Ocean", "Indian Ocean", "Arctic Ocean", "Pacific Ocean"),
        correct_answer="Pacific Ocean",
    ),
    QuizQuestion(
        text="How many continents are there?",
        options=("5", "6", "7", "8"),
        correct_answer="7",
    ),
    QuizQuestion(
        text="Who painted the Mona Lisa?",
        options=("Vincent van Gogh", "Leonardo da Vinci", "Pablo Picasso", "Claude Monet"),
        correct_answer="Leonardo da Vinci",
    ),
)


def default_bank() -> QuestionBank:
    return QuestionBank(DEFAULT_QUESTIONS)
