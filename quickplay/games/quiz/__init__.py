"""Multiple-choice quiz."""

from quickplay.games.quiz.bank import DEFAULT_QUESTIONS, QuestionBank, default_bank
from quickplay.games.quiz.engine import QuizEngine
from quickplay.games.quiz.models import AnsweredQuestion, QuizQuestion, QuizResult

__all__ = [
    "AnsweredQuestion",
    "DEFAULT_QUESTIONS",
    "QuestionBank",
    "QuizEngine",
    "QuizQuestion",
    "QuizResult",
    "default_bank",
]
