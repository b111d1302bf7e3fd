# apps/domains/quizzes/models/__init__.py

from .quiz_submission import QuizSubmission

__all__ = [
    "QuizSubmission",
]
