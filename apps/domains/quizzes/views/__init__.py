from .admin_submission_views import AdminQuizSubmissionViewSet
from .student_attempt_views import (
    QuizAttemptHistoryView,
    QuizAttemptResultView,
    QuizQuestionsView,
    StartQuizAttemptView,
    SubmitQuizAttemptView,
)

__all__ = [
    "AdminQuizSubmissionViewSet",
    "QuizAttemptHistoryView",
    "QuizAttemptResultView",
    "QuizQuestionsView",
    "StartQuizAttemptView",
    "SubmitQuizAttemptView",
]
