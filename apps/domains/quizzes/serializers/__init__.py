from .admin_submission import AdminQuizSubmissionSerializer
from .attempt import (
    AttemptResultSerializer,
    AttemptSummarySerializer,
    QuizViewSerializer,
    StartedAttemptSerializer,
    SubmitAttemptSerializer,
)

__all__ = [
    "AdminQuizSubmissionSerializer",
    "AttemptResultSerializer",
    "AttemptSummarySerializer",
    "QuizViewSerializer",
    "StartedAttemptSerializer",
    "SubmitAttemptSerializer",
]
