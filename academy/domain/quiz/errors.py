"""
Quiz 도메인 오류: 순수 파이썬

code 는 전송 계층(DRF exception handler)에서 상태 코드로 1:1 매핑한다.
"""
from __future__ import annotations


class QuizDomainError(Exception):
    """Quiz 도메인 규칙 위반 등."""
    code = "quiz_error"
    default_message = "Quiz request failed"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message


class NotFoundError(QuizDomainError):
    code = "not_found"
    default_message = "Not found"


class CourseNotFoundError(NotFoundError):
    default_message = "Course not found"


class LessonNotFoundError(NotFoundError):
    default_message = "Lesson not found"


class SubmissionNotFoundError(NotFoundError):
    default_message = "Quiz submission not found"


class NotAQuizError(QuizDomainError):
    code = "not_a_quiz"
    default_message = "This lesson is not a quiz"


class AttemptForbiddenError(QuizDomainError):
    """submission 소유자가 아님."""
    code = "forbidden"
    default_message = "You do not have access to this quiz submission"


class AlreadyFinalizedError(QuizDomainError):
    """status 가 in_progress 가 아님 (재제출)."""
    code = "already_finalized"
    default_message = "Quiz has already been submitted"


class AttemptExpiredError(QuizDomainError):
    """제한 시간 초과. 부수효과로 expired 확정, 답안은 폐기."""
    code = "expired"
    default_message = (
        "Quiz time limit has expired. Your quiz has been automatically submitted."
    )


class QuizValidationError(QuizDomainError):
    code = "validation_error"
    default_message = "Invalid quiz answers payload"


class AttemptConflictError(QuizDomainError):
    """(user, lesson, attempt_number) 중복. 호출자가 재시도 가능."""
    code = "conflict"
    default_message = "Another attempt was started at the same time, please retry"
