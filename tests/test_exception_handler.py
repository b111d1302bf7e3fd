import pytest
from rest_framework.exceptions import NotAuthenticated

from academy.domain.quiz import errors
from apps.api.common.exceptions import domain_exception_handler


@pytest.mark.parametrize(
    "exc, status, code",
    [
        (errors.CourseNotFoundError(), 404, "not_found"),
        (errors.LessonNotFoundError(), 404, "not_found"),
        (errors.SubmissionNotFoundError(), 404, "not_found"),
        (errors.NotAQuizError(), 400, "not_a_quiz"),
        (errors.AttemptForbiddenError(), 403, "forbidden"),
        (errors.AlreadyFinalizedError(), 409, "already_finalized"),
        (errors.AttemptExpiredError(), 400, "expired"),
        (errors.QuizValidationError("bad"), 400, "validation_error"),
        (errors.AttemptConflictError(), 409, "conflict"),
    ],
)
def test_domain_errors_map_to_status(exc, status, code):
    res = domain_exception_handler(exc, {})
    assert res.status_code == status
    assert res.data["code"] == code
    assert res.data["detail"] == exc.message


def test_expired_and_conflict_flags():
    assert domain_exception_handler(errors.AttemptExpiredError(), {}).data["expired"] is True
    assert domain_exception_handler(errors.AttemptConflictError(), {}).data["retryable"] is True
    assert "retryable" not in domain_exception_handler(errors.NotAQuizError(), {}).data


def test_other_exceptions_fall_through_to_drf():
    res = domain_exception_handler(NotAuthenticated(), {})
    assert res.status_code == 401
    assert domain_exception_handler(RuntimeError("boom"), {}) is None


def test_unhandled_exception_middleware_returns_json_500(rf, settings):
    from apps.api.common.middleware import UnhandledExceptionMiddleware

    settings.CORS_ALLOW_ALL_ORIGINS = False
    settings.CORS_ALLOWED_ORIGINS = ["https://app.example.com"]
    request = rf.post("/api/v1/quizzes/1/quiz-1/start/", HTTP_ORIGIN="https://app.example.com")

    middleware = UnhandledExceptionMiddleware(lambda r: None)
    res = middleware.process_exception(request, RuntimeError("db exploded"))

    assert res.status_code == 500
    assert b"internal_error" in res.content
    assert b"db exploded" not in res.content
    assert res["Access-Control-Allow-Origin"] == "https://app.example.com"
