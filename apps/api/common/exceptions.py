# apps/api/common/exceptions.py
"""
DRF EXCEPTION_HANDLER

도메인 예외(QuizDomainError) → HTTP 응답
- code 는 안정적인 식별자 (프론트 분기용)
- detail 은 사용자 노출 메시지
그 외 예외는 DRF 기본 핸들러에 위임 (미처리 예외는 UnhandledExceptionMiddleware 가 500 JSON)
"""
from __future__ import annotations

import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from academy.domain.quiz.errors import (
    AlreadyFinalizedError,
    AttemptConflictError,
    AttemptExpiredError,
    AttemptForbiddenError,
    NotAQuizError,
    NotFoundError,
    QuizDomainError,
    QuizValidationError,
)

logger = logging.getLogger(__name__)

# 순서 중요: 하위 클래스가 먼저
_STATUS_BY_ERROR = (
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (NotAQuizError, status.HTTP_400_BAD_REQUEST),
    (AttemptForbiddenError, status.HTTP_403_FORBIDDEN),
    (AlreadyFinalizedError, status.HTTP_409_CONFLICT),
    (AttemptExpiredError, status.HTTP_400_BAD_REQUEST),
    (QuizValidationError, status.HTTP_400_BAD_REQUEST),
    (AttemptConflictError, status.HTTP_409_CONFLICT),
)


def status_for(exc: QuizDomainError) -> int:
    for cls, code in _STATUS_BY_ERROR:
        if isinstance(exc, cls):
            return code
    return status.HTTP_400_BAD_REQUEST


def domain_exception_handler(exc, context):
    if not isinstance(exc, QuizDomainError):
        return exception_handler(exc, context)

    body = {"detail": exc.message, "code": exc.code}
    if isinstance(exc, AttemptExpiredError):
        body["expired"] = True
    if isinstance(exc, AttemptConflictError):
        body["retryable"] = True

    http_status = status_for(exc)
    view = context.get("view")
    logger.info(
        "QUIZ_DOMAIN_ERROR code=%s status=%s view=%s",
        exc.code,
        http_status,
        type(view).__name__ if view is not None else "-",
    )
    return Response(body, status=http_status)
