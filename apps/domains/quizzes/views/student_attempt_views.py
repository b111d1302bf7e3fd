# PATH: apps/domains/quizzes/views/student_attempt_views.py
"""
Student Quiz Attempt APIs

POST /quizzes/{course_id}/{lesson_id}/start/
GET  /quizzes/{course_id}/{lesson_id}/questions/
GET  /quizzes/{course_id}/{lesson_id}/attempts/
POST /quizzes/submissions/{submission_id}/submit/
GET  /quizzes/submissions/{submission_id}/results/

- user_id 는 항상 request.user.id (클라이언트 입력 신뢰 X)
- 도메인 예외는 EXCEPTION_HANDLER 가 상태 코드로 변환
- 시간 판정은 서버 시계만 사용 (클라이언트 타이머 무시)
"""

from __future__ import annotations

from django.conf import settings
from django.core.exceptions import ValidationError as DjangoValidationError
from django.core.validators import validate_ipv46_address
from drf_yasg.utils import swagger_auto_schema
from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.domains.quizzes.serializers import (
    AttemptResultSerializer,
    AttemptSummarySerializer,
    QuizViewSerializer,
    StartedAttemptSerializer,
    SubmitAttemptSerializer,
)
from apps.domains.quizzes.services import build_lifecycle_manager


def _client_ip(request):
    ip = request.META.get("REMOTE_ADDR")
    if getattr(settings, "QUIZ_TRUST_X_FORWARDED_FOR", False):
        forwarded = request.META.get("HTTP_X_FORWARDED_FOR", "")
        if forwarded:
            ip = forwarded.split(",")[0].strip()
    if not ip:
        return None
    try:
        validate_ipv46_address(ip)
    except DjangoValidationError:
        return None
    return ip


class StartQuizAttemptView(APIView):
    permission_classes = [IsAuthenticated]

    @swagger_auto_schema(
        operation_summary="퀴즈 응시 시작",
        responses={201: StartedAttemptSerializer},
    )
    def post(self, request, course_id: int, lesson_id: str):
        started = build_lifecycle_manager().start_attempt(
            user_id=request.user.id,
            course_id=int(course_id),
            lesson_id=str(lesson_id),
            ip_address=_client_ip(request),
            user_agent=request.META.get("HTTP_USER_AGENT", ""),
        )
        return Response(
            StartedAttemptSerializer(started).data,
            status=status.HTTP_201_CREATED,
        )


class QuizQuestionsView(APIView):
    """
    문항(정답 제외) + 메타 + 이전 응시 + 진행 중 응시

    조회 시점에 만료된 in_progress 는 expired 로 확정된다.
    """

    permission_classes = [IsAuthenticated]

    @swagger_auto_schema(
        operation_summary="퀴즈 문항 조회",
        responses={200: QuizViewSerializer},
    )
    def get(self, request, course_id: int, lesson_id: str):
        view = build_lifecycle_manager().get_quiz_view(
            user_id=request.user.id,
            course_id=int(course_id),
            lesson_id=str(lesson_id),
        )
        return Response(QuizViewSerializer(view).data)


class QuizAttemptHistoryView(APIView):
    permission_classes = [IsAuthenticated]

    @swagger_auto_schema(
        operation_summary="퀴즈 응시 이력 (attempt_number 내림차순)",
        responses={200: AttemptSummarySerializer(many=True)},
    )
    def get(self, request, course_id: int, lesson_id: str):
        history = build_lifecycle_manager().get_attempt_history(
            user_id=request.user.id,
            course_id=int(course_id),
            lesson_id=str(lesson_id),
        )
        return Response(AttemptSummarySerializer(history, many=True).data)


class SubmitQuizAttemptView(APIView):
    permission_classes = [IsAuthenticated]

    @swagger_auto_schema(
        operation_summary="퀴즈 제출 및 채점",
        request_body=SubmitAttemptSerializer,
        responses={200: AttemptResultSerializer},
    )
    def post(self, request, submission_id: int):
        payload = request.data if isinstance(request.data, dict) else {}
        serializer = SubmitAttemptSerializer(data=payload)
        serializer.is_valid(raise_exception=True)

        result = build_lifecycle_manager().submit_attempt(
            submission_id=int(submission_id),
            user_id=request.user.id,
            answers=serializer.validated_data.get("answers"),
        )
        return Response(AttemptResultSerializer(result).data)


class QuizAttemptResultView(APIView):
    permission_classes = [IsAuthenticated]

    @swagger_auto_schema(
        operation_summary="퀴즈 결과 조회 (제출 응답과 동일)",
        responses={200: AttemptResultSerializer},
    )
    def get(self, request, submission_id: int):
        result = build_lifecycle_manager().get_results(
            submission_id=int(submission_id),
            user_id=request.user.id,
        )
        return Response(AttemptResultSerializer(result).data)
