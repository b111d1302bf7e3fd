# PATH: apps/domains/quizzes/views/admin_submission_views.py
"""
Admin Quiz Submission List

GET /quizzes/admin/submissions/
GET /quizzes/admin/submissions/{id}/

- 운영자 전용 조회 (수정/삭제 ❌, 상태 전이는 응시 API 와 스윕만)
- 필터: course_id, lesson_id, user_id, status, started_from, started_to
"""

from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import viewsets
from rest_framework.filters import OrderingFilter
from rest_framework.permissions import IsAuthenticated

from apps.domains.quizzes.filters import QuizSubmissionFilter
from apps.domains.quizzes.models import QuizSubmission
from apps.domains.quizzes.permissions import IsAdminOrStaff
from apps.domains.quizzes.serializers import AdminQuizSubmissionSerializer


class AdminQuizSubmissionViewSet(viewsets.ReadOnlyModelViewSet):
    queryset = QuizSubmission.objects.all().order_by("-started_at", "-id")
    serializer_class = AdminQuizSubmissionSerializer
    permission_classes = [IsAuthenticated, IsAdminOrStaff]

    filter_backends = (DjangoFilterBackend, OrderingFilter)
    filterset_class = QuizSubmissionFilter
    ordering_fields = ["started_at", "submitted_at", "score", "attempt_number"]
