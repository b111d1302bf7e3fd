# PATH: apps/domains/quizzes/urls.py

from django.urls import path, include
from rest_framework.routers import DefaultRouter

from apps.domains.quizzes.views import (
    AdminQuizSubmissionViewSet,
    QuizAttemptHistoryView,
    QuizAttemptResultView,
    QuizQuestionsView,
    StartQuizAttemptView,
    SubmitQuizAttemptView,
)

router = DefaultRouter()
router.register(
    r"admin/submissions",
    AdminQuizSubmissionViewSet,
    basename="quiz-admin-submissions",
)

urlpatterns = [
    # ======================================================
    # Submission (submission_id 기준)
    # ======================================================
    path(
        "submissions/<int:submission_id>/submit/",
        SubmitQuizAttemptView.as_view(),
        name="quiz-submission-submit",
    ),
    path(
        "submissions/<int:submission_id>/results/",
        QuizAttemptResultView.as_view(),
        name="quiz-submission-results",
    ),

    # ======================================================
    # Admin
    # ======================================================
    path("", include(router.urls)),

    # ======================================================
    # Quiz lesson (course_id + lesson_id 기준)
    # ======================================================
    path(
        "<int:course_id>/<str:lesson_id>/start/",
        StartQuizAttemptView.as_view(),
        name="quiz-start",
    ),
    path(
        "<int:course_id>/<str:lesson_id>/questions/",
        QuizQuestionsView.as_view(),
        name="quiz-questions",
    ),
    path(
        "<int:course_id>/<str:lesson_id>/attempts/",
        QuizAttemptHistoryView.as_view(),
        name="quiz-attempts",
    ),
]
