# domains/quizzes/admin.py

from django.contrib import admin
from .models import QuizSubmission


# --------------------------------------------------
# QuizSubmission (조회 전용, 상태 전이는 응시 API / 스윕만)
# --------------------------------------------------

@admin.register(QuizSubmission)
class QuizSubmissionAdmin(admin.ModelAdmin):
    list_display = (
        "id",
        "course_id",
        "lesson_id",
        "user_id",
        "attempt_number",
        "status",
        "score",
        "passed",
        "started_at",
        "submitted_at",
    )
    list_filter = ("status", "passed")
    search_fields = ("lesson_id",)
    ordering = ("-id",)

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False
