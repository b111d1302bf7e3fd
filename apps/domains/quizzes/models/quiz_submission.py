# apps/domains/quizzes/models/quiz_submission.py
from __future__ import annotations

from django.db import models

from apps.api.common.models import BaseModel


class QuizSubmission(BaseModel):
    """
    학생의 '퀴즈 1회 응시' (삭제하지 않음)

    ✅ 설계 고정 사항
    --------------------------------------------------
    1) (user_id, lesson_id, attempt_number) 유니크, 1부터 빈 번호 없이 증가
    2) status 는 in_progress → graded | expired 단 한 번
       - 전이는 반드시 DjangoAttemptStore.conditional_finalize 로만
    3) time_limit / passing_score 는 시작 시점 스냅샷
    4) total_points / max_points / score / passed 는 answers 에서 재계산
    """

    class Status(models.TextChoices):
        IN_PROGRESS = "in_progress", "In progress"
        GRADED = "graded", "Graded"
        EXPIRED = "expired", "Expired"

    # 외부 협력자 id (FK 강제 X)
    course_id = models.PositiveIntegerField()
    lesson_id = models.CharField(max_length=64)
    user_id = models.PositiveIntegerField()

    # 1부터 시작 (n번째 응시)
    attempt_number = models.PositiveIntegerField(help_text="1부터 시작")

    status = models.CharField(
        max_length=20,
        choices=Status.choices,
        default=Status.IN_PROGRESS,
    )

    started_at = models.DateTimeField(null=True, blank=True)
    submitted_at = models.DateTimeField(null=True, blank=True)
    time_spent = models.PositiveIntegerField(default=0, help_text="초")

    # 스냅샷
    time_limit = models.FloatField(null=True, blank=True, help_text="분, null=무제한")
    passing_score = models.PositiveSmallIntegerField(default=70)

    # [{question_id, answer, is_correct, points_earned, points_possible}]
    answers = models.JSONField(default=list, blank=True)

    total_points = models.FloatField(default=0.0)
    max_points = models.FloatField(default=0.0)
    score = models.PositiveSmallIntegerField(default=0, help_text="0~100 (%)")
    passed = models.BooleanField(default=False)

    ip_address = models.GenericIPAddressField(null=True, blank=True)
    user_agent = models.CharField(max_length=512, blank=True)

    class Meta:
        db_table = "quizzes_quiz_submission"
        constraints = [
            models.UniqueConstraint(
                fields=["user_id", "lesson_id", "attempt_number"],
                name="uniq_quiz_attempt_number",
            ),
        ]
        indexes = [
            models.Index(fields=["course_id", "lesson_id"], name="quizzes_qui_course__3f1a2b_idx"),
            models.Index(fields=["user_id", "lesson_id", "status"], name="quizzes_qui_user_id_8c4d1e_idx"),
            models.Index(fields=["status"], name="quizzes_qui_status_5b7e9a_idx"),
        ]
        ordering = ["-attempt_number"]

    def __str__(self) -> str:
        return (
            f"QuizSubmission({self.id}) lesson={self.lesson_id} "
            f"user={self.user_id} #{self.attempt_number} {self.status}"
        )
