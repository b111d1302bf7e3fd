"""
Quiz Attempt Repository: Django ORM 구현 (메서드 내부에서만 apps.domains.quizzes import)

conditional_finalize 는 UPDATE ... WHERE id=? AND status='in_progress' 한 문장.
락 없이 status CAS 로만 제출/스윕/lazy expiry 경쟁을 정리한다.
"""
from __future__ import annotations

from typing import Optional

from academy.domain.quiz import grading
from academy.domain.quiz.entities import (
    AnswerRecord,
    AttemptRecord,
    AttemptStatus,
    FinalizeFields,
)
from academy.domain.quiz.errors import AttemptConflictError


def _model_to_entity(m) -> Optional[AttemptRecord]:
    if m is None:
        return None
    return AttemptRecord(
        id=m.id,
        course_id=int(m.course_id),
        lesson_id=str(m.lesson_id),
        user_id=int(m.user_id),
        attempt_number=int(m.attempt_number),
        status=AttemptStatus(m.status) if m.status else AttemptStatus.IN_PROGRESS,
        started_at=m.started_at,
        submitted_at=m.submitted_at,
        time_spent=int(m.time_spent or 0),
        time_limit=m.time_limit,
        passing_score=int(m.passing_score),
        answers=[AnswerRecord.from_dict(a) for a in (m.answers or []) if isinstance(a, dict)],
        total_points=float(m.total_points or 0.0),
        max_points=float(m.max_points or 0.0),
        score=int(m.score or 0),
        passed=bool(m.passed),
        ip_address=m.ip_address,
        user_agent=m.user_agent or "",
    )


class DjangoAttemptStore:
    """AttemptStore 구현. ORM 접근은 모두 메서드 내부에서 lazy import."""

    def count_attempts(self, user_id: int, lesson_id: str) -> int:
        from apps.domains.quizzes.models import QuizSubmission
        return QuizSubmission.objects.filter(user_id=user_id, lesson_id=str(lesson_id)).count()

    def get_active(self, user_id: int, lesson_id: str) -> Optional[AttemptRecord]:
        from apps.domains.quizzes.models import QuizSubmission
        m = (
            QuizSubmission.objects
            .filter(
                user_id=user_id,
                lesson_id=str(lesson_id),
                status=QuizSubmission.Status.IN_PROGRESS,
            )
            .order_by("-attempt_number")
            .first()
        )
        return _model_to_entity(m)

    def get_all(self, user_id: int, lesson_id: str) -> list[AttemptRecord]:
        from apps.domains.quizzes.models import QuizSubmission
        qs = (
            QuizSubmission.objects
            .filter(user_id=user_id, lesson_id=str(lesson_id))
            .order_by("-attempt_number")
        )
        return [_model_to_entity(m) for m in qs]

    def get_by_id(self, attempt_id: int) -> Optional[AttemptRecord]:
        from apps.domains.quizzes.models import QuizSubmission
        m = QuizSubmission.objects.filter(id=attempt_id).first()
        return _model_to_entity(m)

    def insert(self, record: AttemptRecord) -> AttemptRecord:
        from django.db import IntegrityError, transaction
        from apps.domains.quizzes.models import QuizSubmission

        try:
            # savepoint: 바깥 트랜잭션이 있어도 유니크 위반만 되돌린다
            with transaction.atomic():
                m = QuizSubmission.objects.create(
                    course_id=record.course_id,
                    lesson_id=str(record.lesson_id),
                    user_id=record.user_id,
                    attempt_number=record.attempt_number,
                    status=record.status.value,
                    started_at=record.started_at,
                    time_limit=record.time_limit,
                    passing_score=record.passing_score,
                    ip_address=record.ip_address,
                    user_agent=record.user_agent or "",
                )
        except IntegrityError as e:
            raise AttemptConflictError() from e

        return _model_to_entity(m)

    def conditional_finalize(
        self,
        attempt_id: int,
        new_status: AttemptStatus,
        fields: FinalizeFields,
    ) -> bool:
        from django.utils import timezone
        from apps.domains.quizzes.models import QuizSubmission

        if new_status not in (AttemptStatus.GRADED, AttemptStatus.EXPIRED):
            raise ValueError(f"Cannot finalize submission {attempt_id}: status={new_status}")

        values = {
            "status": new_status.value,
            "submitted_at": fields.submitted_at,
            "time_spent": int(fields.time_spent),
            # update() 는 auto_now 를 건너뛴다
            "updated_at": timezone.now(),
        }

        if new_status == AttemptStatus.GRADED:
            # passing_score 는 불변 스냅샷이므로 CAS 밖에서 읽어도 안전
            passing_score = (
                QuizSubmission.objects
                .filter(id=attempt_id)
                .values_list("passing_score", flat=True)
                .first()
            )
            if passing_score is None:
                return False

            summary = grading.summarize(fields.answers, int(passing_score))
            values.update(
                answers=[a.to_dict() for a in fields.answers],
                total_points=summary.total_points,
                max_points=summary.max_points,
                score=summary.score,
                passed=summary.passed,
            )

        updated = (
            QuizSubmission.objects
            .filter(id=attempt_id, status=QuizSubmission.Status.IN_PROGRESS)
            .update(**values)
        )
        return updated == 1

    def list_sweep_candidates(self) -> list[AttemptRecord]:
        from apps.domains.quizzes.models import QuizSubmission
        qs = (
            QuizSubmission.objects
            .filter(
                status=QuizSubmission.Status.IN_PROGRESS,
                time_limit__isnull=False,
                time_limit__gt=0,
                started_at__isnull=False,
            )
            .order_by("started_at")
        )
        return [_model_to_entity(m) for m in qs.iterator()]
