"""
테스트용 in-memory 포트 구현 (Django 없이 Use Case 검증)
"""
from __future__ import annotations

import threading
from dataclasses import replace
from datetime import datetime, timedelta, timezone
from typing import Optional

from academy.domain.quiz import grading
from academy.domain.quiz.catalog_index import LessonIndex
from academy.domain.quiz.entities import AttemptRecord, AttemptStatus, FinalizeFields, QuizDefinition
from academy.domain.quiz.errors import AttemptConflictError, CourseNotFoundError


T0 = datetime(2026, 3, 2, 9, 0, 0, tzinfo=timezone.utc)


class FrozenClock:
    def __init__(self, now: datetime = T0):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> datetime:
        self.now = self.now + timedelta(**kwargs)
        return self.now


class InMemoryAttemptStore:
    """
    DjangoAttemptStore 와 같은 계약:
    - (user_id, lesson_id, attempt_number) 유니크 → AttemptConflictError
    - conditional_finalize 는 in_progress 일 때만 반영, 점수는 answers 에서 재계산
    """

    def __init__(self):
        self._rows: dict[int, AttemptRecord] = {}
        self._next_id = 1
        self._lock = threading.Lock()
        self.fail_finalize_ids: set[int] = set()
        self.finalize_calls = 0

    def _copy(self, record: Optional[AttemptRecord]) -> Optional[AttemptRecord]:
        if record is None:
            return None
        return replace(record, answers=list(record.answers))

    def count_attempts(self, user_id, lesson_id):
        with self._lock:
            return sum(
                1 for r in self._rows.values()
                if r.user_id == user_id and r.lesson_id == str(lesson_id)
            )

    def get_active(self, user_id, lesson_id):
        with self._lock:
            active = [
                r for r in self._rows.values()
                if r.user_id == user_id
                and r.lesson_id == str(lesson_id)
                and r.status == AttemptStatus.IN_PROGRESS
            ]
            active.sort(key=lambda r: r.attempt_number, reverse=True)
            return self._copy(active[0]) if active else None

    def get_all(self, user_id, lesson_id):
        with self._lock:
            rows = [
                r for r in self._rows.values()
                if r.user_id == user_id and r.lesson_id == str(lesson_id)
            ]
            rows.sort(key=lambda r: r.attempt_number, reverse=True)
            return [self._copy(r) for r in rows]

    def get_by_id(self, attempt_id):
        with self._lock:
            return self._copy(self._rows.get(attempt_id))

    def insert(self, record):
        with self._lock:
            for r in self._rows.values():
                if (
                    r.user_id == record.user_id
                    and r.lesson_id == str(record.lesson_id)
                    and r.attempt_number == record.attempt_number
                ):
                    raise AttemptConflictError()
            saved = replace(record, id=self._next_id, answers=list(record.answers))
            self._rows[saved.id] = saved
            self._next_id += 1
            return self._copy(saved)

    def conditional_finalize(self, attempt_id, new_status: AttemptStatus, fields: FinalizeFields) -> bool:
        with self._lock:
            self.finalize_calls += 1
            if attempt_id in self.fail_finalize_ids:
                raise RuntimeError(f"simulated write failure for {attempt_id}")

            row = self._rows.get(attempt_id)
            if row is None or row.status != AttemptStatus.IN_PROGRESS:
                return False

            row.status = new_status
            row.submitted_at = fields.submitted_at
            row.time_spent = fields.time_spent
            if new_status == AttemptStatus.GRADED:
                summary = grading.summarize(fields.answers, row.passing_score)
                row.answers = list(fields.answers)
                row.total_points = summary.total_points
                row.max_points = summary.max_points
                row.score = summary.score
                row.passed = summary.passed
            return True

    def list_sweep_candidates(self):
        with self._lock:
            return [
                self._copy(r) for r in self._rows.values()
                if r.status == AttemptStatus.IN_PROGRESS
                and r.time_limit
                and r.started_at is not None
            ]

    # 테스트 편의
    def force_status(self, attempt_id, status: AttemptStatus) -> None:
        with self._lock:
            self._rows[attempt_id].status = status


class StaticCatalog:
    """course_id -> (course_name, modules) 고정 카탈로그."""

    def __init__(self, courses: dict[int, tuple[str, list]]):
        self._indexes = {
            course_id: LessonIndex(course_id, name, modules)
            for course_id, (name, modules) in courses.items()
        }

    def get_definition(self, course_id, lesson_id) -> QuizDefinition:
        index = self._indexes.get(int(course_id))
        if index is None:
            raise CourseNotFoundError()
        return index.quiz_definition(lesson_id)


class RecordingLock:
    def __init__(self, available: bool = True):
        self.available = available
        self.acquired = 0
        self.released = 0

    def acquire(self) -> bool:
        if not self.available:
            return False
        self.acquired += 1
        return True

    def release(self) -> None:
        self.released += 1
