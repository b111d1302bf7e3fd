"""
퀴즈 응시 Use Case: 도메인/포트만 사용 (Django 미사용)

상태 전이는 전부 AttemptStore.conditional_finalize 하나로 모인다.
- 제출(제한 시간 내) → graded
- 제출(제한 시간 초과) / 조회 중 lazy expiry / 스윕 → expired
경쟁에서 진 쪽은 행을 다시 읽어서 응답을 재결정한다 (쓰기가 안 됐는데 성공 응답 금지).
"""
from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Callable, Optional

from academy.application.ports.catalog import QuizCatalog
from academy.application.ports.repositories import AttemptStore
from academy.application.use_cases.quiz.dto import (
    ActiveAttempt,
    AnswerResult,
    AttemptResult,
    AttemptSummary,
    QuestionView,
    QuizMetadata,
    QuizView,
    StartedAttempt,
)
from academy.domain.quiz import grading, time_guard
from academy.domain.quiz.entities import (
    AttemptRecord,
    AttemptStatus,
    FinalizeFields,
    QuizDefinition,
)
from academy.domain.quiz.errors import (
    AlreadyFinalizedError,
    AttemptConflictError,
    AttemptExpiredError,
    AttemptForbiddenError,
    NotAQuizError,
    NotFoundError,
    SubmissionNotFoundError,
)
from academy.domain.quiz.validation import validate_answers_payload

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]

DEFAULT_START_MAX_RETRIES = 3

LOG_ATTEMPT_STARTED = "QUIZ_ATTEMPT_STARTED submission_id=%s user_id=%s lesson_id=%s attempt=%s"
LOG_START_CONFLICT = "QUIZ_START_CONFLICT user_id=%s lesson_id=%s attempt=%s retry=%s"
LOG_LAZY_EXPIRE = "QUIZ_LAZY_EXPIRE submission_id=%s source=%s landed=%s"
LOG_SUBMIT_GRADED = "QUIZ_SUBMIT_GRADED submission_id=%s score=%s passed=%s"
LOG_SUBMIT_LOST_RACE = "QUIZ_SUBMIT_LOST_RACE submission_id=%s status=%s"


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class AttemptLifecycleManager:
    """
    start / read / submit / results / history.

    store, catalog, clock 만 주입받는다. 프로세스 전역 상태 사용 금지.
    """

    def __init__(
        self,
        store: AttemptStore,
        catalog: QuizCatalog,
        clock: Clock = utc_now,
        start_max_retries: int = DEFAULT_START_MAX_RETRIES,
    ) -> None:
        self._store = store
        self._catalog = catalog
        self._clock = clock
        self._start_max_retries = max(0, int(start_max_retries))

    # ------------------------------------------------------------------
    # Start
    # ------------------------------------------------------------------

    def start_attempt(
        self,
        user_id: int,
        course_id: int,
        lesson_id: str,
        *,
        ip_address: Optional[str] = None,
        user_agent: str = "",
    ) -> StartedAttempt:
        definition = self._catalog.get_definition(course_id, lesson_id)

        retry = 0
        while True:
            attempt_number = self._store.count_attempts(user_id, definition.lesson_id) + 1
            record = AttemptRecord(
                course_id=definition.course_id,
                lesson_id=definition.lesson_id,
                user_id=user_id,
                attempt_number=attempt_number,
                status=AttemptStatus.IN_PROGRESS,
                started_at=self._clock(),
                # 정의 수정과 무관하도록 스냅샷
                time_limit=definition.time_limit,
                passing_score=definition.passing_score,
                ip_address=ip_address,
                user_agent=(user_agent or "")[:512],
            )
            try:
                saved = self._store.insert(record)
                break
            except AttemptConflictError:
                logger.info(LOG_START_CONFLICT, user_id, definition.lesson_id, attempt_number, retry)
                if retry >= self._start_max_retries:
                    raise
                retry += 1

        logger.info(LOG_ATTEMPT_STARTED, saved.id, user_id, saved.lesson_id, saved.attempt_number)
        return StartedAttempt(
            submission_id=saved.id,
            attempt_number=saved.attempt_number,
            started_at=saved.started_at,
            time_limit=saved.time_limit,
        )

    # ------------------------------------------------------------------
    # Read (lazy expiry)
    # ------------------------------------------------------------------

    def _expire_if_overdue(self, record: AttemptRecord, now: datetime, source: str) -> bool:
        """
        만료됐으면 expired 로 확정 시도. 반영 여부와 무관하게
        True 면 이 attempt 는 더 이상 active 가 아니다.
        """
        if not record.is_in_progress() or not time_guard.is_expired(record, now):
            return False

        landed = self._store.conditional_finalize(
            record.id,
            AttemptStatus.EXPIRED,
            FinalizeFields(
                submitted_at=now,
                time_spent=time_guard.elapsed_seconds(record, now),
            ),
        )
        logger.info(LOG_LAZY_EXPIRE, record.id, source, landed)
        return True

    def get_active_attempt(self, user_id: int, lesson_id: str) -> Optional[ActiveAttempt]:
        now = self._clock()
        seen: set[int] = set()

        record = self._store.get_active(user_id, lesson_id)
        while record is not None and record.id not in seen:
            if not self._expire_if_overdue(record, now, source="read"):
                return ActiveAttempt(
                    submission_id=record.id,
                    attempt_number=record.attempt_number,
                    time_remaining=time_guard.remaining_seconds(record, now),
                )
            seen.add(record.id)
            record = self._store.get_active(user_id, lesson_id)

        return None

    def get_quiz_view(self, user_id: int, course_id: int, lesson_id: str) -> QuizView:
        definition = self._catalog.get_definition(course_id, lesson_id)
        now = self._clock()

        # 해당 lesson 의 만료된 in_progress 는 전부 정리
        for record in self._store.get_all(user_id, definition.lesson_id):
            self._expire_if_overdue(record, now, source="quiz_view")

        active = self.get_active_attempt(user_id, definition.lesson_id)
        attempts = self._store.get_all(user_id, definition.lesson_id)

        graded = [a for a in attempts if a.status == AttemptStatus.GRADED]
        best_score = max((a.score for a in graded), default=None)

        return QuizView(
            course_id=definition.course_id,
            course_name=definition.course_name,
            lesson_id=definition.lesson_id,
            lesson_title=definition.lesson_title,
            questions=[
                QuestionView(
                    id=q.id,
                    question=q.question,
                    type=q.type,
                    options=list(q.options),
                    points=q.points_possible,
                )
                for q in definition.questions
            ],
            metadata=QuizMetadata(
                time_limit=definition.time_limit,
                passing_score=definition.passing_score,
                total_questions=len(definition.questions),
                total_points=definition.total_points,
            ),
            previous_attempts=[_summary(a) for a in attempts],
            active_submission=active,
            best_score=best_score,
        )

    # ------------------------------------------------------------------
    # Submit
    # ------------------------------------------------------------------

    def _load_owned(self, submission_id: int, user_id: int) -> AttemptRecord:
        record = self._store.get_by_id(submission_id)
        if record is None:
            raise SubmissionNotFoundError()
        if record.user_id != user_id:
            raise AttemptForbiddenError()
        return record

    def _raise_lost_race(self, submission_id: int) -> None:
        current = self._store.get_by_id(submission_id)
        if current is None:
            raise SubmissionNotFoundError()
        logger.info(LOG_SUBMIT_LOST_RACE, submission_id, current.status.value)
        if current.status == AttemptStatus.EXPIRED:
            raise AttemptExpiredError()
        raise AlreadyFinalizedError()

    def submit_attempt(self, submission_id: int, user_id: int, answers: Any) -> AttemptResult:
        cleaned = validate_answers_payload(answers)
        record = self._load_owned(submission_id, user_id)

        if not record.is_in_progress():
            raise AlreadyFinalizedError()

        now = self._clock()

        # -------------------------------------------------
        # 1️⃣ 서버 시계 기준 만료 → 답안 폐기
        # -------------------------------------------------
        if time_guard.is_expired(record, now):
            landed = self._store.conditional_finalize(
                record.id,
                AttemptStatus.EXPIRED,
                FinalizeFields(
                    submitted_at=now,
                    time_spent=time_guard.elapsed_seconds(record, now),
                ),
            )
            logger.info(LOG_LAZY_EXPIRE, record.id, "submit", landed)
            if not landed:
                self._raise_lost_race(record.id)
            raise AttemptExpiredError()

        # -------------------------------------------------
        # 2️⃣ 채점
        # -------------------------------------------------
        definition = self._catalog.get_definition(record.course_id, record.lesson_id)
        graded = grading.grade(cleaned, definition.questions)

        # -------------------------------------------------
        # 3️⃣ 조건부 확정 (in_progress 일 때만)
        #    점수/합격은 저장소가 answers + 스냅샷 passing_score 로 재계산
        # -------------------------------------------------
        landed = self._store.conditional_finalize(
            record.id,
            AttemptStatus.GRADED,
            FinalizeFields(
                submitted_at=now,
                time_spent=time_guard.elapsed_seconds(record, now),
                answers=tuple(graded),
            ),
        )
        if not landed:
            self._raise_lost_race(record.id)

        stored = self._store.get_by_id(record.id)
        if stored is None:
            raise SubmissionNotFoundError()

        logger.info(LOG_SUBMIT_GRADED, stored.id, stored.score, stored.passed)
        return _build_result(stored, definition)

    # ------------------------------------------------------------------
    # Results / history (순수 조회)
    # ------------------------------------------------------------------

    def get_results(self, submission_id: int, user_id: int) -> AttemptResult:
        record = self._load_owned(submission_id, user_id)
        return _build_result(record, self._definition_or_none(record))

    def get_attempt_history(self, user_id: int, course_id: int, lesson_id: str) -> list[AttemptSummary]:
        definition = self._catalog.get_definition(course_id, lesson_id)
        return [_summary(a) for a in self._store.get_all(user_id, definition.lesson_id)]

    def _definition_or_none(self, record: AttemptRecord) -> Optional[QuizDefinition]:
        # 과거 결과는 코스/레슨이 사라져도 조회 가능해야 한다
        try:
            return self._catalog.get_definition(record.course_id, record.lesson_id)
        except (NotFoundError, NotAQuizError) as e:
            logger.debug("quiz definition unavailable for submission %s: %s", record.id, e)
            return None


def _summary(record: AttemptRecord) -> AttemptSummary:
    return AttemptSummary(
        submission_id=record.id,
        attempt_number=record.attempt_number,
        status=record.status.value,
        score=record.score,
        total_points=record.total_points,
        max_points=record.max_points,
        passed=record.passed,
        submitted_at=record.submitted_at,
        time_spent=record.time_spent,
    )


def _build_result(record: AttemptRecord, definition: Optional[QuizDefinition]) -> AttemptResult:
    questions = definition.question_map() if definition else {}
    reveal = record.is_terminal()

    results = []
    for answer in record.answers:
        q = questions.get(answer.question_id)
        results.append(
            AnswerResult(
                question_id=answer.question_id,
                question=q.question if q else None,
                type=q.type if q else None,
                options=list(q.options) if q else [],
                answer=answer.answer,
                is_correct=answer.is_correct,
                points_earned=answer.points_earned,
                points_possible=answer.points_possible,
                correct_answer=q.correct_answer if (q and reveal) else None,
                explanation=q.explanation if (q and reveal) else None,
            )
        )

    return AttemptResult(
        submission_id=record.id,
        course_id=record.course_id,
        course_name=definition.course_name if definition else "",
        lesson_id=record.lesson_id,
        lesson_title=definition.lesson_title if definition else "",
        attempt_number=record.attempt_number,
        status=record.status.value,
        total_points=record.total_points,
        max_points=record.max_points,
        score=record.score,
        passing_score=record.passing_score,
        passed=record.passed,
        time_spent=record.time_spent,
        started_at=record.started_at,
        submitted_at=record.submitted_at,
        results=results,
    )
