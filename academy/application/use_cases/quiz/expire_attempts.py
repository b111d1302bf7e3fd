"""
만료 스윕 Use Case: 요청과 무관하게 주기 실행 (기본 1분)

- 대상: in_progress ∧ time_limit ∧ started_at
- 확정은 제출 경로와 같은 conditional_finalize (이미 확정된 행은 건드리지 않음)
- 한 행의 쓰기 실패는 로그만 남기고 나머지 행은 계속 처리
- 실행 중복은 RunLock 으로 직렬화 (획득 실패 시 즉시 skip)
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from academy.application.ports.locks import RunLock
from academy.application.ports.repositories import AttemptStore
from academy.application.use_cases.quiz.attempt_lifecycle import Clock, utc_now
from academy.domain.quiz import time_guard
from academy.domain.quiz.entities import AttemptStatus, FinalizeFields
from academy.domain.shared.ids import generate_run_id

logger = logging.getLogger(__name__)

# 스윕 로그 포맷 (표준화)
LOG_SWEEP_SKIP = "QUIZ_SWEEP_SKIP run_id=%s reason=locked"
LOG_SWEEP_EXPIRED = "QUIZ_SWEEP_EXPIRED run_id=%s submission_id=%s user_id=%s lesson_id=%s"
LOG_SWEEP_LOST = "QUIZ_SWEEP_LOST run_id=%s submission_id=%s reason=already_finalized"
LOG_SWEEP_ROW_FAILED = "QUIZ_SWEEP_ROW_FAILED run_id=%s submission_id=%s"
LOG_SWEEP_DONE = "QUIZ_SWEEP_DONE run_id=%s scanned=%s expired=%s lost=%s failed=%s"


@dataclass(frozen=True)
class SweepReport:
    run_id: str
    scanned: int = 0
    expired: int = 0
    lost: int = 0
    failed: int = 0
    skipped: bool = False

    def as_dict(self) -> dict:
        return {
            "run_id": self.run_id,
            "scanned": self.scanned,
            "expired": self.expired,
            "lost": self.lost,
            "failed": self.failed,
            "skipped": self.skipped,
        }


class ExpirationSweeper:

    def __init__(
        self,
        store: AttemptStore,
        run_lock: Optional[RunLock] = None,
        clock: Clock = utc_now,
    ) -> None:
        self._store = store
        self._run_lock = run_lock
        self._clock = clock

    def run(self) -> SweepReport:
        run_id = generate_run_id("sweep")

        if self._run_lock is not None and not self._run_lock.acquire():
            logger.info(LOG_SWEEP_SKIP, run_id)
            return SweepReport(run_id=run_id, skipped=True)

        try:
            return self._sweep(run_id)
        finally:
            if self._run_lock is not None:
                self._run_lock.release()

    def _sweep(self, run_id: str) -> SweepReport:
        now = self._clock()
        candidates = self._store.list_sweep_candidates()

        expired = lost = failed = 0

        for record in candidates:
            if not time_guard.is_expired(record, now):
                continue
            try:
                landed = self._store.conditional_finalize(
                    record.id,
                    AttemptStatus.EXPIRED,
                    FinalizeFields(
                        submitted_at=now,
                        time_spent=time_guard.elapsed_seconds(record, now),
                    ),
                )
            except Exception:
                failed += 1
                logger.exception(LOG_SWEEP_ROW_FAILED, run_id, record.id)
                continue

            if landed:
                expired += 1
                logger.info(LOG_SWEEP_EXPIRED, run_id, record.id, record.user_id, record.lesson_id)
            else:
                lost += 1
                logger.info(LOG_SWEEP_LOST, run_id, record.id)

        report = SweepReport(
            run_id=run_id,
            scanned=len(candidates),
            expired=expired,
            lost=lost,
            failed=failed,
        )
        if expired or failed:
            logger.info(LOG_SWEEP_DONE, run_id, report.scanned, expired, lost, failed)
        else:
            logger.debug(LOG_SWEEP_DONE, run_id, report.scanned, expired, lost, failed)
        return report
