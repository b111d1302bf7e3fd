"""
Repository 포트: 영속화 추상화 (Django/ORM 미사용)
"""
from __future__ import annotations

from abc import abstractmethod
from typing import Optional, Protocol

from academy.domain.quiz.entities import AttemptRecord, AttemptStatus, FinalizeFields


class AttemptStore(Protocol):
    """
    QuizSubmission 영속화.

    - insert: (user_id, lesson_id, attempt_number) 유니크 위반 시 AttemptConflictError
    - conditional_finalize: 제출/스윕/lazy expiry 가 공유하는 유일한 쓰기 경로 (status CAS)
    """

    @abstractmethod
    def count_attempts(self, user_id: int, lesson_id: str) -> int:
        ...

    @abstractmethod
    def get_active(self, user_id: int, lesson_id: str) -> Optional[AttemptRecord]:
        """in_progress 중 attempt_number 가 가장 큰 1건. 없으면 None."""
        ...

    @abstractmethod
    def get_all(self, user_id: int, lesson_id: str) -> list[AttemptRecord]:
        """attempt_number 내림차순."""
        ...

    @abstractmethod
    def get_by_id(self, attempt_id: int) -> Optional[AttemptRecord]:
        ...

    @abstractmethod
    def insert(self, record: AttemptRecord) -> AttemptRecord:
        """저장 후 id 가 채워진 레코드 반환."""
        ...

    @abstractmethod
    def conditional_finalize(
        self,
        attempt_id: int,
        new_status: AttemptStatus,
        fields: FinalizeFields,
    ) -> bool:
        """
        in_progress → new_status. 행이 아직 in_progress 일 때만 반영.
        Returns: 반영 여부 (False = 경쟁에서 짐 / 행 없음).
        """
        ...

    @abstractmethod
    def list_sweep_candidates(self) -> list[AttemptRecord]:
        """status=in_progress ∧ time_limit 있음 ∧ started_at 있음."""
        ...
