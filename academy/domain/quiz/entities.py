"""
Quiz 도메인 엔티티: 순수 파이썬 (Django/ORM 미사용)

상태 전이 규칙:
- in_progress → graded | expired (단 한 번, 되돌림 없음)
- time_limit / passing_score 는 시작 시점 스냅샷 (퀴즈 정의 수정과 무관)
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Optional


DEFAULT_PASSING_SCORE = 70
DEFAULT_QUESTION_POINTS = 10


class QuestionType(str, Enum):
    MULTIPLE_CHOICE = "multiple-choice"
    TRUE_FALSE = "true-false"
    TEXT = "text"


class AttemptStatus(str, Enum):
    """QuizSubmission.status choices와 동기화."""
    IN_PROGRESS = "in_progress"
    GRADED = "graded"
    EXPIRED = "expired"


FINAL_STATUSES = (AttemptStatus.GRADED, AttemptStatus.EXPIRED)


@dataclass(frozen=True)
class QuestionDefinition:
    id: str
    question: str
    type: str
    options: tuple[str, ...] = ()
    correct_answer: Any = None
    points: Optional[float] = None
    explanation: Optional[str] = None

    @property
    def points_possible(self) -> float:
        # 0점 문항은 0점 그대로 (None만 기본값)
        if self.points is None:
            return float(DEFAULT_QUESTION_POINTS)
        return float(self.points)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "QuestionDefinition":
        return cls(
            id=str(data.get("id") or ""),
            question=str(data.get("question") or ""),
            type=str(data.get("type") or ""),
            options=tuple(data.get("options") or ()),
            correct_answer=data.get("correct_answer"),
            points=data.get("points"),
            explanation=data.get("explanation"),
        )


@dataclass(frozen=True)
class QuizDefinition:
    """
    Course/Lesson 외부 협력자가 소유하는 퀴즈 정의 (읽기 전용).
    time_limit: 분 단위, None 이면 무제한.
    """
    course_id: int
    lesson_id: str
    questions: tuple[QuestionDefinition, ...]
    time_limit: Optional[float] = None
    passing_score: int = DEFAULT_PASSING_SCORE
    course_name: str = ""
    lesson_title: str = ""

    def question_map(self) -> dict[str, QuestionDefinition]:
        return {q.id: q for q in self.questions}

    @property
    def total_points(self) -> float:
        return sum(q.points_possible for q in self.questions)


@dataclass(frozen=True)
class AnswerRecord:
    question_id: str
    answer: Any
    is_correct: bool = False
    points_earned: float = 0.0
    points_possible: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return {
            "question_id": self.question_id,
            "answer": self.answer,
            "is_correct": self.is_correct,
            "points_earned": self.points_earned,
            "points_possible": self.points_possible,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "AnswerRecord":
        return cls(
            question_id=str(data.get("question_id") or ""),
            answer=data.get("answer"),
            is_correct=bool(data.get("is_correct", False)),
            points_earned=float(data.get("points_earned") or 0.0),
            points_possible=float(data.get("points_possible") or 0.0),
        )


@dataclass(frozen=True)
class GradeSummary:
    total_points: float
    max_points: float
    score: int
    passed: bool


@dataclass
class AttemptRecord:
    """
    학생의 퀴즈 1회 응시.
    DB/ORM 없이 규칙만 보유. id 는 저장 전 None.
    """
    course_id: int
    lesson_id: str
    user_id: int
    attempt_number: int
    status: AttemptStatus = AttemptStatus.IN_PROGRESS
    started_at: Optional[datetime] = None
    submitted_at: Optional[datetime] = None
    time_spent: int = 0
    time_limit: Optional[float] = None
    passing_score: int = DEFAULT_PASSING_SCORE
    answers: list[AnswerRecord] = field(default_factory=list)
    total_points: float = 0.0
    max_points: float = 0.0
    score: int = 0
    passed: bool = False
    ip_address: Optional[str] = None
    user_agent: str = ""
    id: Optional[int] = None

    def is_terminal(self) -> bool:
        return self.status in FINAL_STATUSES

    def is_in_progress(self) -> bool:
        return self.status == AttemptStatus.IN_PROGRESS


@dataclass(frozen=True)
class FinalizeFields:
    """
    conditional_finalize 가 쓰는 필드 묶음.
    expired 전이는 answers/점수 없이 submitted_at, time_spent 만 기록.
    점수 필드는 여기 없다: 저장소가 answers + 스냅샷 passing_score 로 재계산한다.
    """
    submitted_at: datetime
    time_spent: int
    answers: tuple[AnswerRecord, ...] = ()
