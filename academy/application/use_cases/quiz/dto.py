"""
Use Case 응답 DTO: 전송 계층(DRF serializer)이 그대로 렌더링한다.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional


@dataclass(frozen=True)
class StartedAttempt:
    submission_id: int
    attempt_number: int
    started_at: datetime
    time_limit: Optional[float]


@dataclass(frozen=True)
class ActiveAttempt:
    submission_id: int
    attempt_number: int
    time_remaining: Optional[int]


@dataclass(frozen=True)
class AttemptSummary:
    submission_id: int
    attempt_number: int
    status: str
    score: int
    total_points: float
    max_points: float
    passed: bool
    submitted_at: Optional[datetime]
    time_spent: int


@dataclass(frozen=True)
class QuestionView:
    """정답/해설 제외."""
    id: str
    question: str
    type: str
    options: list[str]
    points: float


@dataclass(frozen=True)
class QuizMetadata:
    time_limit: Optional[float]
    passing_score: int
    total_questions: int
    total_points: float


@dataclass(frozen=True)
class QuizView:
    course_id: int
    course_name: str
    lesson_id: str
    lesson_title: str
    questions: list[QuestionView]
    metadata: QuizMetadata
    previous_attempts: list[AttemptSummary]
    active_submission: Optional[ActiveAttempt] = None
    best_score: Optional[int] = None


@dataclass(frozen=True)
class AnswerResult:
    question_id: str
    question: Optional[str]
    type: Optional[str]
    options: list[str]
    answer: Any
    is_correct: bool
    points_earned: float
    points_possible: float
    # 확정(graded/expired) 전에는 None
    correct_answer: Any = None
    explanation: Optional[str] = None


@dataclass(frozen=True)
class AttemptResult:
    submission_id: int
    course_id: int
    course_name: str
    lesson_id: str
    lesson_title: str
    attempt_number: int
    status: str
    total_points: float
    max_points: float
    score: int
    passing_score: int
    passed: bool
    time_spent: int
    started_at: Optional[datetime]
    submitted_at: Optional[datetime]
    results: list[AnswerResult] = field(default_factory=list)
