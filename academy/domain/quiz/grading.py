"""
채점 엔진: 결정적 exact match (부분 점수 없음)

문항 유형별 비교:
- multiple-choice 단일: 대소문자 구분 exact
- multiple-choice 복수(correct_answer 가 list): 양쪽 정렬 후 직렬화 비교 (순서 무관, 중복 구분)
- true-false: true/false/"true"/"false" → bool 정규화 후 비교
- text: strip + lower exact
- 알 수 없는 question_id: 0/0 오답으로 결과에 남김 (fail closed)
"""
from __future__ import annotations

import json
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Iterable, Optional, Sequence

from academy.domain.quiz.entities import (
    AnswerRecord,
    GradeSummary,
    QuestionDefinition,
    QuestionType,
)


_TRUE_FALSE = {True: True, False: False, "true": True, "false": False}


def _serialize(value: Any) -> str:
    return json.dumps(value, sort_keys=True, ensure_ascii=False)


def _same(a: Any, b: Any) -> bool:
    # True == 1 같은 파이썬 암묵 비교 차단
    return type(a) is type(b) and a == b


def normalize_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return _TRUE_FALSE.get(value)
    return None


def normalize_text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip().lower()


def _grade_multiple_choice(answer: Any, correct: Any) -> bool:
    if isinstance(correct, (list, tuple)):
        submitted = list(answer) if isinstance(answer, (list, tuple)) else [answer]
        left = sorted(submitted, key=_serialize)
        right = sorted(correct, key=_serialize)
        return _serialize(left) == _serialize(right)
    return _same(answer, correct)


def _grade_true_false(answer: Any, correct: Any) -> bool:
    a = normalize_bool(answer)
    c = normalize_bool(correct)
    return a is not None and c is not None and a == c


def _grade_text(answer: Any, correct: Any) -> bool:
    return normalize_text(answer) == normalize_text(correct)


def is_answer_correct(question: QuestionDefinition, answer: Any) -> bool:
    qtype = question.type
    if qtype == QuestionType.MULTIPLE_CHOICE.value:
        return _grade_multiple_choice(answer, question.correct_answer)
    if qtype == QuestionType.TRUE_FALSE.value:
        return _grade_true_false(answer, question.correct_answer)
    if qtype == QuestionType.TEXT.value:
        return _grade_text(answer, question.correct_answer)
    return False


def grade_answer(question: Optional[QuestionDefinition], question_id: str, answer: Any) -> AnswerRecord:
    if question is None:
        return AnswerRecord(
            question_id=question_id,
            answer=answer,
            is_correct=False,
            points_earned=0.0,
            points_possible=0.0,
        )

    possible = question.points_possible
    correct = is_answer_correct(question, answer)
    return AnswerRecord(
        question_id=question.id,
        answer=answer,
        is_correct=correct,
        points_earned=possible if correct else 0.0,
        points_possible=possible,
    )


def grade(
    submitted_answers: Iterable[dict[str, Any]],
    questions: Sequence[QuestionDefinition],
) -> list[AnswerRecord]:
    """
    제출된 답만 제출 순서대로 채점한다.
    답하지 않은 문항은 결과에도 max_points 에도 들어가지 않는다.
    """
    by_id = {q.id: q for q in questions}
    graded: list[AnswerRecord] = []

    for item in submitted_answers:
        qid = str(item.get("question_id"))
        graded.append(grade_answer(by_id.get(qid), qid, item.get("answer")))

    return graded


def calculate_score(total_points: float, max_points: float) -> int:
    """round(100 * total / max), half-up. max 가 0 이면 0."""
    if not max_points:
        return 0
    ratio = Decimal(str(total_points)) * 100 / Decimal(str(max_points))
    return int(ratio.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def summarize(answers: Iterable[AnswerRecord], passing_score: int) -> GradeSummary:
    """총점/만점/점수/합격 여부는 항상 answers 에서 재계산."""
    answers = list(answers)
    total = sum(a.points_earned for a in answers)
    maximum = sum(a.points_possible for a in answers)
    score = calculate_score(total, maximum)
    return GradeSummary(
        total_points=float(total),
        max_points=float(maximum),
        score=score,
        passed=score >= passing_score,
    )
