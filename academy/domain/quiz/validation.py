"""
입력 검증: 순수 파이썬

- validate_answers_payload: 제출 답안 구조 검증 (채점 전)
- validate_quiz_definition: 퀴즈 문항 정의 검증 (Course 편집 시)
- validate_quiz_settings: time_limit / passing_score 숫자 검증 (Course 편집 시, 카탈로그 로딩 시)
"""
from __future__ import annotations

from typing import Any

from academy.domain.quiz.entities import QuestionType
from academy.domain.quiz.errors import QuizValidationError


VALID_TYPES = tuple(t.value for t in QuestionType)


def validate_answers_payload(answers: Any) -> list[dict[str, Any]]:
    """
    answers: [{"question_id": str, "answer": any}, ...]

    알 수 없는 question_id 는 여기서 거르지 않는다 (채점에서 0/0 오답 처리).
    같은 문항 중복 제출은 점수 중복 집계가 되므로 거부.
    """
    if not isinstance(answers, list):
        raise QuizValidationError("Answers array is required")

    cleaned: list[dict[str, Any]] = []
    seen: set[str] = set()

    for i, item in enumerate(answers, start=1):
        if not isinstance(item, dict):
            raise QuizValidationError(f"Answer {i}: must be an object")

        qid = item.get("question_id")
        if qid is None or str(qid).strip() == "":
            raise QuizValidationError(f"Answer {i}: question_id is required")
        if "answer" not in item:
            raise QuizValidationError(f"Answer {i}: answer is required")

        qid = str(qid)
        if qid in seen:
            raise QuizValidationError(f"Answer {i}: duplicate answer for question {qid}")
        seen.add(qid)

        cleaned.append({"question_id": qid, "answer": item.get("answer")})

    return cleaned


def _validate_multiple_choice(n: int, q: dict[str, Any]) -> None:
    options = q.get("options")
    if not isinstance(options, list) or len(options) < 2:
        raise QuizValidationError(
            f"Question {n}: Multiple-choice questions must have at least 2 options"
        )
    for j, option in enumerate(options, start=1):
        if not isinstance(option, str) or option.strip() == "":
            raise QuizValidationError(f"Question {n}, Option {j}: Option text cannot be empty")

    correct = q.get("correct_answer")
    if correct is None:
        raise QuizValidationError(f"Question {n}: Correct answer is required")

    if isinstance(correct, list):
        if not correct:
            raise QuizValidationError(f"Question {n}: At least one correct answer is required")
        for c in correct:
            if c not in options:
                raise QuizValidationError(
                    f'Question {n}: Correct answer "{c}" is not in the options list'
                )
    elif isinstance(correct, str):
        if correct not in options:
            raise QuizValidationError(
                f'Question {n}: Correct answer "{correct}" is not in the options list'
            )
    else:
        raise QuizValidationError(
            f"Question {n}: Correct answer must be a string or array of strings"
        )


def validate_quiz_definition(questions: Any) -> None:
    if not isinstance(questions, list):
        raise QuizValidationError("Questions must be an array")
    if not questions:
        raise QuizValidationError("Quiz must have at least one question")

    ids: set[str] = set()

    for n, q in enumerate(questions, start=1):
        if not isinstance(q, dict):
            raise QuizValidationError(f"Question {n}: must be an object")

        qid = str(q.get("id") or "").strip()
        if not qid:
            raise QuizValidationError(f"Question {n}: id is required")
        if qid in ids:
            raise QuizValidationError(f"Question {n}: duplicate id {qid}")
        ids.add(qid)

        text = q.get("question")
        if not isinstance(text, str) or text.strip() == "":
            raise QuizValidationError(f"Question {n}: Question text is required")

        qtype = q.get("type")
        if qtype not in VALID_TYPES:
            raise QuizValidationError(
                f"Question {n}: Invalid question type. Must be one of: {', '.join(VALID_TYPES)}"
            )

        correct = q.get("correct_answer")
        if qtype == QuestionType.MULTIPLE_CHOICE.value:
            _validate_multiple_choice(n, q)
        elif qtype == QuestionType.TRUE_FALSE.value:
            if not (isinstance(correct, bool) or correct in ("true", "false")):
                raise QuizValidationError(
                    f"Question {n}: True-false questions must have correct_answer as true or false"
                )
        elif not correct or isinstance(correct, bool) or not isinstance(correct, (str, int, float)):
            raise QuizValidationError(f"Question {n}: Text questions must have a correct answer")

        points = q.get("points")
        if points is not None:
            if isinstance(points, bool) or not isinstance(points, (int, float)) or points < 0:
                raise QuizValidationError(f"Question {n}: Points must be a non-negative number")


def _is_number(value: Any) -> bool:
    return not isinstance(value, bool) and isinstance(value, (int, float))


def validate_quiz_settings(time_limit: Any, passing_score: Any) -> None:
    """time_limit: 분 (0/None = 무제한), passing_score: 0~100. None 은 기본값 사용."""
    if time_limit is not None:
        if not _is_number(time_limit) or time_limit < 0:
            raise QuizValidationError("Time limit must be a non-negative number of minutes")

    if passing_score is not None:
        if not _is_number(passing_score) or not 0 <= passing_score <= 100:
            raise QuizValidationError("Passing score must be a number between 0 and 100")
