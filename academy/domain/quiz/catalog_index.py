"""
Course 구조 인덱스: lesson_id -> (course, module, lesson)

Course 1건 로딩 시 한 번만 만든다. 요청마다 modules × lessons 선형 탐색 금지.

Course.modules 구조 (외부 협력자 소유):
    [{"id": "m1", "title": "...", "lessons": [
        {"id": "l1", "title": "...", "type": "Quiz",
         "content": {"questions": [...], "time_limit": 10, "passing_score": 70}}
    ]}]
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from academy.domain.quiz.entities import (
    DEFAULT_PASSING_SCORE,
    QuestionDefinition,
    QuizDefinition,
)
from academy.domain.quiz.errors import LessonNotFoundError, NotAQuizError
from academy.domain.quiz.validation import validate_quiz_settings


QUIZ_LESSON_TYPE = "Quiz"


@dataclass(frozen=True)
class LessonLocation:
    course_id: int
    course_name: str
    module: dict[str, Any]
    lesson: dict[str, Any]

    @property
    def lesson_id(self) -> str:
        return str(self.lesson.get("id"))

    @property
    def is_quiz(self) -> bool:
        return self.lesson.get("type") == QUIZ_LESSON_TYPE


class LessonIndex:
    def __init__(self, course_id: int, course_name: str, modules: Optional[list[dict[str, Any]]]):
        self.course_id = course_id
        self.course_name = course_name
        self._locations: dict[str, LessonLocation] = {}

        for module in modules or []:
            for lesson in module.get("lessons") or []:
                lesson_id = lesson.get("id")
                if lesson_id is None:
                    continue
                # 같은 id 가 중복되면 먼저 나온 lesson 이 이긴다
                self._locations.setdefault(
                    str(lesson_id),
                    LessonLocation(
                        course_id=course_id,
                        course_name=course_name,
                        module=module,
                        lesson=lesson,
                    ),
                )

    def __len__(self) -> int:
        return len(self._locations)

    def __contains__(self, lesson_id: object) -> bool:
        return str(lesson_id) in self._locations

    def get(self, lesson_id: str) -> Optional[LessonLocation]:
        return self._locations.get(str(lesson_id))

    def quiz_definition(self, lesson_id: str) -> QuizDefinition:
        location = self.get(lesson_id)
        if location is None:
            raise LessonNotFoundError()
        if not location.is_quiz:
            raise NotAQuizError()
        return definition_from_location(location)


def definition_from_location(location: LessonLocation) -> QuizDefinition:
    content = location.lesson.get("content") or {}
    passing_score = content.get("passing_score")
    time_limit = content.get("time_limit")
    # 잘못 저장된 설정은 500 이 아니라 validation_error 로
    validate_quiz_settings(time_limit, passing_score)

    return QuizDefinition(
        course_id=location.course_id,
        course_name=location.course_name,
        lesson_id=location.lesson_id,
        lesson_title=str(location.lesson.get("title") or ""),
        questions=tuple(
            QuestionDefinition.from_dict(q) for q in content.get("questions") or []
        ),
        # 0 / None 은 무제한
        time_limit=time_limit or None,
        passing_score=DEFAULT_PASSING_SCORE if passing_score is None else int(passing_score),
    )
