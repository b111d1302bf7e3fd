"""
QuizCatalog 포트: 퀴즈 정의 조회 (읽기 전용, Course 도메인 소유)
"""
from __future__ import annotations

from abc import abstractmethod
from typing import Protocol

from academy.domain.quiz.entities import QuizDefinition


class QuizCatalog(Protocol):

    @abstractmethod
    def get_definition(self, course_id: int, lesson_id: str) -> QuizDefinition:
        """
        Raises:
            CourseNotFoundError / LessonNotFoundError / NotAQuizError
        """
        ...
