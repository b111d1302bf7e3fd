"""
QuizCatalog: Django Course 구현 (메서드 내부에서만 apps.domains.courses import)

Course 1건 로딩마다 LessonIndex 를 한 번 만들고,
(course_id, updated_at) 이 같으면 인덱스를 재사용한다.
"""
from __future__ import annotations

import threading
from collections import OrderedDict
from datetime import datetime
from typing import Optional

from academy.domain.quiz.catalog_index import LessonIndex
from academy.domain.quiz.entities import QuizDefinition
from academy.domain.quiz.errors import CourseNotFoundError

DEFAULT_INDEX_CACHE_SIZE = 256


class DjangoQuizCatalog:

    def __init__(self, cache_size: int = DEFAULT_INDEX_CACHE_SIZE) -> None:
        self._cache_size = max(0, int(cache_size))
        self._cache: "OrderedDict[int, tuple[Optional[datetime], LessonIndex]]" = OrderedDict()
        self._lock = threading.Lock()

    def _index_for(self, course) -> LessonIndex:
        key = int(course.id)
        with self._lock:
            cached = self._cache.get(key)
            if cached is not None and cached[0] == course.updated_at:
                self._cache.move_to_end(key)
                return cached[1]

        index = LessonIndex(key, course.name, course.modules)

        if self._cache_size:
            with self._lock:
                self._cache[key] = (course.updated_at, index)
                self._cache.move_to_end(key)
                while len(self._cache) > self._cache_size:
                    self._cache.popitem(last=False)
        return index

    def get_lesson_index(self, course_id: int) -> LessonIndex:
        from apps.domains.courses.models import Course
        course = (
            Course.objects
            .filter(id=course_id)
            .only("id", "name", "modules", "updated_at")
            .first()
        )
        if course is None:
            raise CourseNotFoundError()
        return self._index_for(course)

    def get_definition(self, course_id: int, lesson_id: str) -> QuizDefinition:
        return self.get_lesson_index(course_id).quiz_definition(lesson_id)
