from django.core.exceptions import ValidationError
from django.db import models

from apps.api.common.models import BaseModel
from academy.domain.quiz.catalog_index import QUIZ_LESSON_TYPE
from academy.domain.quiz.errors import QuizValidationError
from academy.domain.quiz.validation import validate_quiz_definition, validate_quiz_settings


# ========================================================
# Course
# ========================================================

class Course(BaseModel):
    """
    코스 정의 (커리큘럼 편집은 이 서비스 책임 아님)

    퀴즈 엔진은 modules JSON 을 읽기 전용으로만 사용한다.
    modules = [{"id", "title", "lessons": [{"id", "title", "type", "content"}]}]
    """

    name = models.CharField(max_length=255)
    description = models.TextField(blank=True)

    modules = models.JSONField(default=list, blank=True)

    is_active = models.BooleanField(default=True)

    class Meta:
        db_table = "courses_course"
        ordering = ["-created_at"]

    def __str__(self):
        return self.name

    def clean(self):
        super().clean()
        if not isinstance(self.modules, list):
            raise ValidationError({"modules": "modules must be a list"})

        for module in self.modules:
            for lesson in (module or {}).get("lessons") or []:
                if lesson.get("type") != QUIZ_LESSON_TYPE:
                    continue
                content = lesson.get("content") or {}
                try:
                    validate_quiz_definition(content.get("questions"))
                    validate_quiz_settings(content.get("time_limit"), content.get("passing_score"))
                except QuizValidationError as e:
                    raise ValidationError(
                        {"modules": f"Lesson {lesson.get('id')}: {e.message}"}
                    ) from e
