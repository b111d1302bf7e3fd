
import pytest
from django.utils import timezone

from academy.adapters.db.django.catalog_courses import DjangoQuizCatalog
from academy.adapters.db.django.repositories_quiz import DjangoAttemptStore
from academy.domain.quiz import grading
from academy.domain.quiz.entities import AttemptRecord, AttemptStatus, FinalizeFields, QuestionDefinition
from academy.domain.quiz.errors import AttemptConflictError, CourseNotFoundError, NotAQuizError
from apps.domains.quizzes.models import QuizSubmission

from tests.builders import mc, tf, three_question_modules

pytestmark = pytest.mark.django_db


def _record(user_id=7, attempt_number=1, time_limit=10, passing_score=70, started_at=None):
    return AttemptRecord(
        course_id=1,
        lesson_id="quiz-1",
        user_id=user_id,
        attempt_number=attempt_number,
        started_at=started_at or timezone.now(),
        time_limit=time_limit,
        passing_score=passing_score,
    )


class TestDjangoAttemptStore:
    def test_insert_and_read_back(self):
        store = DjangoAttemptStore()
        saved = store.insert(_record())
        assert saved.id is not None
        assert saved.status == AttemptStatus.IN_PROGRESS
        assert store.count_attempts(7, "quiz-1") == 1
        assert store.get_active(7, "quiz-1").id == saved.id
        assert store.get_by_id(saved.id).time_limit == 10

    def test_duplicate_number_is_a_conflict(self):
        store = DjangoAttemptStore()
        store.insert(_record())
        with pytest.raises(AttemptConflictError):
            store.insert(_record())
        # savepoint 덕분에 같은 트랜잭션에서 계속 사용 가능
        assert store.count_attempts(7, "quiz-1") == 1

    def test_get_all_is_newest_first(self):
        store = DjangoAttemptStore()
        for n in (1, 2, 3):
            store.insert(_record(attempt_number=n))
        assert [r.attempt_number for r in store.get_all(7, "quiz-1")] == [3, 2, 1]

    def test_graded_finalize_recomputes_score(self):
        store = DjangoAttemptStore()
        saved = store.insert(_record(passing_score=60))
        questions = [QuestionDefinition.from_dict(q) for q in (mc("q1"), tf("q2"), mc("q3"))]
        answers = grading.grade(
            [
                {"question_id": "q1", "answer": "B"},
                {"question_id": "q2", "answer": "true"},
                {"question_id": "q3", "answer": "A"},
            ],
            questions,
        )

        landed = store.conditional_finalize(
            saved.id,
            AttemptStatus.GRADED,
            FinalizeFields(submitted_at=timezone.now(), time_spent=42, answers=tuple(answers)),
        )

        assert landed is True
        row = QuizSubmission.objects.get(id=saved.id)
        assert row.status == "graded"
        assert row.total_points == 20.0
        assert row.max_points == 30.0
        assert row.score == 67
        assert row.passed is True
        assert row.time_spent == 42
        assert row.answers[0] == {
            "question_id": "q1",
            "answer": "B",
            "is_correct": True,
            "points_earned": 10.0,
            "points_possible": 10.0,
        }

    def test_finalize_only_once(self):
        store = DjangoAttemptStore()
        saved = store.insert(_record())
        fields = FinalizeFields(submitted_at=timezone.now(), time_spent=1)
        assert store.conditional_finalize(saved.id, AttemptStatus.EXPIRED, fields) is True
        assert store.conditional_finalize(saved.id, AttemptStatus.GRADED, fields) is False
        assert store.conditional_finalize(saved.id, AttemptStatus.EXPIRED, fields) is False
        assert store.get_by_id(saved.id).status == AttemptStatus.EXPIRED
        assert store.get_active(7, "quiz-1") is None

    def test_finalize_missing_row(self):
        fields = FinalizeFields(submitted_at=timezone.now(), time_spent=1)
        assert DjangoAttemptStore().conditional_finalize(999, AttemptStatus.GRADED, fields) is False

    def test_finalize_rejects_in_progress_target(self):
        store = DjangoAttemptStore()
        saved = store.insert(_record())
        with pytest.raises(ValueError):
            store.conditional_finalize(
                saved.id,
                AttemptStatus.IN_PROGRESS,
                FinalizeFields(submitted_at=timezone.now(), time_spent=0),
            )

    def test_sweep_candidates(self):
        store = DjangoAttemptStore()
        timed = store.insert(_record(attempt_number=1))
        store.insert(_record(attempt_number=2, time_limit=None))
        store.insert(_record(attempt_number=3, time_limit=0))
        done = store.insert(_record(attempt_number=4))
        store.conditional_finalize(
            done.id,
            AttemptStatus.EXPIRED,
            FinalizeFields(submitted_at=timezone.now(), time_spent=0),
        )
        assert [r.id for r in store.list_sweep_candidates()] == [timed.id]


class TestDjangoQuizCatalog:
    def test_definition_from_course(self, course):
        definition = DjangoQuizCatalog().get_definition(course.id, "quiz-1")
        assert definition.course_id == course.id
        assert definition.course_name == "Python 101"
        assert len(definition.questions) == 3

    def test_missing_course(self):
        with pytest.raises(CourseNotFoundError):
            DjangoQuizCatalog().get_definition(12345, "quiz-1")

    def test_not_a_quiz(self, course):
        with pytest.raises(NotAQuizError):
            DjangoQuizCatalog().get_definition(course.id, "video-1")

    def test_index_is_reused_until_course_changes(self, course):
        catalog = DjangoQuizCatalog()
        first = catalog.get_lesson_index(course.id)
        assert catalog.get_lesson_index(course.id) is first

        course.modules = three_question_modules(time_limit=5)
        course.save()

        rebuilt = catalog.get_lesson_index(course.id)
        assert rebuilt is not first
        assert rebuilt.quiz_definition("quiz-1").time_limit == 5

    def test_cache_disabled(self, course):
        catalog = DjangoQuizCatalog(cache_size=0)
        assert catalog.get_lesson_index(course.id) is not catalog.get_lesson_index(course.id)
