import pytest

from tests.builders import three_question_modules


@pytest.fixture(autouse=True)
def _fresh_quiz_catalog():
    # LessonIndex 캐시는 프로세스 단위 → 테스트 간 격리
    from apps.domains.quizzes.services import get_quiz_catalog
    get_quiz_catalog.cache_clear()
    yield
    get_quiz_catalog.cache_clear()


@pytest.fixture
def course(db):
    from apps.domains.courses.models import Course
    return Course.objects.create(name="Python 101", modules=three_question_modules())


@pytest.fixture
def timed_course(db):
    from apps.domains.courses.models import Course
    return Course.objects.create(name="Timed", modules=three_question_modules(time_limit=10))


@pytest.fixture
def student(db, django_user_model):
    return django_user_model.objects.create_user(username="student", password="pw-123456")


@pytest.fixture
def other_student(db, django_user_model):
    return django_user_model.objects.create_user(username="other", password="pw-123456")


@pytest.fixture
def staff(db, django_user_model):
    return django_user_model.objects.create_user(username="staff", password="pw-123456", is_staff=True)


@pytest.fixture
def api_client():
    from rest_framework.test import APIClient
    return APIClient()


@pytest.fixture
def student_client(api_client, student):
    api_client.force_authenticate(user=student)
    return api_client
