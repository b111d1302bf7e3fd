# apps/domains/quizzes/services/factory.py
"""
Use Case 조립 (Composition Root)

- 저장소: DjangoAttemptStore
- 카탈로그: DjangoQuizCatalog (프로세스당 1개, LessonIndex 캐시 공유)
- 시계: django.utils.timezone.now (TimeGuard 단일 시계)
- run-lock: Redis 가 붙으면 SET NX EX, 아니면 프로세스 내부 락
"""
from __future__ import annotations

from functools import lru_cache

from django.conf import settings
from django.utils import timezone

from academy.adapters.db.django.catalog_courses import DjangoQuizCatalog
from academy.adapters.db.django.repositories_quiz import DjangoAttemptStore
from academy.adapters.locks import LocalRunLock, RedisRunLock
from academy.application.use_cases.quiz import AttemptLifecycleManager, ExpirationSweeper
from libs.redis import is_redis_available

SWEEP_LOCK_NAME = "quizzes:expire-attempts"


@lru_cache(maxsize=1)
def get_quiz_catalog() -> DjangoQuizCatalog:
    return DjangoQuizCatalog(
        cache_size=getattr(settings, "QUIZ_LESSON_INDEX_CACHE_SIZE", 256),
    )


def build_lifecycle_manager() -> AttemptLifecycleManager:
    return AttemptLifecycleManager(
        store=DjangoAttemptStore(),
        catalog=get_quiz_catalog(),
        clock=timezone.now,
        start_max_retries=getattr(settings, "QUIZ_START_MAX_RETRIES", 3),
    )


def build_sweep_lock():
    if is_redis_available():
        return RedisRunLock(
            SWEEP_LOCK_NAME,
            ttl_seconds=getattr(settings, "QUIZ_SWEEP_LOCK_TTL_SECONDS", 300),
        )
    return LocalRunLock(SWEEP_LOCK_NAME)


def build_expiration_sweeper() -> ExpirationSweeper:
    return ExpirationSweeper(
        store=DjangoAttemptStore(),
        run_lock=build_sweep_lock(),
        clock=timezone.now,
    )
