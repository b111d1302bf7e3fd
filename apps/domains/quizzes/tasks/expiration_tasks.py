# apps/domains/quizzes/tasks/expiration_tasks.py
from celery import shared_task

from apps.domains.quizzes.services import build_expiration_sweeper


@shared_task
def expire_quiz_attempts_task() -> dict:
    # beat 주기 실행. 중복 실행은 run-lock 이 skip, 실패 재시도는 다음 beat 주기
    return build_expiration_sweeper().run().as_dict()
