from .expiration_tasks import expire_quiz_attempts_task

__all__ = [
    "expire_quiz_attempts_task",
]
