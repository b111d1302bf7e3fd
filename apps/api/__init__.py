# Django 기동 시 Celery 앱 로딩 (shared_task 가 이 앱에 바인딩되도록)
from .celery import app as celery_app

__all__ = ("celery_app",)
