# PATH: apps/api/common/models.py
from django.db import models


class TimestampModel(models.Model):
    """
    생성 / 수정 시간 자동 기록 추상 모델
    """
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True


class BaseModel(TimestampModel):
    """
    courses / quizzes 모델 공통 베이스.

    - updated_at 은 Course 레슨 인덱스 캐시 무효화 기준으로도 쓰인다
    """
    class Meta:
        abstract = True
