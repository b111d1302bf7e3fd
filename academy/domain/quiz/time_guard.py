"""
제한 시간 계산: 단일 진실 (SSOT)

읽기(lazy expiry) / 제출 / 스윕 세 경로 모두 이 모듈만 사용한다.
now 는 항상 호출자가 주입한다 (테스트에서 결정적).
"""
from __future__ import annotations

import math
from datetime import datetime, timedelta
from typing import Optional

from academy.domain.quiz.entities import AttemptRecord


def is_unlimited(attempt: AttemptRecord) -> bool:
    return not attempt.time_limit


def deadline(attempt: AttemptRecord) -> Optional[datetime]:
    """started_at + time_limit. 무제한이거나 시작 시각이 없으면 None."""
    if is_unlimited(attempt) or attempt.started_at is None:
        return None
    return attempt.started_at + timedelta(minutes=float(attempt.time_limit))


def elapsed_seconds(attempt: AttemptRecord, now: datetime) -> int:
    """time_spent 기록용 (내림, 음수 없음)."""
    if attempt.started_at is None:
        return 0
    return max(0, math.floor((now - attempt.started_at).total_seconds()))


def is_expired(attempt: AttemptRecord, now: datetime) -> bool:
    """경과 분 > time_limit 이면 True. 경계값(정확히 같음)은 아직 유효."""
    limit_at = deadline(attempt)
    if limit_at is None:
        return False
    return now > limit_at


def remaining_seconds(attempt: AttemptRecord, now: datetime) -> Optional[int]:
    """남은 초 (최소 0). 무제한이면 None."""
    if is_unlimited(attempt):
        return None
    limit_at = deadline(attempt)
    if limit_at is None:
        return None
    return max(0, math.floor((limit_at - now).total_seconds()))
