"""
Redis 보호 레이어

DB 가 SSOT, Redis 는 "배치 중복 실행 방지" 목적으로만 사용.

- 만료 스윕 run-lock (SET NX EX)

Redis 미설정/장애 시 호출부가 프로세스 내부 락으로 fallback.
"""

from libs.redis.client import get_redis_client, is_redis_available

__all__ = [
    "get_redis_client",
    "is_redis_available",
]
