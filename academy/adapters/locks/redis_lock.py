"""
RunLock: Redis SET NX EX 구현 (여러 워커/호스트 간 중복 스윕 방지)
"""
from __future__ import annotations

from uuid import uuid4

from libs.redis.idempotency import (
    DEFAULT_LOCK_TTL_SECONDS,
    acquire_run_lock,
    release_run_lock,
)


class RedisRunLock:

    def __init__(self, name: str, ttl_seconds: int = DEFAULT_LOCK_TTL_SECONDS) -> None:
        self.name = name
        self.ttl_seconds = int(ttl_seconds)
        self._token = uuid4().hex
        self._held = False

    def acquire(self) -> bool:
        self._held = acquire_run_lock(self.name, self._token, self.ttl_seconds)
        return self._held

    def release(self) -> None:
        if not self._held:
            return
        self._held = False
        release_run_lock(self.name, self._token)
