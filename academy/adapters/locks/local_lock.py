"""
RunLock: 프로세스 내부 구현 (Redis 미설정 시)

같은 이름이면 같은 threading.Lock 을 공유한다.
"""
from __future__ import annotations

import threading

_registry_guard = threading.Lock()
_locks: dict[str, threading.Lock] = {}


def _lock_for(name: str) -> threading.Lock:
    with _registry_guard:
        lock = _locks.get(name)
        if lock is None:
            lock = threading.Lock()
            _locks[name] = lock
        return lock


class LocalRunLock:

    def __init__(self, name: str) -> None:
        self.name = name
        self._lock = _lock_for(name)
        self._held = False

    def acquire(self) -> bool:
        self._held = self._lock.acquire(blocking=False)
        return self._held

    def release(self) -> None:
        if not self._held:
            return
        self._held = False
        self._lock.release()
