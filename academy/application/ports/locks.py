"""
RunLock 포트: 배치 중복 실행 방지 (비차단)
"""
from __future__ import annotations

from typing import Protocol


class RunLock(Protocol):
    """acquire 실패 = 다른 실행이 진행 중 → 호출자는 즉시 건너뛴다."""

    def acquire(self) -> bool:
        ...

    def release(self) -> None:
        ...
