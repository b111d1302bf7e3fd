"""
도메인 공통: ID 생성 (외부 라이브러리 없음)
"""
from __future__ import annotations

import uuid


def generate_run_id(prefix: str = "") -> str:
    """스윕 등 배치 실행 1회를 로그에서 묶기 위한 짧은 ID."""
    short = uuid.uuid4().hex[:8]
    return f"{prefix}-{short}" if prefix else short
