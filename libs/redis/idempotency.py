"""
Redis 기반 멱등성 (배치 중복 실행 방지)

스윕 같은 주기 작업이 실행 전에 SETNX 락을 건다.
- 키: lock:{name}
- 값: 실행 토큰 (해제 시 본인 토큰일 때만 DEL)
- TTL: 한 번의 실행 시간보다 충분히 길게
- SETNX 실패 시 중복 실행으로 간주 → 즉시 종료
"""

from __future__ import annotations

import logging

import redis

from libs.redis.client import get_redis_client

logger = logging.getLogger(__name__)

# 멱등성 로그 포맷 (표준화)
LOG_IDEMPOTENT_SKIP = "IDEMPOTENT_SKIP lock=%s reason=duplicate"
LOG_LOCK_ACQUIRED = "IDEMPOTENT_LOCK lock=%s acquired"
LOG_LOCK_RELEASED = "IDEMPOTENT_LOCK lock=%s released"

DEFAULT_LOCK_TTL_SECONDS = 300  # 5분

# 본인 토큰일 때만 삭제 (TTL 만료 후 다른 실행이 잡은 락은 건드리지 않음)
_RELEASE_SCRIPT = """
if redis.call("get", KEYS[1]) == ARGV[1] then
    return redis.call("del", KEYS[1])
end
return 0
"""


def _key(name: str) -> str:
    return f"lock:{name}"


def acquire_run_lock(
    name: str,
    token: str,
    ttl_seconds: int = DEFAULT_LOCK_TTL_SECONDS,
) -> bool:
    """
    Run 락 획득 (SET NX EX)

    Returns:
        True: 락 획득 성공, 실행 진행 가능
        False: 락 획득 실패 (다른 실행 진행 중)
    """
    client = get_redis_client()
    if not client:
        # Redis 미사용: 중복 방지 없이 진행 (CAS 가 최종 안전장치)
        return True

    try:
        ok = client.set(_key(name), token, nx=True, ex=ttl_seconds)
        if ok:
            logger.debug(LOG_LOCK_ACQUIRED, name)
            return True
        logger.info(LOG_IDEMPOTENT_SKIP, name)
        return False
    except redis.RedisError as e:
        logger.warning("Redis lock acquire failed, allowing run: %s", e)
        return True


def release_run_lock(name: str, token: str) -> None:
    """실행 완료/실패 시 락 해제"""
    client = get_redis_client()
    if not client:
        return

    try:
        client.eval(_RELEASE_SCRIPT, 1, _key(name), token)
        logger.debug(LOG_LOCK_RELEASED, name)
    except redis.RedisError as e:
        logger.warning("Redis lock release failed: %s", e)
        # TTL 만료 시 자동 해제되므로 치명적이지 않음
