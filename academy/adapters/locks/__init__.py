from academy.adapters.locks.local_lock import LocalRunLock
from academy.adapters.locks.redis_lock import RedisRunLock

__all__ = [
    "LocalRunLock",
    "RedisRunLock",
]
