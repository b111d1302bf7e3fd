from unittest import mock

import redis

from academy.adapters.locks import LocalRunLock, RedisRunLock
from libs.redis import client as redis_client_module
from libs.redis import idempotency


class TestLocalRunLock:
    def test_same_name_is_exclusive(self):
        first = LocalRunLock("test:exclusive")
        second = LocalRunLock("test:exclusive")
        assert first.acquire() is True
        assert second.acquire() is False
        first.release()
        assert second.acquire() is True
        second.release()

    def test_release_without_acquire_is_harmless(self):
        lock = LocalRunLock("test:noop")
        lock.release()
        assert lock.acquire() is True
        lock.release()


class TestRedisRunLock:
    def test_set_nx_ex(self):
        fake = mock.Mock()
        fake.set.return_value = True
        with mock.patch.object(idempotency, "get_redis_client", return_value=fake):
            lock = RedisRunLock("quizzes:sweep", ttl_seconds=120)
            assert lock.acquire() is True
            lock.release()

        key = "lock:quizzes:sweep"
        fake.set.assert_called_once_with(key, mock.ANY, nx=True, ex=120)
        token = fake.set.call_args[0][1]
        fake.eval.assert_called_once_with(mock.ANY, 1, key, token)

    def test_held_elsewhere(self):
        fake = mock.Mock()
        fake.set.return_value = None
        with mock.patch.object(idempotency, "get_redis_client", return_value=fake):
            lock = RedisRunLock("quizzes:sweep")
            assert lock.acquire() is False
            lock.release()
        fake.eval.assert_not_called()

    def test_redis_error_allows_run(self):
        fake = mock.Mock()
        fake.set.side_effect = redis.ConnectionError("down")
        with mock.patch.object(idempotency, "get_redis_client", return_value=fake):
            assert RedisRunLock("quizzes:sweep").acquire() is True

    def test_without_redis_allows_run(self):
        with mock.patch.object(idempotency, "get_redis_client", return_value=None):
            assert RedisRunLock("quizzes:sweep").acquire() is True


class TestRedisClient:
    def test_disabled_without_host(self, monkeypatch):
        monkeypatch.delenv("REDIS_HOST", raising=False)
        redis_client_module.reset_redis_state()
        try:
            assert redis_client_module.get_redis_client() is None
            assert redis_client_module.is_redis_available() is False
        finally:
            redis_client_module.reset_redis_state()
