import random

import pytest
import fakeredis


@pytest.fixture(scope="session")
def redis_client():
    return fakeredis.FakeStrictRedis(decode_responses=True)


@pytest.fixture(autouse=True)
def _patch_shared_redis(monkeypatch, redis_client):
    # Patch fortune_flip.redis_client.get_redis to return our fake client
    import fortune_flip.redis_client as rc

    def _get():
        return redis_client

    monkeypatch.setattr(rc, "get_redis", _get, raising=True)
    # Clear DB before each test for isolation
    redis_client.flushdb()
    yield
    redis_client.flushdb()


class GoldenRandom(random.Random):
    """Deterministic, evenly spread stand-in for random(): k * golden ratio mod 1."""

    STEP = 0.6180339887498949

    def __init__(self, start=0.5):
        super().__init__(0)
        self._x = start

    def random(self):
        self._x = (self._x + self.STEP) % 1.0
        return self._x


@pytest.fixture
def golden_rng():
    return GoldenRandom()
