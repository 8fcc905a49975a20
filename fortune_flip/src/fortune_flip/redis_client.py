import os
import redis
from functools import lru_cache


@lru_cache(maxsize=1)
def get_redis() -> redis.Redis:
    host = os.environ.get("REDIS_HOST", "localhost")
    port = int(os.environ.get("REDIS_PORT", "6379"))
    db = int(os.environ.get("REDIS_DB", "0"))
    timeout = float(os.environ.get("REDIS_SOCKET_TIMEOUT", "2.0"))
    return redis.Redis(
        host=host,
        port=port,
        db=db,
        decode_responses=True,
        socket_timeout=timeout,
        socket_connect_timeout=timeout,
    )
