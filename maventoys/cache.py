import logging
import pickle
from datetime import date
from functools import wraps
from typing import Callable, Optional

import redis

from maventoys.core.config import settings

logger = logging.getLogger(__name__)

KEY_PREFIX = "maventoys"
_KEY_TYPES = (int, float, str, bool, date, type(None))

_redis_client: Optional[redis.Redis] = None


def get_redis() -> redis.Redis:
    global _redis_client
    if _redis_client is None:
        # Keep as binary for pickle serialization
        _redis_client = redis.Redis.from_url(settings.REDIS_URL, decode_responses=False)
    return _redis_client


def cache_key(func_name: str, kwargs: dict) -> str:
    # sessions and services differ per request, only plain arguments identify a result
    parts = [f"{name}={value}" for name, value in sorted(kwargs.items()) if isinstance(value, _KEY_TYPES)]
    return ":".join([KEY_PREFIX, func_name] + parts)


def invalidate_all() -> int:
    client = get_redis()
    keys = client.keys(f"{KEY_PREFIX}:*")
    if keys:
        client.delete(*keys)
        logger.debug("Invalidated %d cached reports", len(keys))
    return len(keys)


def cache(expire: Optional[int] = None):
    """Read-through Redis cache for report endpoints; a no-op unless ``CACHE_ENABLED`` is set."""
    def decorator(func: Callable):
        ttl = expire or settings.CACHE_TTL_SECONDS

        def lookup(kwargs):
            key = cache_key(func.__name__, kwargs)
            cached_data = get_redis().get(key)
            if cached_data:
                return key, pickle.loads(cached_data)
            return key, None

        def store(key, result):
            get_redis().setex(name=key, time=ttl, value=pickle.dumps(result))

        @wraps(func)
        def wrapper(*args, **kwargs):
            if not settings.CACHE_ENABLED:
                return func(*args, **kwargs)
            key, cached = lookup(kwargs)
            if cached is not None:
                return cached
            result = func(*args, **kwargs)
            store(key, result)
            return result

        return wrapper
    return decorator
