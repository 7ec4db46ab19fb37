import json
import logging
import time
from typing import Any, Optional

import redis

from ..config import settings


logger = logging.getLogger(__name__)
_redis_client: Optional[redis.Redis] = None
_redis_disabled_until: float = 0.0

INSTAGRAM_POSTS_KEY = "instagram:posts"


def _now() -> float:
    return time.time()


def _mark_redis_disabled(reason: str, seconds: int = 60) -> None:
    global _redis_disabled_until
    _redis_disabled_until = _now() + seconds
    logger.warning("redis disabled for %ss: %s", seconds, reason)


def get_redis() -> Optional[redis.Redis]:
    """Shared client, or None when REDIS_URL is unset or the server is down."""
    global _redis_client
    if _redis_disabled_until and _redis_disabled_until > _now():
        return None
    url = settings.REDIS_URL
    if not url:
        return None
    if _redis_client is None:
        try:
            _redis_client = redis.from_url(
                url,
                decode_responses=True,
                socket_connect_timeout=0.2,
                socket_timeout=0.5,
                retry_on_timeout=False,
                health_check_interval=30,
            )
            _redis_client.ping()
        except redis.RedisError as exc:
            logger.warning("redis unavailable: %s", exc)
            _mark_redis_disabled(str(exc))
            _redis_client = None
            return None
    return _redis_client


def cache_get_json(key: str) -> Optional[Any]:
    client = get_redis()
    if client is None:
        return None
    try:
        raw = client.get(key)
        if not raw:
            return None
        return json.loads(raw)
    except (redis.RedisError, ValueError) as exc:
        logger.warning("redis get failed: %s", exc)
        return None


def cache_set_json(key: str, value: Any, ttl: int) -> bool:
    client = get_redis()
    if client is None:
        return False
    try:
        client.setex(key, ttl, json.dumps(value, ensure_ascii=False))
        return True
    except redis.RedisError as exc:
        logger.warning("redis set failed: %s", exc)
        return False


def cache_delete(key: str) -> bool:
    client = get_redis()
    if client is None:
        return False
    try:
        return bool(client.delete(key))
    except redis.RedisError as exc:
        logger.warning("redis delete failed: %s", exc)
        return False
