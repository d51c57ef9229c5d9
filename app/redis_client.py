"""
Redis connection for Corecord

Refresh tokens live in Redis rather than the relational database. The
client is created once per process by `init_redis(app)`; an already built
client can be injected through the `REDIS_CLIENT` config key.
"""

import logging
from typing import Optional

import redis

logger = logging.getLogger("main")

redis_client: Optional[redis.Redis] = None


def init_redis(app) -> None:
    """Create (or adopt) the Redis client for this application"""
    global redis_client

    injected = app.config.get("REDIS_CLIENT")
    if injected is not None:
        redis_client = injected
        logger.info("Using injected Redis client")
        return

    redis_url = app.config["REDIS_URL"]
    redis_client = redis.from_url(redis_url, decode_responses=True)
    try:
        redis_client.ping()
        logger.info(f"Redis initialized at {redis_url}")
    except redis.RedisError as e:
        # Startup continues; token operations will raise until Redis is back
        logger.warning(f"Redis initialized but ping failed: {e}")


def get_redis() -> redis.Redis:
    if redis_client is None:
        raise RuntimeError("Redis client is not initialized, call init_redis(app) first")
    return redis_client


def is_redis_available() -> bool:
    if redis_client is None:
        return False
    try:
        return bool(redis_client.ping())
    except redis.RedisError as e:
        logger.warning(f"Redis ping failed: {e}")
        return False
