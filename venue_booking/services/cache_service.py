"""
Redis caching service for the night listing.

CACHING STRATEGY
================

What we cache:
  - The night listing response (JSON-serialized), key "nights:list"

Why only nights:
  - Nights are seeded data; the booking engine never writes them
  - Reserved seats and bookings change with every request and must always
    be read from PostgreSQL, otherwise a client could offer a seat that was
    just taken

Invalidation:
  - TTL-based expiry (REDIS_CACHE_TTL)
  - invalidate_night_cache() after seeding

Redis is optional: when disabled or unreachable every call degrades to a
cache miss and the API keeps serving from the database.
"""

import json
from typing import Optional

import redis.asyncio as redis
from redis.exceptions import RedisError
from venue_booking.core.config import get_settings
from venue_booking.core.logging import get_logger
from venue_booking.core.metrics import record_cache_operation

logger = get_logger(__name__)
settings = get_settings()

NIGHT_LIST_KEY = "nights:list"

_redis_client: Optional[redis.Redis] = None


async def get_redis() -> Optional[redis.Redis]:
    """Get or create Redis connection. Returns None if Redis is disabled."""
    global _redis_client

    if not settings.REDIS_ENABLED:
        return None

    if _redis_client is None:
        client = redis.from_url(
            settings.REDIS_URL,
            encoding="utf-8",
            decode_responses=True,
            socket_connect_timeout=5,
            socket_timeout=5,
            retry_on_timeout=True,
        )
        try:
            await client.ping()
        except (RedisError, OSError) as e:
            logger.error("redis_connection_failed", error=str(e))
            await client.aclose()
            return None
        _redis_client = client
        logger.info("redis_connected", url=settings.REDIS_URL)

    return _redis_client


async def close_redis() -> None:
    """Close Redis connection on shutdown."""
    global _redis_client
    if _redis_client:
        await _redis_client.aclose()
        _redis_client = None


async def get_cached_nights() -> Optional[dict]:
    client = await get_redis()
    if not client:
        return None

    try:
        data = await client.get(NIGHT_LIST_KEY)
    except RedisError as e:
        logger.error("cache_get_error", key=NIGHT_LIST_KEY, error=str(e))
        return None

    record_cache_operation("get", hit=data is not None)
    if data:
        logger.debug("cache_hit", key=NIGHT_LIST_KEY)
        return json.loads(data)
    logger.debug("cache_miss", key=NIGHT_LIST_KEY)
    return None


async def set_cached_nights(data: dict) -> None:
    """Cache night listing response with TTL."""
    client = await get_redis()
    if not client:
        return

    try:
        await client.setex(NIGHT_LIST_KEY, settings.REDIS_CACHE_TTL, json.dumps(data, default=str))
        logger.debug("cache_set", key=NIGHT_LIST_KEY, ttl=settings.REDIS_CACHE_TTL)
    except RedisError as e:
        logger.error("cache_set_error", key=NIGHT_LIST_KEY, error=str(e))


async def invalidate_night_cache() -> None:
    client = await get_redis()
    if not client:
        return

    try:
        deleted = await client.delete(NIGHT_LIST_KEY)
        logger.info("cache_invalidated", keys_deleted=deleted)
    except RedisError as e:
        logger.error("cache_invalidation_error", error=str(e))


async def get_cache_stats() -> dict:
    """Get Redis cache statistics for monitoring."""
    client = await get_redis()
    if not client:
        return {"status": "disabled"}

    try:
        info = await client.info("stats")
        hits = info.get("keyspace_hits", 0)
        misses = info.get("keyspace_misses", 0)
        return {
            "status": "connected",
            "hits": hits,
            "misses": misses,
            "hit_rate": round(hits / max(hits + misses, 1) * 100, 2),
        }
    except RedisError as e:
        return {"status": "error", "error": str(e)}
