"""
Redis cache utility - used for the technical question listing.
If Redis unavailable, caching is disabled and all ops no-op.
"""
import json
import logging
from typing import Any

from techprep.app.core.config import settings

logger = logging.getLogger(__name__)
_client = None

QUESTION_LIST_PREFIX = "techprep:questions:"


def question_list_key(tech_stack: str | None, difficulty: str | None) -> str:
    """Key per exact filter values; tech stack matching is case-sensitive."""
    return f"{QUESTION_LIST_PREFIX}{tech_stack or '*'}:{difficulty or '*'}"


async def connect() -> None:
    global _client
    url = settings.redis_url
    if not url:
        logger.warning("redis_url not set - caching disabled")
        return
    try:
        from redis import asyncio as aioredis
        _client = aioredis.Redis.from_url(
            url, encoding="utf-8", decode_responses=True
        )
        await _client.ping()
        logger.info("Redis connected - caching enabled")
    except Exception as e:
        logger.warning("Redis connect failed: %s - caching disabled", e)
        _client = None


async def close() -> None:
    global _client
    if _client is not None:
        await _client.aclose()
        _client = None


async def get(key: str) -> Any:
    if not _client:
        return None
    try:
        val = await _client.get(key)
        return json.loads(val) if val else None
    except Exception as e:
        logger.debug("Cache get failed key=%s: %s", key, e)
        return None


async def set(key: str, value: Any, ttl: int | None = None) -> None:
    if not _client:
        return
    ttl_val = ttl if ttl is not None else settings.question_cache_ttl
    try:
        await _client.set(key, json.dumps(value, default=str), ex=ttl_val)
    except Exception as e:
        logger.debug("Cache set failed key=%s: %s", key, e)


async def delete(key: str) -> None:
    if not _client:
        return
    try:
        await _client.delete(key)
    except Exception as e:
        logger.debug("Cache delete failed key=%s: %s", key, e)


async def delete_prefix(prefix: str) -> None:
    """Remove every key under prefix (question list invalidation)."""
    if not _client:
        return
    try:
        async for key in _client.scan_iter(match=f"{prefix}*"):
            await _client.delete(key)
    except Exception as e:
        logger.debug("Cache prefix delete failed prefix=%s: %s", prefix, e)
