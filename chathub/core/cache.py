# chathub/core/cache.py
"""Redis caching implementation."""
import json
import logging
from typing import Any, Optional, Union
from datetime import timedelta
import redis.asyncio as redis
from ..core.config import settings

logger = logging.getLogger(__name__)

USERS_ALL_KEY = "users:all"
USERS_ONLINE_KEY = "users:online"


class CacheManager:
    """JSON cache over Redis. Every call is a no-op when no URL is configured."""

    def __init__(self, url: Optional[str] = None, default_ttl: int = 60):
        self.url = url
        self.default_ttl = default_ttl
        self.redis: Optional[redis.Redis] = None

    @property
    def enabled(self) -> bool:
        return bool(self.url)

    async def connect(self):
        """Initialize Redis connection."""
        if self.enabled and not self.redis:
            self.redis = redis.from_url(
                self.url,
                encoding="utf-8",
                decode_responses=True
            )

    async def disconnect(self):
        """Close Redis connection."""
        if self.redis:
            await self.redis.aclose()
            self.redis = None

    async def get(self, key: str) -> Optional[Any]:
        """Get value from cache."""
        if not self.enabled:
            return None
        await self.connect()

        try:
            value = await self.redis.get(key)
            if value:
                return json.loads(value)
        except Exception as e:
            logger.warning(f"Cache get error for {key}: {e}")
        return None

    async def set(
        self,
        key: str,
        value: Any,
        expire: Optional[Union[int, timedelta]] = None
    ) -> bool:
        """Set value in cache."""
        if not self.enabled:
            return False
        await self.connect()

        expire = expire or self.default_ttl
        if isinstance(expire, timedelta):
            expire = int(expire.total_seconds())
        try:
            return bool(await self.redis.setex(key, expire, json.dumps(value, default=str)))
        except Exception as e:
            logger.warning(f"Cache set error for {key}: {e}")
            return False

    async def delete(self, *keys: str) -> bool:
        """Delete keys from cache."""
        if not self.enabled:
            return False
        await self.connect()

        try:
            return bool(await self.redis.delete(*keys))
        except Exception as e:
            logger.warning(f"Cache delete error for {keys}: {e}")
            return False


# Global cache instance
cache = CacheManager(settings.redis_url, settings.cache_ttl)

async def invalidate_user_listings():
    """Drop cached user listings after a user row changes."""
    await cache.delete(USERS_ALL_KEY, USERS_ONLINE_KEY)
