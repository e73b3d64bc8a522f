# chathub/utils/cache_decorators.py
"""Cache decorators for API endpoints."""
from functools import wraps
from typing import Callable, Optional, Union
from datetime import timedelta
from ..core.cache import cache

def cached(key: str, expire: Optional[Union[int, timedelta]] = None):
    """Serve a JSON-serializable endpoint result from the cache under a fixed key."""
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        async def wrapper(*args, **kwargs):
            cached_result = await cache.get(key)
            if cached_result is not None:
                return cached_result

            result = await func(*args, **kwargs)
            await cache.set(key, result, expire)
            return result

        return wrapper
    return decorator
