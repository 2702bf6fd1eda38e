"""
In-memory TTL cache for screening results.

Results are a pure function of the share code, so lookups by code can be
served from memory. Size and TTL come from settings.
"""

import hashlib
import threading
from functools import wraps
from typing import Callable, Optional, TypeVar

from cachetools import TTLCache

from config import settings

# Type variable for generic cache functions
T = TypeVar('T')

# Global cache instances with thread-safe access
_cache_lock = threading.Lock()
_caches: dict = {}


def get_cache(
    name: str,
    maxsize: Optional[int] = None,
    ttl: Optional[int] = None,
) -> TTLCache:
    """
    Get or create a named cache instance.

    Args:
        name: Cache namespace (e.g., "screening")
        maxsize: Maximum number of items (default: settings.cache_max_size)
        ttl: Time-to-live in seconds (default: settings.cache_ttl_seconds)

    Returns:
        TTLCache instance for the namespace
    """
    with _cache_lock:
        if name not in _caches:
            _caches[name] = TTLCache(
                maxsize=maxsize or settings.cache_max_size,
                ttl=ttl or settings.cache_ttl_seconds,
            )
        return _caches[name]


def make_cache_key(*args, **kwargs) -> str:
    """
    Create a deterministic cache key from arguments.

    Returns:
        MD5 hash string as cache key
    """
    sorted_kwargs = sorted(kwargs.items())
    key_parts = [str(arg) for arg in args] + [f"{k}={v}" for k, v in sorted_kwargs]
    key_string = "|".join(key_parts)

    # Not cryptographic, just key uniqueness
    return hashlib.md5(key_string.encode()).hexdigest()


def cache_result(
    cache_name: str,
    ttl: Optional[int] = None,
    key_prefix: str = ""
) -> Callable:
    """
    Decorator to cache results of a pure function.

    Exceptions are not cached; a failing call is retried on the next lookup.

    Example:
        @cache_result("screening", key_prefix="code:")
        def evaluate_share_code(code: str) -> ScreeningResult:
            ...
    """
    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @wraps(func)
        def wrapper(*args, **kwargs) -> T:
            cache = get_cache(cache_name, ttl=ttl)
            cache_key = key_prefix + make_cache_key(*args, **kwargs)

            with _cache_lock:
                if cache_key in cache:
                    return cache[cache_key]

            result = func(*args, **kwargs)

            with _cache_lock:
                cache[cache_key] = result

            return result

        return wrapper

    return decorator


def clear_cache(cache_name: Optional[str] = None) -> None:
    """
    Clear cache contents.

    Args:
        cache_name: Specific cache to clear, or None to clear all
    """
    with _cache_lock:
        if cache_name:
            if cache_name in _caches:
                _caches[cache_name].clear()
        else:
            for cache in _caches.values():
                cache.clear()


def get_cache_stats(cache_name: str) -> dict:
    """
    Get cache statistics.

    Returns:
        Dict with cache statistics
    """
    with _cache_lock:
        if cache_name not in _caches:
            return {"exists": False}

        cache = _caches[cache_name]
        return {
            "exists": True,
            "size": len(cache),
            "maxsize": cache.maxsize,
            "ttl": cache.ttl,
        }
