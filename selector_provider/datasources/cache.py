from __future__ import annotations

from typing import Callable, Any, Optional

from flask import Flask
from flask_caching import Cache

from ..config import Settings, get_settings


class CacheFacade:
    """Thin wrapper over Flask-Caching to make source caching injectable and optional.

    When no cache is provided, `memoize` is a no-op and returns the wrapped function.
    """

    def __init__(self, cache: Optional[Cache], timeout_seconds: int) -> None:
        self.cache = cache
        self.timeout_seconds = timeout_seconds

    def memoize(self, fn: Callable[..., Any]) -> Callable[..., Any]:
        if self.cache is None:
            return fn
        return self.cache.memoize(timeout=self.timeout_seconds)(fn)

    def clear(self) -> None:
        if self.cache is not None:
            self.cache.clear()


def create_cache(settings: Optional[Settings] = None, server: Optional[Flask] = None) -> Cache:
    """Build a Flask-Caching Cache from settings, hosted on `server` or a bare Flask app."""
    settings = settings or get_settings()
    server = server or Flask(__name__)
    return Cache(server, config={
        "CACHE_TYPE": settings.cache_type,
        "CACHE_DEFAULT_TIMEOUT": settings.cache_timeout_seconds,
        **({"CACHE_REDIS_URL": settings.redis_url} if settings.cache_type == "RedisCache" else {})
    })
