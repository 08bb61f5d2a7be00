"""
In-memory TTL cache for rendered badges.

The cache is an explicitly constructed object owned by whoever builds the
BadgeGenerator (normally the API module at startup), rather than a global.

Usage:
    cache = BadgeCache(ttl=604800)

    svg = cache.get('sodium')
    if svg is None:
        svg = render(...)
        cache.set('sodium', svg)
"""

import logging
import threading
import time
from typing import Callable, Optional

from cachetools import TTLCache

from lib.config import BADGE_CACHE_MAXSIZE, BADGE_CACHE_TTL, CACHE_KEY_PREFIX

logger = logging.getLogger(__name__)


def default_cache_key(slug: str) -> str:
    """Derive the cache key for a project slug."""
    return f"{CACHE_KEY_PREFIX}{slug}"


class BadgeCache:
    """
    Thread-safe slug -> SVG cache with a fixed time-to-live.

    Entries expire independently, TTL counted from the moment they were set.
    Reads never extend an entry's lifetime. cachetools is not thread-safe on
    its own, so every access goes through a lock.
    """

    def __init__(
        self,
        ttl: float = BADGE_CACHE_TTL,
        maxsize: float = BADGE_CACHE_MAXSIZE,
        key_func: Callable[[str], str] = default_cache_key,
        timer: Callable[[], float] = time.monotonic,
    ):
        """
        Initialize the cache.

        Args:
            ttl: Seconds an entry stays valid after it is stored
            maxsize: Optional cap on stored entries, least recently used evicted
                first. Unbounded by default
            key_func: Maps a project slug to its cache key
            timer: Clock used for expiry, injectable for tests
        """
        self.ttl = ttl
        self.key_func = key_func
        self._cache = TTLCache(maxsize=maxsize, ttl=ttl, timer=timer)
        self._lock = threading.Lock()

    def get(self, slug: str) -> Optional[str]:
        """Return the cached SVG for a slug, or None if absent, empty or expired."""
        key = self.key_func(slug)
        with self._lock:
            svg = self._cache.get(key)
        if not svg:
            return None
        return svg

    def set(self, slug: str, svg: str) -> None:
        """Store a rendered SVG, replacing any previous entry wholesale."""
        key = self.key_func(slug)
        with self._lock:
            self._cache[key] = svg
        logger.debug(f"Cached badge under '{key}' for {self.ttl}s")

    def clear(self) -> None:
        with self._lock:
            self._cache.clear()

    def __len__(self) -> int:
        with self._lock:
            self._cache.expire()
            return len(self._cache)

    def __contains__(self, slug: str) -> bool:
        return self.get(slug) is not None
