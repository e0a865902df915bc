"""
Disk cache for backend responses.

Reflex may run several backend workers, so cached responses live in a
diskcache directory they all share. Entries carry a tag naming the
listing they belong to, which lets a write drop every cached page of that
listing at once.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable

import diskcache

from rwa_ui.lib import logs, objects

LOG = logs.logger(__file__)


@dataclass(slots=True)
class CacheEntry:
    """
    A value returned by ``DiskCache.get_or_load``.

    Attributes:
        value: The cached or freshly loaded value.
        hit: True when the value came from disk.
    """

    value: Any
    hit: bool = False


class DiskCache:
    """
    Tagged, expiring cache over ``diskcache.Cache``.

    Attributes:
        cache_dir: Directory holding the cache files.
    """

    def __init__(self, cache_dir: str | Path) -> None:
        self.cache_dir = Path(cache_dir)
        self._cache = diskcache.Cache(str(self.cache_dir))

    @staticmethod
    def key(*parts: Any) -> str:
        """Build a cache key from request parts such as URL, path and params."""
        return objects.digest(*parts)

    def get_or_load(
        self,
        key: str,
        loader: Callable[[], Any],
        expire: int | None = None,
        tag: str | None = None,
    ) -> CacheEntry:
        """
        Return the cached value for ``key`` or store what ``loader`` returns.

        Args:
            key: Cache key.
            loader: Called without arguments on a miss.
            expire: TTL in seconds. None keeps the entry until evicted, 0
                skips the cache.
            tag: Group name used by ``evict``.
        """
        if expire == 0:
            return CacheEntry(value=loader())
        cached = self._cache.get(key, default=None)
        if cached is not None:
            return CacheEntry(value=cached, hit=True)
        value = loader()
        if value is not None:
            self._cache.set(key, value, expire=expire, tag=tag)
        return CacheEntry(value=value)

    def evict(self, tag: str) -> int:
        """Drop every entry stored under ``tag`` and return how many were removed."""
        removed = self._cache.evict(tag)
        if removed:
            LOG.debug("Evicted %s cached entries tagged %s", removed, tag)
        return removed

    def delete(self, key: str) -> None:
        self._cache.delete(key)

    def clear(self) -> None:
        self._cache.clear()

    def close(self) -> None:
        self._cache.close()
