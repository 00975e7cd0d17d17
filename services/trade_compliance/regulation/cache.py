"""
Regulation Text Cache
=====================

Process-wide, time-bounded cache for the regulation document.

The cache is refreshed lazily by whichever request finds it stale.
There is no lock: two concurrent refreshes both fetch and the later
write wins, which only costs a duplicate download.

Version: 0.1.0
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

from shared.logging import get_logger


logger = get_logger(__name__)

DEFAULT_MAX_AGE = timedelta(hours=24)


def utc_now() -> datetime:
    return datetime.now(UTC)


@dataclass(frozen=True)
class RegulationCacheEntry:
    """A fetched copy of the document."""

    content: str
    timestamp: datetime


class RegulationCache:
    """
    Holds one cached copy of the regulation text.

    Example:
        >>> cache = RegulationCache(fetcher.fetch)
        >>> text = await cache.get()
    """

    def __init__(
        self,
        fetch: Callable[[], Awaitable[str]],
        clock: Callable[[], datetime] = utc_now,
        max_age: timedelta = DEFAULT_MAX_AGE,
    ) -> None:
        self._fetch = fetch
        self._clock = clock
        self.max_age = max_age
        self._entry: RegulationCacheEntry | None = None

    @property
    def entry(self) -> RegulationCacheEntry | None:
        """Current cached copy, if any."""
        return self._entry

    def age(self) -> timedelta | None:
        """Age of the cached copy, or None when nothing is cached."""
        if self._entry is None:
            return None
        return self._clock() - self._entry.timestamp

    def is_fresh(self) -> bool:
        """Check if a cached copy exists and is younger than `max_age`."""
        age = self.age()
        return age is not None and age < self.max_age

    async def get(self) -> str:
        """
        Return the document text, fetching it if missing or stale.

        A failed fetch propagates and leaves the existing entry untouched.
        """
        if self.is_fresh() and self._entry is not None:
            logger.debug("regulation_cache_hit", fetched_at=self._entry.timestamp.isoformat())
            return self._entry.content

        logger.info("regulation_cache_refresh", cached=self._entry is not None)
        try:
            content = await self._fetch()
        except Exception as e:
            logger.error("regulation_fetch_failed", error=str(e))
            raise

        self._entry = RegulationCacheEntry(content=content, timestamp=self._clock())
        return content
