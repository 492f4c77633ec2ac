"""Time-windowed, single-flight in-memory cache for the blog list.

Note: Each uvicorn worker has its own cache instance. With --workers 2,
data may be fetched twice per window (once per worker). This is acceptable
for this project's scale.

Staleness is purely time-driven. A failed refresh is never papered over
with stale data: the error reaches every caller waiting on that refresh,
and the next call after it retries.
"""

import asyncio
import logging
import time
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Sequence

from config import settings
from services.blog_api import fetch_blogs

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CacheEntry:
    data: tuple[dict, ...]
    fetched_at: float


class BlogCache:
    def __init__(
        self,
        fetch: Callable[[], Awaitable[Sequence[dict]]],
        ttl_seconds: float = 3600,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._fetch = fetch
        self._ttl = ttl_seconds
        self._clock = clock
        self._entry: CacheEntry | None = None
        self._pending: asyncio.Future | None = None

    @property
    def ttl_seconds(self) -> float:
        return self._ttl

    def _is_fresh(self, entry: CacheEntry | None) -> bool:
        return entry is not None and self._clock() - entry.fetched_at < self._ttl

    async def get(self) -> tuple[dict, ...]:
        """Return cached blogs, refreshing first if missing or stale.

        Raises:
            UpstreamError: the refresh this call waited on failed.
        """
        if self._is_fresh(self._entry):
            return self._entry.data

        # No await between the check and the set, so only one caller
        # per event loop can start a refresh.
        if self._pending is None:
            self._pending = asyncio.ensure_future(self._refresh())
        else:
            logger.debug("Joining in-flight blog refresh")

        # A cancelled caller must not cancel the refresh other callers share.
        return await asyncio.shield(self._pending)

    async def _refresh(self) -> tuple[dict, ...]:
        logger.info("Blog cache %s, refreshing from upstream", "stale" if self._entry else "empty")
        try:
            data = tuple(await self._fetch())
            self._entry = CacheEntry(data=data, fetched_at=self._clock())
            return data
        finally:
            self._pending = None

    def status(self) -> dict[str, Any]:
        """Snapshot for health reporting. Never triggers a fetch."""
        entry = self._entry
        age = round(self._clock() - entry.fetched_at, 1) if entry else None
        return {
            "cached": entry is not None,
            "blog_count": len(entry.data) if entry else 0,
            "age_seconds": age,
            "stale": not self._is_fresh(entry),
            "refreshing": self._pending is not None,
            "ttl_seconds": self._ttl,
        }

    def clear(self) -> None:
        self._entry = None


blog_cache = BlogCache(fetch_blogs, ttl_seconds=settings.blog_cache_seconds)


def get_blog_cache() -> BlogCache:
    """FastAPI dependency returning the process-wide blog cache."""
    return blog_cache
