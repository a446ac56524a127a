"""
In-memory TTL cache for catalog batch responses.

One entry per fetched chunk, keyed by the chunk's exact ordered id list
("1,2,3"). Entries are only written after a fetch has completed, as a
single dict assignment, so concurrent requests can at worst fetch the same
chunk twice; they never observe a half-written entry. Expiry is lazy (checked
on read) and the cache is unbounded for the lifetime of the process.
"""

import time
from dataclasses import dataclass
from typing import Awaitable, Callable, Dict, Generic, List, Optional, Sequence, TypeVar

from server.src.core.logging_config import get_logger
from server.src.core.metrics import metrics

logger = get_logger(__name__)

R = TypeVar("R")

FetchFn = Callable[[Sequence[int]], Awaitable[List[R]]]
Clock = Callable[[], float]


@dataclass(frozen=True)
class CacheEntry(Generic[R]):
    records: List[R]
    expires_at: float


def make_cache_key(ids: Sequence[int]) -> str:
    """Cache key of one chunk: ids joined in request order."""
    return ",".join(str(i) for i in ids)


class TTLCache(Generic[R]):
    """
    Read-through cache in front of a batch fetch function.

    Args:
        ttl: Seconds a fetched chunk stays fresh
        fetch_fn: Coroutine fetching the records of one chunk of ids; any
            exception it raises propagates and nothing is cached
        clock: Returns the current time in seconds (injectable for tests)
        name: Label used in logs and metrics
    """

    def __init__(
        self,
        ttl: float,
        fetch_fn: FetchFn,
        clock: Clock = time.time,
        name: str = "catalog",
    ):
        self._ttl = ttl
        self._fetch_fn = fetch_fn
        self._clock = clock
        self._name = name
        self._entries: Dict[str, CacheEntry[R]] = {}

    def get(self, key: str) -> Optional[List[R]]:
        """Return the records cached under key, or None if missing or expired."""
        entry = self._entries.get(key)
        if entry is None or self._clock() >= entry.expires_at:
            return None
        return entry.records

    def set(self, key: str, records: List[R]) -> None:
        self._entries[key] = CacheEntry(
            records=list(records), expires_at=self._clock() + self._ttl
        )

    async def get_or_fetch(self, ids: Sequence[int]) -> List[R]:
        """
        Return the records of one chunk, fetching them on a miss.

        Raises:
            Whatever fetch_fn raises; failed fetches are not cached
        """
        key = make_cache_key(ids)
        cached = self.get(key)
        metrics.track_cache_lookup(self._name, hit=cached is not None)
        if cached is not None:
            logger.debug(
                "Catalog cache hit",
                extra={"cache": self._name, "id_count": len(ids)},
            )
            return cached

        records = await self._fetch_fn(ids)
        self.set(key, records)
        return records

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: str) -> bool:
        return self.get(key) is not None
