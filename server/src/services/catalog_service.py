"""
Catalog resolver for wardrobe skins and dyes.

Fetches display metadata from the public GW2 API
(``/v2/skins?ids=...`` and ``/v2/colors?ids=...``, no API key needed) in
batches of at most ``CATALOG_BATCH_SIZE`` ids, with a per-endpoint TTL cache
owned by the resolver instance.

Failures are tolerated per chunk: a chunk whose request errors, times out
or returns an unexpected body contributes no records and is not cached,
while the other chunks still resolve. Unknown ids are simply absent from
the result.
"""

import asyncio
import time
from typing import Iterable, List, Optional, Sequence, Type, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from server.src.core.config import settings
from server.src.core.logging_config import get_logger
from server.src.core.metrics import metrics
from server.src.schemas.catalog import CatalogColor, CatalogSkin
from server.src.services.catalog_cache import Clock, TTLCache

logger = get_logger(__name__)

M = TypeVar("M", bound=BaseModel)

SKINS_ENDPOINT = "skins"
COLORS_ENDPOINT = "colors"


class PartialFetchFailure(Exception):
    """One batch chunk could not be fetched; its records are omitted."""

    def __init__(self, endpoint: str, ids: Sequence[int], reason: str):
        super().__init__(f"Catalog /{endpoint} chunk of {len(ids)} ids failed: {reason}")
        self.endpoint = endpoint
        self.ids = list(ids)
        self.reason = reason


def normalize_ids(ids: Iterable[int]) -> List[int]:
    """Deduplicate ids (first occurrence wins) and drop non-positive ones."""
    unique: List[int] = []
    seen = set()
    for raw in ids:
        if raw is None:
            continue
        catalog_id = int(raw)
        if catalog_id <= 0 or catalog_id in seen:
            continue
        seen.add(catalog_id)
        unique.append(catalog_id)
    return unique


def chunk_ids(ids: Sequence[int], size: int) -> List[List[int]]:
    """Split ids into consecutive chunks of at most size ids."""
    return [list(ids[i:i + size]) for i in range(0, len(ids), size)]


class CatalogResolver:
    """
    Batched, cached access to the skin and dye catalog.

    The resolver does not own the HTTP client; whoever creates the client
    (the application lifespan, or a test) closes it.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        base_url: Optional[str] = None,
        batch_size: Optional[int] = None,
        cache_ttl: Optional[float] = None,
        request_timeout: Optional[float] = None,
        clock: Clock = time.time,
    ):
        self._client = http_client
        self._base_url = (base_url or settings.GW2_API_BASE_URL).rstrip("/")
        self._batch_size = settings.CATALOG_BATCH_SIZE if batch_size is None else batch_size
        self._timeout = (
            settings.CATALOG_REQUEST_TIMEOUT if request_timeout is None else request_timeout
        )
        ttl = settings.CATALOG_CACHE_TTL if cache_ttl is None else cache_ttl

        if self._batch_size <= 0:
            raise ValueError("batch_size must be a positive integer.")
        if ttl <= 0:
            raise ValueError("cache_ttl must be positive (seconds).")
        if self._timeout <= 0:
            raise ValueError("request_timeout must be positive (seconds).")

        self.skin_cache: TTLCache[CatalogSkin] = TTLCache(
            ttl=ttl,
            fetch_fn=lambda chunk: self._fetch_chunk(SKINS_ENDPOINT, chunk, CatalogSkin),
            clock=clock,
            name=SKINS_ENDPOINT,
        )
        self.color_cache: TTLCache[CatalogColor] = TTLCache(
            ttl=ttl,
            fetch_fn=lambda chunk: self._fetch_chunk(COLORS_ENDPOINT, chunk, CatalogColor),
            clock=clock,
            name=COLORS_ENDPOINT,
        )

    async def fetch_skins(self, ids: Iterable[int]) -> List[CatalogSkin]:
        """Fetch skin metadata for ids; unknown or failed ids are absent."""
        return await self._fetch_all(SKINS_ENDPOINT, self.skin_cache, ids)

    async def fetch_colors(self, ids: Iterable[int]) -> List[CatalogColor]:
        """Fetch dye metadata for ids; unknown or failed ids are absent."""
        return await self._fetch_all(COLORS_ENDPOINT, self.color_cache, ids)

    async def _fetch_all(self, endpoint: str, cache: TTLCache, ids: Iterable[int]) -> list:
        unique = normalize_ids(ids)
        if not unique:
            return []

        chunks = chunk_ids(unique, self._batch_size)
        chunk_results = await asyncio.gather(
            *(self._resolve_chunk(endpoint, cache, chunk) for chunk in chunks)
        )

        records = []
        for chunk_records in chunk_results:
            records.extend(chunk_records)
        return records

    async def _resolve_chunk(self, endpoint: str, cache: TTLCache, chunk: List[int]) -> list:
        try:
            return await cache.get_or_fetch(chunk)
        except PartialFetchFailure as e:
            metrics.track_chunk_failure(endpoint, e.reason)
            logger.warning(
                "Catalog chunk failed, omitting its records",
                extra={"endpoint": endpoint, "id_count": len(chunk), "reason": e.reason},
            )
            return []

    async def _fetch_chunk(self, endpoint: str, chunk: Sequence[int], model: Type[M]) -> List[M]:
        """Request one chunk from the catalog and validate its records."""
        url = f"{self._base_url}/v2/{endpoint}"
        params = {"ids": ",".join(str(i) for i in chunk)}

        start_time = time.time()
        try:
            response = await self._client.get(url, params=params, timeout=self._timeout)
        except httpx.TimeoutException as e:
            metrics.track_catalog_request(endpoint, "timeout", time.time() - start_time)
            raise PartialFetchFailure(endpoint, chunk, "timeout") from e
        except httpx.HTTPError as e:
            metrics.track_catalog_request(endpoint, "error", time.time() - start_time)
            raise PartialFetchFailure(endpoint, chunk, "transport") from e
        except httpx.InvalidURL as e:
            # Not an HTTPError subclass; raised for a malformed GW2_API_BASE_URL
            metrics.track_catalog_request(endpoint, "error", time.time() - start_time)
            raise PartialFetchFailure(endpoint, chunk, "invalid_url") from e

        metrics.track_catalog_request(
            endpoint, str(response.status_code), time.time() - start_time
        )
        if not response.is_success:
            raise PartialFetchFailure(endpoint, chunk, f"http_{response.status_code}")

        try:
            body = response.json()
        except ValueError as e:
            raise PartialFetchFailure(endpoint, chunk, "invalid_json") from e
        if not isinstance(body, list):
            raise PartialFetchFailure(endpoint, chunk, "unexpected_body")

        records: List[M] = []
        for item in body:
            try:
                records.append(model.model_validate(item))
            except ValidationError as e:
                logger.warning(
                    "Dropping malformed catalog record",
                    extra={
                        "endpoint": endpoint,
                        "record_id": item.get("id") if isinstance(item, dict) else None,
                        "error": str(e),
                    },
                )

        logger.debug(
            "Catalog chunk fetched",
            extra={"endpoint": endpoint, "requested": len(chunk), "returned": len(records)},
        )
        return records
