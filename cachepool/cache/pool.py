"""
cachepool - Cache Pool

Get-or-compute-and-persist against a single storage backend.

Each get() reads the stored envelope, decides hit or miss from its expiry,
and on a miss computes the value, writes a fresh envelope and returns it.
There is no locking around that read-check-compute-write sequence: two
concurrent misses on the same key both compute and the last write wins.

Usage:
    pool = CachePool(FilesystemStorage("/tmp/cache"))
    user = await pool.get("user:42", fetch_user, ttl=timedelta(minutes=10))
"""

import inspect
import logging
from typing import Any

from ..errors import EnvelopeDecodeError
from ..storage import MemoryStorage, StorageInterface
from .envelope import Deserializer, Serializer, decode_envelope, encode_envelope
from .interface import CachePoolInterface, ValueSource
from .item import TTL, CacheItem, resolve_expiry, unwrap_result

logger = logging.getLogger(__name__)


class CachePool(CachePoolInterface):
    """
    Default cache pool over one storage backend.

    Features:
    - Hit/miss decided from the envelope expiry
    - Malformed envelopes are treated as misses and overwritten
    - Compute callbacks may be sync or async
    - Storage failures propagate unchanged
    """

    def __init__(
        self,
        storage: StorageInterface | None = None,
        default_ttl: TTL | None = None,
    ):
        """
        Initialize cache pool.

        Args:
            storage: Storage backend (default: a new MemoryStorage)
            default_ttl: TTL applied when get() receives none, usually a timedelta
                (None = never expire)
        """
        self._storage = storage if storage is not None else MemoryStorage()
        self.default_ttl = default_ttl

        # Stats
        self._hits = 0
        self._misses = 0
        self._sets = 0
        self._deletes = 0
        self._decode_errors = 0

    @property
    def storage(self) -> StorageInterface:
        return self._storage

    async def _read(self, key: str, deserialize: Deserializer | None) -> CacheItem[Any] | None:
        """Read a usable (decodable, unexpired) item, None on a miss."""
        raw = await self._storage.get_item(key)
        if raw is None:
            return None

        try:
            item = decode_envelope(raw, deserialize)
        except EnvelopeDecodeError as e:
            self._decode_errors += 1
            logger.warning(
                f"Discarding malformed cache entry '{key}': {e.message}",
                extra={"key": key, **e.details},
            )
            return None

        if item.is_expired:
            logger.debug(f"Cache entry expired: {key}", extra={"key": key, "expiry": item.expiry})
            return None

        return item

    @staticmethod
    async def _compute(value: ValueSource) -> Any:
        if callable(value):
            value = value()
        if inspect.isawaitable(value):
            value = await value
        return value

    async def get(
        self,
        key: str,
        value: ValueSource,
        ttl: TTL | None = None,
        serialize: Serializer | None = None,
        deserialize: Deserializer | None = None,
    ) -> Any:
        """Return the cached value, or compute, store and return a fresh one."""
        item = await self._read(key, deserialize)
        if item is not None:
            self._hits += 1
            logger.debug(f"Cache hit: {key}", extra={"key": key})
            return item.value

        self._misses += 1
        logger.debug(f"Cache miss: {key}", extra={"key": key})

        fresh, has_own_ttl, own_ttl = unwrap_result(await self._compute(value))
        if has_own_ttl:
            ttl = own_ttl
        elif ttl is None:
            ttl = self.default_ttl

        item = CacheItem(value=fresh, expiry=resolve_expiry(ttl))
        await self._storage.set_item(key, encode_envelope(item, serialize))
        self._sets += 1

        return fresh

    async def delete(self, key: str) -> None:
        await self._storage.remove_item(key)
        self._deletes += 1

    async def has(self, key: str) -> bool:
        return await self._storage.get_item(key) is not None

    async def clear(self) -> None:
        await self._storage.clear()
        logger.info("Cleared cache pool storage", extra={"storage": type(self._storage).__name__})

    async def get_stats(self) -> dict[str, Any]:
        """Get pool statistics."""
        total_requests = self._hits + self._misses
        hit_rate = (self._hits / total_requests * 100) if total_requests > 0 else 0.0

        return {
            "storage": type(self._storage).__name__,
            "size": await self._storage.length(),
            "hits": self._hits,
            "misses": self._misses,
            "hit_rate": round(hit_rate, 2),
            "sets": self._sets,
            "deletes": self._deletes,
            "decode_errors": self._decode_errors,
        }

    async def close(self) -> None:
        """Close the underlying storage."""
        await self._storage.close()
        logger.debug("Cache pool closed", extra={"storage": type(self._storage).__name__})
