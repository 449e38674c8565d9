"""
cachepool - Namespace Pool

Wraps a CachePool and prefixes every key with "<namespace>." so several
logical caches can share one physical store.

    pool = NamespacePool("default")
    value = await pool.get("my-item", fetch_item, ttl=timedelta(days=1))

The entry above lives in the store under "default.my-item".
"""

import logging
from typing import Any

from ..keys import NAMESPACE_SEPARATOR, join_key, validate_namespace
from ..storage import StorageInterface
from .envelope import Deserializer, Serializer
from .interface import CachePoolInterface, ValueSource
from .item import TTL
from .pool import CachePool

logger = logging.getLogger(__name__)


class NamespacePool(CachePoolInterface):
    """
    Cache pool scoped to one namespace of a shared store.

    Delegates to a CachePool after rewriting keys; clear() only removes
    entries under this namespace.
    """

    def __init__(self, namespace: str, pool: CachePool | None = None):
        """
        Initialize namespace pool.

        Args:
            namespace: Key prefix (non-empty, no '.')
            pool: Delegate pool (default: a CachePool over a new MemoryStorage)
        """
        self._namespace = validate_namespace(namespace)
        self._pool = pool if pool is not None else CachePool()
        self._prefix = f"{self._namespace}{NAMESPACE_SEPARATOR}"

    @classmethod
    def from_storage(
        cls,
        namespace: str,
        storage: StorageInterface,
        default_ttl: TTL | None = None,
    ) -> "NamespacePool":
        """Build a namespace pool over its own CachePool on `storage`."""
        return cls(namespace, CachePool(storage, default_ttl=default_ttl))

    @property
    def namespace(self) -> str:
        return self._namespace

    @property
    def pool(self) -> CachePool:
        return self._pool

    @property
    def storage(self) -> StorageInterface:
        return self._pool.storage

    def _make_key(self, key: str) -> str:
        """Create namespaced key."""
        return join_key(self._namespace, key)

    async def get(
        self,
        key: str,
        value: ValueSource,
        ttl: TTL | None = None,
        serialize: Serializer | None = None,
        deserialize: Deserializer | None = None,
    ) -> Any:
        return await self._pool.get(self._make_key(key), value, ttl, serialize, deserialize)

    async def delete(self, key: str) -> None:
        await self._pool.delete(self._make_key(key))

    async def has(self, key: str) -> bool:
        return await self._pool.has(self._make_key(key))

    async def clear(self) -> None:
        """Remove every stored key starting with "<namespace>."."""
        storage = self._pool.storage
        # Collect first: removing while walking indexes would skip entries.
        keys = [key for key in await storage.keys() if key.startswith(self._prefix)]
        for key in keys:
            await storage.remove_item(key)

        logger.info(
            f"Cleared {len(keys)} entries from namespace '{self._namespace}'",
            extra={"namespace": self._namespace, "removed": len(keys)},
        )

    async def get_stats(self) -> dict[str, Any]:
        stats = await self._pool.get_stats()
        stats["namespace"] = self._namespace
        return stats

    async def close(self) -> None:
        await self._pool.close()

    def __repr__(self) -> str:
        return f"NamespacePool(namespace={self._namespace!r}, storage={type(self.storage).__name__})"
