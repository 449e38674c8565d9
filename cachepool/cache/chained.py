"""
cachepool - Chained Pool

Routes compound keys ("<namespace>.<key>") to the NamespacePool registered
for that namespace.

    cache = ChainedPool(
        NamespacePool("memory"),
        NamespacePool.from_storage("fs", FilesystemStorage("/tmp/cache")),
    )

    info = await cache.get("fs.info", fetch_info)        # stored on disk
    name = await cache.get("memory.name", "Hello", ttl=timedelta(minutes=1))  # stored in memory

The registry is fixed at construction. Namespaces never contain "."; a
local key may, since keys are split on the first "." only.
"""

import logging
from typing import Any

from ..errors import UnknownNamespaceError
from ..keys import split_key
from .envelope import Deserializer, Serializer
from .interface import CachePoolInterface, ValueSource
from .item import TTL
from .namespace import NamespacePool

logger = logging.getLogger(__name__)


class ChainedPool(CachePoolInterface):
    """
    Composition of namespace pools addressed by compound keys.

    - get() on an unknown namespace raises UnknownNamespaceError
    - has() on an unknown namespace returns False
    - delete() on an unknown namespace does nothing
    - clear() clears every pool in registration order
    """

    def __init__(self, *pools: NamespacePool):
        self._pools: tuple[NamespacePool, ...] = tuple(pools)

        seen: set[str] = set()
        for pool in self._pools:
            if pool.namespace in seen:
                logger.warning(
                    f"Duplicate namespace '{pool.namespace}' in chained pool; first registration wins",
                    extra={"namespace": pool.namespace},
                )
            seen.add(pool.namespace)

    @property
    def pools(self) -> tuple[NamespacePool, ...]:
        return self._pools

    @property
    def namespaces(self) -> list[str]:
        return [pool.namespace for pool in self._pools]

    def get_pool(self, namespace: str) -> NamespacePool | None:
        """Find the first pool registered under `namespace`."""
        for pool in self._pools:
            if pool.namespace == namespace:
                return pool
        return None

    def _resolve(self, key: str) -> tuple[str, NamespacePool | None, str]:
        namespace, local_key = split_key(key)
        if local_key is None:
            return namespace, None, ""
        return namespace, self.get_pool(namespace), local_key

    async def get(
        self,
        key: str,
        value: ValueSource,
        ttl: TTL | None = None,
        serialize: Serializer | None = None,
        deserialize: Deserializer | None = None,
    ) -> Any:
        namespace, pool, local_key = self._resolve(key)
        if pool is None:
            logger.error(
                f"No cache pool registered for namespace '{namespace}'",
                extra={"key": key, "namespace": namespace, "registered": self.namespaces},
            )
            raise UnknownNamespaceError(namespace, key, details={"registered": self.namespaces})
        return await pool.get(local_key, value, ttl, serialize, deserialize)

    async def delete(self, key: str) -> None:
        _, pool, local_key = self._resolve(key)
        if pool is not None:
            await pool.delete(local_key)

    async def has(self, key: str) -> bool:
        _, pool, local_key = self._resolve(key)
        if pool is None:
            return False
        return await pool.has(local_key)

    async def clear(self) -> None:
        for pool in self._pools:
            await pool.clear()

    async def get_stats(self) -> dict[str, Any]:
        """Get statistics per registered namespace."""
        return {
            "namespaces": self.namespaces,
            "pools": {pool.namespace: await pool.get_stats() for pool in self._pools},
        }

    async def close(self) -> None:
        """Close every distinct storage behind the chain once."""
        closed: set[int] = set()
        for pool in self._pools:
            if id(pool.storage) in closed:
                continue
            closed.add(id(pool.storage))
            await pool.close()
