"""
cachepool - Cache Pool Interface

Defines the capability set shared by CachePool, NamespacePool and ChainedPool:
get-or-compute, delete, presence check and clear.
"""

from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

from .envelope import Deserializer, Serializer
from .item import TTL

T = TypeVar("T")

# A plain value, or a zero-argument callable returning the value (optionally
# awaitable, optionally wrapped in a CacheResult to carry its own TTL).
ValueSource = Any | Callable[[], Any] | Callable[[], Awaitable[Any]]


class CachePoolInterface(ABC):
    """
    Abstract base class for cache pools.

    Pools provide a get-or-compute entry point so cached values never turn
    into a free-for-all global registry.
    """

    @abstractmethod
    async def get(
        self,
        key: str,
        value: ValueSource,
        ttl: TTL | None = None,
        serialize: Serializer | None = None,
        deserialize: Deserializer | None = None,
    ) -> Any:
        """
        Get the cached value for a key, computing and storing it on a miss.

        Args:
            key: Cache key
            value: The value itself, or a callable producing it
            ttl: A timedelta from now, or an absolute epoch timestamp / datetime
                (None = pool default)
            serialize: Optional envelope serializer (default JSON)
            deserialize: Optional envelope deserializer (default JSON)

        Returns:
            The cached value on a hit, the freshly computed value on a miss
        """
        pass

    @abstractmethod
    async def delete(self, key: str) -> None:
        """
        Delete the cached entry for a key. Absent keys are a no-op.

        Args:
            key: Cache key
        """
        pass

    @abstractmethod
    async def has(self, key: str) -> bool:
        """
        Check whether an entry is stored for a key.

        This does NOT check expiry; it only reports presence.

        Args:
            key: Cache key

        Returns:
            True if an entry is stored under the key
        """
        pass

    @abstractmethod
    async def clear(self) -> None:
        """Remove every entry owned by this pool."""
        pass

    async def get_stats(self) -> dict[str, Any]:
        """
        Get pool statistics.

        Returns:
            Dictionary with pool statistics (hits, misses, ...)
        """
        return {}

    async def close(self) -> None:
        """
        Release resources held by the pool.

        Default implementation does nothing.
        """
        return None
