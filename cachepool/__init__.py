"""
cachepool - get-or-compute cache pools over key/value storage

Values are computed on a miss, persisted as a versioned JSON envelope with
an optional expiry, and served from storage until they expire. Namespace
pools share one store without key collisions; a chained pool routes
"<namespace>.<key>" compound keys to the right namespace.

Usage:
    from cachepool import ChainedPool, FilesystemStorage, NamespacePool

    cache = ChainedPool(
        NamespacePool("memory"),
        NamespacePool.from_storage("fs", FilesystemStorage("/tmp/cache")),
    )
    info = await cache.get("fs.info", fetch_info, ttl=timedelta(hours=1))
"""

from .cache import (
    CacheItem,
    CachePool,
    CachePoolInterface,
    CacheResult,
    ChainedPool,
    NamespacePool,
    close_all_pools,
    create_pool,
    get_pool,
)
from .errors import (
    CachePoolError,
    ConfigurationError,
    EnvelopeDecodeError,
    InvalidKeyError,
    InvalidNamespaceError,
    UnknownNamespaceError,
)
from .storage import FilesystemStorage, MapStorage, MemoryStorage, StorageInterface

__version__ = "1.0.0"

__all__ = [
    # Pools
    "CachePoolInterface",
    "CachePool",
    "NamespacePool",
    "ChainedPool",
    "CacheItem",
    "CacheResult",
    # Factory
    "create_pool",
    "get_pool",
    "close_all_pools",
    # Storage
    "StorageInterface",
    "MemoryStorage",
    "MapStorage",
    "FilesystemStorage",
    # Errors
    "CachePoolError",
    "ConfigurationError",
    "UnknownNamespaceError",
    "InvalidNamespaceError",
    "InvalidKeyError",
    "EnvelopeDecodeError",
]
