"""
cachepool - Cache Module

Get-or-compute cache pools over pluggable key/value storage.

- item.py: CacheItem (value + expiry) and CacheResult
- envelope.py: Versioned JSON envelope persisted into storage
- pool.py: CachePool over one storage
- namespace.py: NamespacePool, key-prefixing decorator over a CachePool
- chained.py: ChainedPool, routes "<namespace>.<key>" to a NamespacePool
- factory.py: Builds chained pools from configuration

Usage:
    from cachepool.cache import ChainedPool, NamespacePool

    cache = ChainedPool(NamespacePool("default"), NamespacePool("users"))
    value = await cache.get("users.42", fetch_user, ttl=timedelta(hours=1))
"""

from .chained import ChainedPool
from .envelope import ENVELOPE_VERSION, decode_envelope, encode_envelope
from .factory import (
    close_all_pools,
    create_pool,
    create_storage,
    get_pool,
    list_pool_instances,
    reset_pool_factory,
)
from .interface import CachePoolInterface
from .item import CacheItem, CacheResult
from .namespace import NamespacePool
from .pool import CachePool

__all__ = [
    # Pools
    "CachePoolInterface",
    "CachePool",
    "NamespacePool",
    "ChainedPool",
    # Items and envelopes
    "CacheItem",
    "CacheResult",
    "ENVELOPE_VERSION",
    "encode_envelope",
    "decode_envelope",
    # Factory functions
    "create_pool",
    "create_storage",
    "get_pool",
    "close_all_pools",
    "list_pool_instances",
    "reset_pool_factory",
]
