"""
cachepool - Pool Factory

Canonical factory for building chained pools from configuration.

Key points:
- One shared storage per pool instance, one NamespacePool per configured
  namespace, chained together
- Storage selected with CACHE_STORAGE=memory|map|filesystem|redis
  - Defaults to redis when REDIS_URL is set, filesystem when CACHE_PATH is
    set, memory otherwise
- All configuration is typed and validated via Pydantic models

Examples:
    from cachepool.cache.factory import create_pool, get_pool

    # Uses env-configured storage (memory by default)
    cache = create_pool()
    user = await cache.get("default.user:42", fetch_user, ttl=timedelta(minutes=10))

    # Or explicitly supply a PoolConfig (e.g., for tests)
    from cachepool.config import PoolConfig, StorageBackend, StorageConfig
    cfg = PoolConfig(
        storage=StorageConfig(backend=StorageBackend.FILESYSTEM, path="/tmp/cache"),
        namespaces=["default", "users"],
    )
    fs_cache = create_pool(cfg, name="fs")
"""

from __future__ import annotations

import logging
from datetime import timedelta

from ..config import PoolConfig, StorageBackend, StorageConfig, get_config
from ..errors import ConfigurationError
from ..storage import FilesystemStorage, MapStorage, MemoryStorage, StorageInterface
from .chained import ChainedPool
from .namespace import NamespacePool
from .pool import CachePool

logger = logging.getLogger(__name__)

# Global pool instances registry
_pool_instances: dict[str, ChainedPool] = {}


def _create_redis_storage(config: StorageConfig) -> StorageInterface:
    """Internal helper to construct a redis storage backend with lazy import."""
    if not config.redis_url:
        raise ConfigurationError(
            "REDIS_URL must be set when CACHE_STORAGE=redis",
            details={"env": "REDIS_URL", "backend": "redis"},
        )

    # Lazy import to avoid hard dependency when a local backend is used
    try:
        from ..storage.backends.redis import RedisStorage
    except ImportError as e:
        logger.error(
            "Redis storage selected but redis client is not installed",
            extra={"package": "redis>=5.0.0", "error": str(e)},
        )
        raise ConfigurationError(
            "Redis storage selected but redis client is unavailable. Install with: pip install 'redis>=5.0.0'",
            details={"package": "redis>=5.0.0", "error": str(e), "backend": "redis"},
        ) from e

    return RedisStorage(
        redis_url=config.redis_url,
        prefix=config.redis_prefix,
        socket_timeout=config.redis_socket_timeout,
    )


def create_storage(config: StorageConfig) -> StorageInterface:
    """
    Create a storage backend from configuration.

    Raises:
        ConfigurationError: If the backend is unknown or misconfigured
    """
    if config.backend == StorageBackend.MEMORY:
        return MemoryStorage()
    if config.backend == StorageBackend.MAP:
        return MapStorage()
    if config.backend == StorageBackend.FILESYSTEM:
        if not config.path:
            raise ConfigurationError(
                "CACHE_PATH must be set when CACHE_STORAGE=filesystem",
                details={"env": "CACHE_PATH", "backend": "filesystem"},
            )
        return FilesystemStorage(config.path)
    if config.backend == StorageBackend.REDIS:
        return _create_redis_storage(config)

    raise ConfigurationError(
        f"Unknown storage backend: {config.backend}",
        details={
            "backend": str(config.backend),
            "supported": [backend.value for backend in StorageBackend],
        },
    )


def create_pool(
    config: PoolConfig | None = None,
    name: str = "default",
) -> ChainedPool:
    """
    Create a chained pool based on configuration.

    Args:
        config: Pool configuration (uses global config if not provided)
        name: Instance name (for multiple pool instances)

    Returns:
        ChainedPool with one NamespacePool per configured namespace

    Raises:
        ConfigurationError: If configuration is invalid or the backend unavailable
    """
    # Return existing instance if already created
    if name in _pool_instances:
        logger.debug("Returning existing pool instance: %s", name)
        return _pool_instances[name]

    if config is None:
        config = get_config().pool

    logger.info(
        "Creating pool instance '%s' with storage: %s",
        name,
        config.storage.backend,
        extra={"pool_name": name, "backend": str(config.storage.backend), "namespaces": config.namespaces},
    )

    default_ttl = None
    if config.default_ttl_seconds is not None:
        default_ttl = timedelta(seconds=config.default_ttl_seconds)

    storage = create_storage(config.storage)
    pool = ChainedPool(
        *(
            NamespacePool(namespace, CachePool(storage, default_ttl=default_ttl))
            for namespace in config.namespaces
        )
    )

    _pool_instances[name] = pool
    return pool


def get_pool(name: str = "default") -> ChainedPool:
    """
    Get an existing pool instance by name.

    If the instance doesn't exist, it is created from the global configuration.
    """
    if name not in _pool_instances:
        logger.debug("Pool instance '%s' not found, creating new instance", name)
        return create_pool(name=name)

    return _pool_instances[name]


async def close_all_pools() -> None:
    """
    Close all pool instances and release storage resources.

    Should be called during graceful shutdown.
    """
    if not _pool_instances:
        logger.debug("No pool instances to close")
        return

    logger.info("Closing %d pool instance(s)...", len(_pool_instances))

    try:
        for name, pool in list(_pool_instances.items()):
            await pool.close()
            logger.info("Closed pool instance: %s", name)
    finally:
        _pool_instances.clear()


def reset_pool_factory() -> None:
    """
    Reset the factory by clearing all instance references.

    Does NOT call close() on instances - use close_all_pools() for proper cleanup.

    Warning: Only use this in testing contexts.
    """
    count = len(_pool_instances)
    _pool_instances.clear()
    logger.debug("Reset pool factory, cleared %d instance reference(s)", count)


def list_pool_instances() -> list[str]:
    """List all registered pool instance names."""
    return list(_pool_instances.keys())
