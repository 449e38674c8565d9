"""
cachepool - Configuration Module

Provides typed configuration loading and validation.
"""

from .loader import get_config, load_config, reload_config
from .schemas import (
    CachePoolSettings,
    LogLevel,
    PoolConfig,
    StorageBackend,
    StorageConfig,
)

__all__ = [
    # Loader functions
    "load_config",
    "get_config",
    "reload_config",
    # Main config
    "CachePoolSettings",
    # Enums
    "StorageBackend",
    "LogLevel",
    # Config sections
    "PoolConfig",
    "StorageConfig",
]
