"""
cachepool - Configuration Schemas

Typed configuration models using Pydantic for validation and type safety.
All configuration is read from environment variables by loader.py.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..errors import InvalidNamespaceError
from ..keys import validate_namespace


class StorageBackend(str, Enum):
    """Supported storage backends."""

    MEMORY = "memory"
    MAP = "map"
    FILESYSTEM = "filesystem"
    REDIS = "redis"  # Requires the redis client


class LogLevel(str, Enum):
    """Log levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class StorageConfig(BaseModel):
    """Storage backend configuration."""

    backend: StorageBackend = Field(default=StorageBackend.MEMORY, description="Storage backend to use")
    path: str | None = Field(default=None, description="Directory for the filesystem backend")

    # Redis-specific settings (only used when backend=redis)
    redis_url: str | None = Field(default=None, description="Redis connection URL")
    redis_prefix: str = Field(default="cachepool", description="Prefix for every Redis key")
    redis_socket_timeout: float = Field(default=5, gt=0, description="Redis socket timeout in seconds")

    @field_validator("path")
    @classmethod
    def validate_path(cls, v: str | None, info: Any) -> str | None:
        """Ensure path is provided when backend is filesystem."""
        backend = info.data.get("backend")
        if backend == StorageBackend.FILESYSTEM and not v:
            raise ValueError("path is required when storage backend is 'filesystem'")
        return v

    @field_validator("redis_url")
    @classmethod
    def validate_redis_url(cls, v: str | None, info: Any) -> str | None:
        """Ensure redis_url is provided when backend is redis."""
        backend = info.data.get("backend")
        if backend == StorageBackend.REDIS and not v:
            raise ValueError("redis_url is required when storage backend is 'redis'")
        return v


class PoolConfig(BaseModel):
    """Chained pool configuration."""

    storage: StorageConfig = Field(default_factory=StorageConfig)
    default_ttl_seconds: float | None = Field(
        default=None,
        description="Seconds from write time applied when get() receives no TTL (None = never expire)",
    )
    namespaces: list[str] = Field(
        default_factory=lambda: ["default"],
        min_length=1,
        description="Namespaces chained over the shared storage",
    )

    @field_validator("namespaces")
    @classmethod
    def validate_namespaces(cls, v: list[str]) -> list[str]:
        """Reject namespaces that cannot be routed."""
        for namespace in v:
            try:
                validate_namespace(namespace)
            except InvalidNamespaceError as e:
                raise ValueError(e.message) from e
        return v


class CachePoolSettings(BaseModel):
    """Root configuration for cachepool."""

    log_level: LogLevel = Field(default=LogLevel.INFO, description="Logging level")
    log_json: bool = Field(default=False, description="Emit JSON log lines instead of plain text")

    pool: PoolConfig = Field(default_factory=PoolConfig)

    model_config = ConfigDict(use_enum_values=True, validate_assignment=True)
