"""
cachepool - Configuration Loader

Loads and validates configuration from environment variables and .env files.
Provides a singleton configuration instance for the runtime.
"""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import ValidationError

from ..errors import ConfigurationError
from .schemas import CachePoolSettings

logger = logging.getLogger(__name__)

_config_instance: CachePoolSettings | None = None


def _optional_float(name: str) -> float | None:
    raw = os.getenv(name, "").strip()
    return float(raw) if raw else None


def load_config(
    env_file: str | None = None,
    reload: bool = False,
) -> CachePoolSettings:
    """
    Load configuration from environment variables and .env file.

    Args:
        env_file: Path to .env file (default: .env in working directory)
        reload: Force reload even if config already loaded

    Returns:
        Validated CachePoolSettings instance

    Raises:
        ConfigurationError: If configuration is invalid
    """
    global _config_instance

    if _config_instance is not None and not reload:
        return _config_instance

    # Load .env file if exists
    if env_file:
        env_path = Path(env_file)
    else:
        env_path = Path.cwd() / ".env"

    if env_path.exists():
        logger.info(f"Loading environment from {env_path}")
        try:
            load_dotenv(env_path, override=True)
        except Exception as e:
            logger.error(
                f"Failed to load .env file from {env_path}: {e}",
                extra={"path": str(env_path), "error": str(e)},
                exc_info=True,
            )
            raise ConfigurationError(
                f"Failed to load environment file: {e}",
                details={"path": str(env_path), "error": str(e)},
            ) from e
    else:
        logger.debug("No .env file found, using environment variables only")

    # Auto-detect storage backend: Redis if REDIS_URL is set, filesystem if CACHE_PATH is set, else memory
    redis_url = os.getenv("REDIS_URL")
    cache_path = os.getenv("CACHE_PATH")
    storage_backend = "redis" if redis_url else "filesystem" if cache_path else "memory"

    try:
        config_dict = {
            "log_level": os.getenv("LOG_LEVEL", "INFO").upper(),
            "log_json": os.getenv("LOG_JSON", "false").lower() == "true",
            "pool": {
                "storage": {
                    "backend": os.getenv("CACHE_STORAGE", storage_backend),
                    "path": cache_path,
                    "redis_url": redis_url,
                    "redis_prefix": os.getenv("REDIS_PREFIX", "cachepool"),
                    "redis_socket_timeout": float(os.getenv("REDIS_SOCKET_TIMEOUT", "5")),
                },
                "default_ttl_seconds": _optional_float("CACHE_DEFAULT_TTL"),
                "namespaces": [
                    ns.strip() for ns in os.getenv("CACHE_NAMESPACES", "default").split(",") if ns.strip()
                ],
            },
        }
        _config_instance = CachePoolSettings(**config_dict)  # type: ignore[arg-type]
        logger.info(
            f"Configuration loaded successfully (storage: {_config_instance.pool.storage.backend})",
            extra={
                "storage_backend": _config_instance.pool.storage.backend,
            },
        )
        return _config_instance
    except ValidationError as e:
        logger.error(
            f"Configuration validation failed: {e}",
            extra={"validation_errors": e.errors()},
            exc_info=True,
        )
        raise ConfigurationError(
            "Configuration validation failed. Check your environment variables and configuration.",
            details={"validation_errors": e.errors()},
        ) from e
    except ValueError as e:
        logger.error(
            f"Invalid numeric configuration value: {e}",
            extra={"error": str(e)},
            exc_info=True,
        )
        raise ConfigurationError(
            f"Failed to load configuration: {e}",
            details={"error": str(e)},
        ) from e


def get_config() -> CachePoolSettings:
    """
    Get the current configuration instance.

    Loads it from the environment on first access.
    """
    if _config_instance is None:
        return load_config()

    return _config_instance


def reload_config(env_file: str | None = None) -> CachePoolSettings:
    """
    Force reload configuration.

    Args:
        env_file: Optional path to .env file

    Returns:
        Reloaded CachePoolSettings instance
    """
    return load_config(env_file=env_file, reload=True)
