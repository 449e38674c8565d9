"""
Chained Pool Usage Example

Demonstrates the cachepool API end to end.

This example shows:
- Building a chained pool by hand over memory and filesystem storage
- Get-or-compute with relative, absolute and callback-chosen TTLs
- Namespace-scoped clearing
- Building pools from environment configuration
"""

import asyncio
import logging
import tempfile
from datetime import datetime, timedelta

from cachepool import (
    CacheResult,
    ChainedPool,
    FilesystemStorage,
    NamespacePool,
    UnknownNamespaceError,
    close_all_pools,
    create_pool,
)
from cachepool.config import get_config
from cachepool.observability import setup_logging

logger = logging.getLogger("cachepool.examples")


async def fetch_profile() -> dict[str, object]:
    """Pretend upstream call."""
    await asyncio.sleep(0.1)
    return {"first": "John", "last": "Smith", "age": 32}


async def fetch_rates() -> CacheResult[dict[str, float]]:
    """Upstream call that decides its own TTL."""
    await asyncio.sleep(0.1)
    return CacheResult({"EUR": 0.92, "GBP": 0.79}, ttl=timedelta(minutes=15))


async def example_manual_chain(directory: str) -> None:
    """Example: chain memory and filesystem namespaces."""
    logger.info("=" * 60)
    logger.info("Example 1: Chained pool over memory and filesystem")
    logger.info("=" * 60)

    cache = ChainedPool(
        NamespacePool("memory"),
        NamespacePool.from_storage("fs", FilesystemStorage(directory)),
    )

    profile = await cache.get("fs.jsmith", fetch_profile, ttl=timedelta(hours=1))
    logger.info(f"First read (miss): {profile}")

    profile = await cache.get("fs.jsmith", fetch_profile)
    logger.info(f"Second read (hit): {profile}")

    rates = await cache.get("memory.rates", fetch_rates)
    logger.info(f"Rates: {rates}")

    greeting = await cache.get("memory.greeting", "Hello, World!", ttl=datetime.now() + timedelta(days=1))
    logger.info(f"Greeting: {greeting}")

    try:
        await cache.get("missing.key", fetch_profile)
    except UnknownNamespaceError as e:
        logger.info(f"Unknown namespace rejected: {e.to_dict()}")

    await cache.get_pool("fs").clear()  # type: ignore[union-attr]
    logger.info(f"After clearing 'fs': has fs.jsmith = {await cache.has('fs.jsmith')}")

    logger.info(f"Stats: {await cache.get_stats()}")


async def example_from_config() -> None:
    """Example: pool built from CACHE_* environment variables."""
    logger.info("=" * 60)
    logger.info("Example 2: Pool from configuration")
    logger.info("=" * 60)

    settings = get_config()
    cache = create_pool(settings.pool)
    namespace = cache.namespaces[0]

    value = await cache.get(f"{namespace}.answer", lambda: 42)
    logger.info(f"{namespace}.answer = {value} (storage: {settings.pool.storage.backend})")

    await close_all_pools()


async def main() -> None:
    settings = get_config()
    setup_logging(settings.log_level, json_format=settings.log_json)

    with tempfile.TemporaryDirectory() as directory:
        await example_manual_chain(directory)

    await example_from_config()


if __name__ == "__main__":
    asyncio.run(main())
