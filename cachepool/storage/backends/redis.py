"""
cachepool - Redis Storage Backend

Host-provided persistent store on a Redis server, using the asyncio client.

- Every key is stored under "<prefix>:<key>" so several stores can share
  one Redis database.
- Values are stored as UTF-8 strings; pools put serialized envelopes here,
  so no Redis-side TTL is used.
- Enumeration is the sorted list of keys under the prefix (SCAN based).
- Connection and command errors propagate unchanged.

Requires: redis>=5.0 with asyncio support

Example:
    storage = RedisStorage(redis_url="redis://localhost:6379/0", prefix="cachepool")
    await storage.set_item("default.greeting", '{"version":1,"value":"hi"}')
"""

from __future__ import annotations

import logging

from ..interface import StorageInterface

logger = logging.getLogger(__name__)

try:
    # redis-py asyncio client (v4+)
    from redis.asyncio import Redis
except ImportError as e:  # pragma: no cover
    raise ImportError(
        "Redis async client is required but not installed. "
        "Install with: pip install 'redis>=5.0.0' or add 'redis' to your dependencies."
    ) from e


# Characters with meaning in a Redis MATCH glob
_GLOB_SPECIAL = frozenset("\\*?[]")


class RedisStorage(StorageInterface):
    """
    Redis storage backend.

    Notes:
    - Keys are prefixed with the configured prefix to avoid collisions.
    - clear() removes only keys under the prefix, never the whole database.
    - key(index) enumerates the full prefix on every call; it is O(n).
    """

    def __init__(
        self,
        redis_url: str,
        prefix: str = "cachepool",
        socket_timeout: float = 5,
        client: Redis | None = None,
    ) -> None:
        """
        Initialize Redis storage.

        Args:
            redis_url: Connection URL, e.g., redis://localhost:6379/0 or rediss:// for TLS
            prefix: Prefix for all keys (e.g., "cachepool")
            socket_timeout: Socket timeout in seconds
            client: Pre-built client (tests); redis_url is ignored when given
        """
        if not redis_url and client is None:
            raise ValueError("redis_url is required")

        self.prefix = prefix.strip() or "cachepool"

        # A caller-supplied client is closed by its owner
        self._owns_client = client is None

        # Lazy connection; connects on first command
        self._client: Redis = (
            client
            if client is not None
            else Redis.from_url(
                url=redis_url,
                decode_responses=True,
                socket_timeout=socket_timeout,
            )
        )

    # ------------ Helpers ------------

    def _make_key(self, key: str) -> str:
        """Create prefixed key."""
        return f"{self.prefix}:{key}"

    def _match_pattern(self) -> str:
        """SCAN pattern for every key under the prefix, glob characters in the prefix escaped."""
        escaped = "".join("\\" + ch if ch in _GLOB_SPECIAL else ch for ch in self.prefix)
        return f"{escaped}:*"

    def _strip_key(self, raw: str | bytes) -> str:
        if isinstance(raw, bytes):
            raw = raw.decode("utf-8")
        return raw[len(self.prefix) + 1 :]

    async def _scan(self) -> list[str]:
        pattern = self._match_pattern()
        names = [self._strip_key(raw) async for raw in self._client.scan_iter(match=pattern, count=1000)]
        return sorted(names)

    # ------------ Storage Interface ------------

    async def length(self) -> int:
        return len(await self._scan())

    async def key(self, index: int) -> str | None:
        names = await self._scan()
        if 0 <= index < len(names):
            return names[index]
        return None

    async def get_item(self, key: str) -> str | None:
        data = await self._client.get(self._make_key(key))
        if isinstance(data, bytes):
            return data.decode("utf-8")
        return data

    async def set_item(self, key: str, value: str) -> None:
        await self._client.set(self._make_key(key), value)

    async def remove_item(self, key: str) -> None:
        await self._client.delete(self._make_key(key))

    async def clear(self) -> None:
        """
        Remove every key under the prefix.

        Implementation: SCAN match "<escaped prefix>:*" and DEL in batches.
        """
        pattern = self._match_pattern()
        cursor = 0
        total_deleted = 0
        batch_size = 1000

        while True:
            cursor, keys = await self._client.scan(cursor=cursor, match=pattern, count=batch_size)
            if keys:
                total_deleted += await self._client.delete(*keys)
            if cursor == 0:
                break

        logger.info(f"Cleared {total_deleted} keys under prefix '{self.prefix}'", extra={"prefix": self.prefix})

    async def keys(self) -> list[str]:
        return await self._scan()

    async def close(self) -> None:
        """Close the Redis client and release its connection pool, unless it was supplied by the caller."""
        if not self._owns_client:
            return
        await self._client.aclose()
        logger.info(f"Closed Redis storage for prefix '{self.prefix}'", extra={"prefix": self.prefix})
