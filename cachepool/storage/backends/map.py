"""
cachepool - Map Storage Backend

Ephemeral in-process store backed by a dict. Fastest of the backends;
contents only persist for the lifetime of the process.
"""

import logging

from ..interface import StorageInterface

logger = logging.getLogger(__name__)


class MapStorage(StorageInterface):
    """In-memory storage backend using a dict (insertion-ordered)."""

    def __init__(self) -> None:
        self._storage: dict[str, str] = {}

    async def length(self) -> int:
        return len(self._storage)

    async def key(self, index: int) -> str | None:
        if 0 <= index < len(self._storage):
            return list(self._storage)[index]
        return None

    async def get_item(self, key: str) -> str | None:
        return self._storage.get(key)

    async def set_item(self, key: str, value: str) -> None:
        self._storage[key] = value

    async def remove_item(self, key: str) -> None:
        self._storage.pop(key, None)

    async def clear(self) -> None:
        size = len(self._storage)
        self._storage.clear()
        logger.debug(f"Cleared {size} entries from map storage")

    async def keys(self) -> list[str]:
        return list(self._storage)
