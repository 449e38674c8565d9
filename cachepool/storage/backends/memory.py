"""
cachepool - Memory Storage Backend

Ephemeral in-process store backed by an ordered list of entries.
Entries keep their insertion position when overwritten.
"""

import logging
from dataclasses import dataclass

from ..interface import StorageInterface

logger = logging.getLogger(__name__)


@dataclass
class StorageEntry:
    """A single key/value pair held by MemoryStorage."""

    key: str
    value: str


class MemoryStorage(StorageInterface):
    """
    In-memory storage backend.

    Lookups are a linear scan over the entry list, which keeps enumeration
    order identical to insertion order. Contents are lost with the process.
    """

    def __init__(self) -> None:
        self._entries: list[StorageEntry] = []

    def _find_index(self, key: str) -> int:
        for index, entry in enumerate(self._entries):
            if entry.key == key:
                return index
        return -1

    async def length(self) -> int:
        return len(self._entries)

    async def key(self, index: int) -> str | None:
        if 0 <= index < len(self._entries):
            return self._entries[index].key
        return None

    async def get_item(self, key: str) -> str | None:
        index = self._find_index(key)
        if index == -1:
            return None
        return self._entries[index].value

    async def set_item(self, key: str, value: str) -> None:
        index = self._find_index(key)
        if index == -1:
            self._entries.append(StorageEntry(key=key, value=value))
        else:
            self._entries[index].value = value

    async def remove_item(self, key: str) -> None:
        index = self._find_index(key)
        if index != -1:
            del self._entries[index]

    async def clear(self) -> None:
        size = len(self._entries)
        self._entries = []
        logger.debug(f"Cleared {size} entries from memory storage")

    async def keys(self) -> list[str]:
        return [entry.key for entry in self._entries]
