"""
cachepool - Storage Interface

Defines the key/value store contract every storage backend must implement.
Keys and values are strings; pools only ever store serialized envelopes.
"""

from abc import ABC, abstractmethod


class StorageInterface(ABC):
    """
    Abstract base class for storage backends.

    Mirrors the web Storage API: a length, indexed key enumeration,
    get/set/remove by key, and clear. Enumeration order is backend-defined
    but stable between calls when the store is not mutated.
    """

    @abstractmethod
    async def length(self) -> int:
        """
        Count stored entries.

        Returns:
            Number of entries currently held by the store
        """
        pass

    @abstractmethod
    async def key(self, index: int) -> str | None:
        """
        Get the key at an enumeration position.

        Args:
            index: Zero-based enumeration position

        Returns:
            The key at that position, None if the index is out of range
        """
        pass

    @abstractmethod
    async def get_item(self, key: str) -> str | None:
        """
        Read the value stored under a key.

        Args:
            key: Storage key

        Returns:
            Stored string, None if the key is absent
        """
        pass

    @abstractmethod
    async def set_item(self, key: str, value: str) -> None:
        """
        Store a string under a key, replacing any previous value.

        Args:
            key: Storage key
            value: String to store
        """
        pass

    @abstractmethod
    async def remove_item(self, key: str) -> None:
        """
        Remove a key. Removing an absent key is a no-op.

        Args:
            key: Storage key
        """
        pass

    @abstractmethod
    async def clear(self) -> None:
        """Remove every entry from the store."""
        pass

    async def keys(self) -> list[str]:
        """
        Enumerate every key in the store.

        Default implementation walks key(0..length-1).
        Backends can override for better performance.

        Returns:
            List of keys in enumeration order
        """
        result = []
        for index in range(await self.length()):
            key = await self.key(index)
            if key is not None:
                result.append(key)
        return result

    async def close(self) -> None:
        """
        Release any resources held by the backend.

        Default implementation does nothing.
        """
        return None
