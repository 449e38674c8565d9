"""
cachepool - Storage Module

Key/value string stores that cache pools persist envelopes into.

- interface.py: Abstract storage contract (length, key, get/set/remove, clear)
- backends/: memory list, dict map, filesystem directory, Redis (lazy)
"""

from .backends import FilesystemStorage, MapStorage, MemoryStorage
from .interface import StorageInterface

__all__ = [
    "StorageInterface",
    "MemoryStorage",
    "MapStorage",
    "FilesystemStorage",
]
