"""
cachepool - Storage Backends

Exports available storage backend implementations.

Redis backend is lazy-loaded via the cache factory to avoid a hard
dependency on a running server or the client import.
"""

from .filesystem import FilesystemStorage
from .map import MapStorage
from .memory import MemoryStorage

__all__ = [
    "FilesystemStorage",
    "MapStorage",
    "MemoryStorage",
]
