"""
cachepool - Filesystem Storage Backend

Directory-backed store where every key is a file and its content is the
stored value (UTF-8 text).

Files are opened, read or written and closed on every call; no handle is
kept between calls. Filesystem errors (permissions, missing directory, ...)
are not caught here and propagate to the caller.

Example:
    storage = FilesystemStorage("/tmp/cache")
    await storage.set_item("default.greeting", '{"version":1,"value":"hi"}')
    raw = await storage.get_item("default.greeting")
"""

import logging
import os
from pathlib import Path

from ...errors import InvalidKeyError
from ..interface import StorageInterface

logger = logging.getLogger(__name__)


class FilesystemStorage(StorageInterface):
    """
    Filesystem storage backend.

    Notes:
    - The directory is created (with parents) on construction if missing.
    - Enumeration order is the sorted directory listing, so it is stable
      between calls that do not mutate the directory.
    - Keys are used verbatim as file names and therefore may not contain a
      path separator or be "." / "..".
    """

    def __init__(self, path: str | os.PathLike[str], encoding: str = "utf-8") -> None:
        """
        Initialize filesystem storage.

        Args:
            path: Directory holding one file per key
            encoding: Text encoding used for file contents
        """
        self.path = Path(path)
        self.encoding = encoding

        if not self.path.exists():
            self.path.mkdir(parents=True)
            logger.info(f"Created filesystem storage directory {self.path}", extra={"path": str(self.path)})

    def _file_for(self, key: str) -> Path:
        if not key or key in (".", ".."):
            raise InvalidKeyError(key, "file-backed keys must be a non-empty file name")
        if os.sep in key or (os.altsep and os.altsep in key):
            raise InvalidKeyError(key, "file-backed keys may not contain a path separator")
        return self.path / key

    def _list(self) -> list[str]:
        return sorted(entry.name for entry in self.path.iterdir() if entry.is_file())

    async def length(self) -> int:
        return len(self._list())

    async def key(self, index: int) -> str | None:
        names = self._list()
        if 0 <= index < len(names):
            return names[index]
        return None

    async def get_item(self, key: str) -> str | None:
        file = self._file_for(key)
        if not file.is_file():
            return None
        return file.read_text(encoding=self.encoding)

    async def set_item(self, key: str, value: str) -> None:
        self._file_for(key).write_text(value, encoding=self.encoding)

    async def remove_item(self, key: str) -> None:
        self._file_for(key).unlink(missing_ok=True)

    async def clear(self) -> None:
        names = self._list()
        for name in names:
            (self.path / name).unlink(missing_ok=True)
        logger.debug(f"Cleared {len(names)} files from {self.path}", extra={"path": str(self.path)})

    async def keys(self) -> list[str]:
        return self._list()
