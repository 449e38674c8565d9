"""
cachepool - Filesystem Storage Tests

One-file-per-key storage in a temporary directory.
"""

import os
from pathlib import Path

import pytest

from cachepool.errors import InvalidKeyError
from cachepool.storage import FilesystemStorage


class TestFilesystemStorage:
    """Test suite for FilesystemStorage."""

    @pytest.fixture
    def storage(self, temp_cache_dir: Path) -> FilesystemStorage:
        return FilesystemStorage(temp_cache_dir)

    async def test_creates_missing_directory(self, tmp_path: Path) -> None:
        path = tmp_path / "nested" / "cache"

        storage = FilesystemStorage(path)

        assert path.is_dir()
        assert await storage.length() == 0

    async def test_accepts_str_path(self, temp_cache_dir: Path) -> None:
        storage = FilesystemStorage(str(temp_cache_dir))
        assert storage.path == temp_cache_dir

    async def test_set_and_get(self, storage: FilesystemStorage, temp_cache_dir: Path) -> None:
        await storage.set_item("my-key", "my-value")

        assert await storage.get_item("my-key") == "my-value"
        assert await storage.length() == 1
        assert (temp_cache_dir / "my-key").read_text(encoding="utf-8") == "my-value"

    async def test_unicode_values(self, storage: FilesystemStorage) -> None:
        await storage.set_item("greeting", '{"value":"héllo wörld ✓"}')
        assert await storage.get_item("greeting") == '{"value":"héllo wörld ✓"}'

    async def test_get_absent(self, storage: FilesystemStorage) -> None:
        assert await storage.get_item("nonexistent") is None

    async def test_overwrite(self, storage: FilesystemStorage) -> None:
        await storage.set_item("key", "one")
        await storage.set_item("key", "two")

        assert await storage.get_item("key") == "two"
        assert await storage.length() == 1

    async def test_enumeration_is_sorted(self, storage: FilesystemStorage) -> None:
        for name in ("default.c", "default.a", "ns:1.b"):
            await storage.set_item(name, "x")

        assert await storage.keys() == ["default.a", "default.c", "ns:1.b"]
        assert await storage.key(0) == "default.a"
        assert await storage.key(2) == "ns:1.b"
        assert await storage.key(3) is None

    async def test_ignores_subdirectories(self, storage: FilesystemStorage, temp_cache_dir: Path) -> None:
        (temp_cache_dir / "subdir").mkdir()
        await storage.set_item("key", "value")

        assert await storage.keys() == ["key"]

    async def test_remove(self, storage: FilesystemStorage, temp_cache_dir: Path) -> None:
        await storage.set_item("key", "value")
        await storage.remove_item("key")

        assert not (temp_cache_dir / "key").exists()
        assert await storage.get_item("key") is None

    async def test_remove_absent_key(self, storage: FilesystemStorage) -> None:
        await storage.remove_item("nonexistent")

    async def test_clear(self, storage: FilesystemStorage) -> None:
        await storage.set_item("key", "some value")
        await storage.set_item("other", "more")

        await storage.clear()

        assert await storage.get_item("key") is None
        assert await storage.length() == 0

    async def test_persists_across_instances(self, temp_cache_dir: Path) -> None:
        await FilesystemStorage(temp_cache_dir).set_item("key", "value")

        assert await FilesystemStorage(temp_cache_dir).get_item("key") == "value"

    @pytest.mark.parametrize("key", ["", ".", "..", f"a{os.sep}b"])
    async def test_invalid_keys(self, storage: FilesystemStorage, key: str) -> None:
        with pytest.raises(InvalidKeyError):
            await storage.set_item(key, "value")

    @pytest.mark.skipif(os.name != "posix" or os.geteuid() == 0, reason="needs POSIX permissions as non-root")
    async def test_permission_error_propagates(self, storage: FilesystemStorage, temp_cache_dir: Path) -> None:
        temp_cache_dir.chmod(0o500)
        try:
            with pytest.raises(PermissionError):
                await storage.set_item("key", "value")
        finally:
            temp_cache_dir.chmod(0o700)
