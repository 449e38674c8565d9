"""
cachepool - Test Configuration and Shared Fixtures

Provides pytest configuration and shared fixtures for unit and integration tests.
"""

import os
from collections.abc import Generator
from pathlib import Path
from typing import Any

import pytest

# Set test logging
os.environ["LOG_LEVEL"] = "DEBUG"

CACHE_ENV_VARS = (
    "CACHE_STORAGE",
    "CACHE_PATH",
    "CACHE_DEFAULT_TTL",
    "CACHE_NAMESPACES",
    "REDIS_URL",
    "REDIS_PREFIX",
    "REDIS_SOCKET_TIMEOUT",
    "LOG_JSON",
)


@pytest.fixture
def test_redis_url() -> str:
    """Get Redis URL for testing (database 15 for isolation)."""
    return os.environ.get("TEST_REDIS_URL", "redis://localhost:6379/15")


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Remove cache-related environment variables and run from an empty directory (no .env)."""
    for name in CACHE_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def mock_env_filesystem(clean_env: None, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """Set environment variables for the filesystem storage backend."""
    cache_dir = tmp_path / "fs-cache"
    monkeypatch.setenv("CACHE_STORAGE", "filesystem")
    monkeypatch.setenv("CACHE_PATH", str(cache_dir))
    monkeypatch.setenv("CACHE_DEFAULT_TTL", "600")
    monkeypatch.setenv("CACHE_NAMESPACES", "default,ns:1")
    return cache_dir


@pytest.fixture
def sample_person() -> dict[str, Any]:
    """A JSON-compatible record used across pool tests."""
    return {"first": "John", "last": "Smith", "age": 32}


@pytest.fixture
def sample_cache_data() -> dict[str, Any]:
    """Sample data for cache testing."""
    return {
        "simple_string": "hello",
        "simple_int": 42,
        "simple_float": 3.14,
        "simple_bool": True,
        "simple_none": None,
        "complex_dict": {
            "nested": {
                "key": "value",
                "number": 123,
                "list": [1, 2, 3],
            }
        },
        "complex_list": [
            {"id": 1, "name": "Alice"},
            {"id": 2, "name": "Bob"},
        ],
    }


@pytest.fixture
def temp_cache_dir(tmp_path: Path) -> Path:
    """Create a temporary directory for filesystem storage tests."""
    cache_dir = tmp_path / "cache"
    cache_dir.mkdir()
    return cache_dir


@pytest.fixture(autouse=True)
def reset_factories() -> Generator[None, None, None]:
    """Reset pool factory and config singleton after each test to prevent state leakage."""
    yield
    from cachepool.cache.factory import reset_pool_factory
    from cachepool.config import loader

    reset_pool_factory()
    loader._config_instance = None


class CallCounter:
    """Compute callback that records how often it was called."""

    def __init__(self, result: Any = "computed") -> None:
        self.result = result
        self.calls = 0

    def __call__(self) -> Any:
        self.calls += 1
        return self.result


class AsyncCallCounter(CallCounter):
    """Async compute callback that records how often it was awaited."""

    async def __call__(self) -> Any:  # type: ignore[override]
        self.calls += 1
        return self.result


@pytest.fixture
def compute() -> type[CallCounter]:
    return CallCounter


@pytest.fixture
def compute_async() -> type[AsyncCallCounter]:
    return AsyncCallCounter
