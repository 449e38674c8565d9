"""
cachepool - CacheItem Tests

Default state, expiry setters and staleness of CacheItem, plus TTL resolution.
"""

import time
from datetime import datetime, timedelta

import pytest

from cachepool.cache.item import CacheItem, CacheResult, resolve_expiry, unwrap_result


class TestCacheItem:
    """Test suite for CacheItem."""

    def test_default_state(self) -> None:
        """A new item has no value and never expires."""
        item: CacheItem[str] = CacheItem()

        assert item.value is None
        assert item.expires_at is None
        assert item.is_expired is False
        assert item.is_hit is True

    def test_set_value(self) -> None:
        item: CacheItem[str] = CacheItem()
        item.value = "my-value"

        assert item.value == "my-value"
        assert item.is_hit is True

    def test_expires_after_negative_is_expired(self) -> None:
        item = CacheItem("my-value")
        item.expires_after(-1)

        assert item.is_expired is True
        assert item.is_hit is False

    def test_expires_after_zero_is_expired(self) -> None:
        """Non-positive relative expiry means immediately stale."""
        item = CacheItem("my-value")
        item.expires_after(0)

        assert item.is_expired is True

    def test_expires_after_positive_is_fresh(self) -> None:
        item = CacheItem("my-value")
        item.expires_after(100)

        assert item.is_expired is False
        assert item.expires_at is not None
        assert item.expires_at > time.time()

    def test_expires_after_timedelta(self) -> None:
        item = CacheItem("my-value")
        item.expires_after(timedelta(minutes=5))

        assert item.expires_at is not None
        assert 290 < item.expires_at - time.time() <= 300

    def test_expires_at_now_is_expired(self) -> None:
        """An expiry equal to the current time counts as expired."""
        item = CacheItem("my-value")
        item.expires_at = datetime.now()

        assert item.is_expired is True

    def test_expires_at_future_datetime(self) -> None:
        item = CacheItem("my-value")
        item.expires_at = datetime.now() + timedelta(hours=1)

        assert item.is_expired is False

    def test_expires_at_epoch_number(self) -> None:
        item = CacheItem("my-value")
        item.expires_at = time.time() - 5

        assert item.is_expired is True

    def test_expires_at_none_resets_to_never(self) -> None:
        item = CacheItem("my-value")
        item.expires_after(-10)
        assert item.is_expired is True

        item.expires_at = None
        assert item.is_expired is False


class TestResolveExpiry:
    """Test suite for TTL resolution."""

    def test_none_means_never(self) -> None:
        assert resolve_expiry(None) is None

    def test_numeric_is_absolute_timestamp(self) -> None:
        """Numbers are epoch seconds, the same unit as a stored expiry."""
        assert resolve_expiry(1060, now=1000.0) == 1060.0
        assert resolve_expiry(2_000_000_000.5) == 2_000_000_000.5

    def test_relative_timedelta(self) -> None:
        assert resolve_expiry(timedelta(seconds=30), now=1000.0) == 1030.0

    def test_absolute_datetime(self) -> None:
        when = datetime(2030, 1, 1, 12, 0, 0)
        assert resolve_expiry(when, now=1000.0) == when.timestamp()

    def test_unsupported_type(self) -> None:
        with pytest.raises(TypeError):
            resolve_expiry("soon")  # type: ignore[arg-type]

    def test_bool_rejected(self) -> None:
        with pytest.raises(TypeError):
            resolve_expiry(True)


class TestCacheResult:
    """Test suite for CacheResult unwrapping."""

    def test_plain_value(self) -> None:
        assert unwrap_result("plain") == ("plain", False, None)

    def test_result_with_ttl(self) -> None:
        assert unwrap_result(CacheResult("wrapped", ttl=30)) == ("wrapped", True, 30)

    def test_result_without_ttl(self) -> None:
        """A CacheResult with no TTL explicitly asks for no expiry."""
        assert unwrap_result(CacheResult("wrapped")) == ("wrapped", True, None)

    def test_result_is_immutable(self) -> None:
        result = CacheResult("wrapped", ttl=30)
        with pytest.raises(AttributeError):
            result.ttl = 60  # type: ignore[misc]
