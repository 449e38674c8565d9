"""
cachepool - Cache Item

The unit of cached state: a value plus an expiry timestamp (or "never").

Expiry is stored as Unix epoch seconds. None means the item never expires.
Items are transient: pools build one per miss, persist its envelope and
drop it. Stores never hold live CacheItem objects.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any, Generic, TypeVar

T = TypeVar("T")

# Relative (timedelta) or absolute (epoch seconds / datetime) time-to-live
TTL = int | float | timedelta | datetime


def resolve_expiry(ttl: TTL | None, now: float | None = None) -> float | None:
    """
    Turn a TTL into an absolute expiry timestamp.

    Args:
        ttl: None (never), a timedelta from now, an absolute epoch
            timestamp in seconds, or an absolute datetime (naive values
            are local time)
        now: Reference time, defaults to time.time()

    Returns:
        Expiry as epoch seconds, None for "never"
    """
    if ttl is None:
        return None
    if isinstance(ttl, datetime):
        return ttl.timestamp()
    if isinstance(ttl, timedelta):
        if now is None:
            now = time.time()
        return now + ttl.total_seconds()
    if isinstance(ttl, bool) or not isinstance(ttl, int | float):
        raise TypeError(f"Unsupported ttl type: {type(ttl).__name__}")
    return float(ttl)


class CacheItem(Generic[T]):
    """
    A cached value with an optional expiry.

    A fresh item holds no value and never expires:

        item = CacheItem()
        item.value = "hello"
        item.expires_after(60)
        assert not item.is_expired
    """

    def __init__(self, value: T | None = None, expiry: float | None = None) -> None:
        self.value = value
        self.expiry = expiry

    @property
    def expires_at(self) -> float | None:
        """Absolute expiry as epoch seconds, None if the item never expires."""
        return self.expiry

    @expires_at.setter
    def expires_at(self, when: datetime | float | None) -> None:
        if when is None:
            self.expiry = None
        elif isinstance(when, datetime):
            self.expiry = when.timestamp()
        else:
            self.expiry = float(when)

    def expires_after(self, seconds: float | timedelta) -> None:
        """Expire the item `seconds` from now. Non-positive values expire it immediately."""
        if not isinstance(seconds, timedelta):
            seconds = timedelta(seconds=seconds)
        self.expiry = resolve_expiry(seconds)

    @property
    def is_expired(self) -> bool:
        if self.expiry is None:
            return False
        return time.time() >= self.expiry

    @property
    def is_hit(self) -> bool:
        return not self.is_expired

    def __repr__(self) -> str:
        return f"CacheItem(value={self.value!r}, expiry={self.expiry!r})"


@dataclass(frozen=True)
class CacheResult(Generic[T]):
    """
    Value returned by a compute callback that wants to choose its own TTL.

    Example:
        async def load_user() -> CacheResult[dict[str, Any]]:
            user = await fetch_user()
            return CacheResult(user, ttl=timedelta(hours=1))
    """

    value: T
    ttl: TTL | None = None


def unwrap_result(result: Any) -> tuple[Any, bool, TTL | None]:
    """Split a compute result into (value, has_own_ttl, ttl)."""
    if isinstance(result, CacheResult):
        return result.value, True, result.ttl
    return result, False, None
