"""
cachepool - Core Error Types

Defines the exception hierarchy for the cache pools.
All exceptions raised by this package inherit from CachePoolError.

Failures raised by a storage backend (OSError, redis errors, ...) are not
part of this hierarchy: they propagate to the caller unchanged.
"""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """
    Standard error codes for structured error reporting.
    """

    # Configuration errors
    INVALID_CONFIGURATION = "INVALID_CONFIGURATION"

    # Addressing errors
    UNKNOWN_NAMESPACE = "UNKNOWN_NAMESPACE"
    INVALID_NAMESPACE = "INVALID_NAMESPACE"
    INVALID_KEY = "INVALID_KEY"

    # Stored data errors
    MALFORMED_ENVELOPE = "MALFORMED_ENVELOPE"

    # Cache errors
    CACHE_FAILURE = "CACHE_FAILURE"

    # Internal errors
    INTERNAL_ERROR = "INTERNAL_ERROR"


class CachePoolError(Exception):
    """Base exception for all cachepool errors."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for structured logging."""
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
        }


class ConfigurationError(CachePoolError):
    """Raised when configuration is invalid or missing."""


class CacheError(CachePoolError):
    """Base exception for cache-related errors."""


class UnknownNamespaceError(CacheError):
    """Raised when a compound key addresses a namespace with no registered pool."""

    def __init__(self, namespace: str, key: str, details: dict[str, Any] | None = None):
        message = f"No cache pool registered for namespace '{namespace}' (key: '{key}')"
        error_details = details or {}
        error_details.update({"namespace": namespace, "key": key})
        super().__init__(message, error_details)
        self.namespace = namespace
        self.key = key


class InvalidNamespaceError(CacheError):
    """Raised when a namespace is empty or contains the key separator."""

    def __init__(self, namespace: Any, reason: str):
        message = f"Invalid namespace {namespace!r}: {reason}"
        super().__init__(message, {"namespace": namespace, "reason": reason})
        self.namespace = namespace


class InvalidKeyError(CacheError):
    """Raised when a key cannot be used by a storage backend."""

    def __init__(self, key: str, reason: str):
        message = f"Invalid key {key!r}: {reason}"
        super().__init__(message, {"key": key, "reason": reason})
        self.key = key


class EnvelopeDecodeError(CacheError):
    """Raised when a stored string cannot be decoded into a cache envelope."""


def extract_error_code(error: Exception) -> ErrorCode:
    """
    Extract appropriate ErrorCode from an exception.

    Args:
        error: Exception to categorize

    Returns:
        Appropriate ErrorCode for the exception
    """
    if isinstance(error, UnknownNamespaceError):
        return ErrorCode.UNKNOWN_NAMESPACE

    if isinstance(error, InvalidNamespaceError):
        return ErrorCode.INVALID_NAMESPACE

    if isinstance(error, InvalidKeyError):
        return ErrorCode.INVALID_KEY

    if isinstance(error, EnvelopeDecodeError):
        return ErrorCode.MALFORMED_ENVELOPE

    if isinstance(error, CacheError):
        return ErrorCode.CACHE_FAILURE

    if isinstance(error, ConfigurationError):
        return ErrorCode.INVALID_CONFIGURATION

    return ErrorCode.INTERNAL_ERROR
