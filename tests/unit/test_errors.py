"""
cachepool - Error Type Tests
"""

import pytest

from cachepool.errors import (
    CacheError,
    CachePoolError,
    ConfigurationError,
    EnvelopeDecodeError,
    ErrorCode,
    InvalidKeyError,
    InvalidNamespaceError,
    UnknownNamespaceError,
    extract_error_code,
)


class TestErrors:
    """Test suite for the error hierarchy."""

    def test_unknown_namespace(self) -> None:
        error = UnknownNamespaceError("missing", "missing.x", details={"registered": ["default"]})

        assert isinstance(error, CacheError)
        assert isinstance(error, CachePoolError)
        assert error.namespace == "missing"
        assert error.key == "missing.x"
        assert error.to_dict() == {
            "error": "UnknownNamespaceError",
            "message": "No cache pool registered for namespace 'missing' (key: 'missing.x')",
            "details": {"registered": ["default"], "namespace": "missing", "key": "missing.x"},
        }

    def test_invalid_namespace(self) -> None:
        error = InvalidNamespaceError("a.b", "namespace may not contain '.'")

        assert error.namespace == "a.b"
        assert "a.b" in str(error)

    @pytest.mark.parametrize(
        ("error", "code"),
        [
            (UnknownNamespaceError("n", "n.k"), ErrorCode.UNKNOWN_NAMESPACE),
            (InvalidNamespaceError("", "empty"), ErrorCode.INVALID_NAMESPACE),
            (InvalidKeyError("..", "reserved"), ErrorCode.INVALID_KEY),
            (EnvelopeDecodeError("bad"), ErrorCode.MALFORMED_ENVELOPE),
            (CacheError("generic"), ErrorCode.CACHE_FAILURE),
            (ConfigurationError("bad config"), ErrorCode.INVALID_CONFIGURATION),
            (OSError("disk"), ErrorCode.INTERNAL_ERROR),
        ],
    )
    def test_extract_error_code(self, error: Exception, code: ErrorCode) -> None:
        assert extract_error_code(error) is code
