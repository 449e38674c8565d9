"""
cachepool - Logging Setup Tests
"""

import json
import logging
from collections.abc import Generator

import pytest

from cachepool.observability import JSONFormatter, setup_logging


@pytest.fixture
def restore_package_logger() -> Generator[None, None, None]:
    logger = logging.getLogger("cachepool")
    handlers, level = list(logger.handlers), logger.level
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)


class TestLogging:
    """Test suite for structured logging helpers."""

    def test_json_formatter_includes_extra(self) -> None:
        record = logging.LogRecord(
            name="cachepool.cache.pool",
            level=logging.WARNING,
            pathname=__file__,
            lineno=10,
            msg="Discarding malformed cache entry '%s'",
            args=("default.k",),
            exc_info=None,
        )
        record.key = "default.k"

        data = json.loads(JSONFormatter().format(record))

        assert data["level"] == "WARNING"
        assert data["logger"] == "cachepool.cache.pool"
        assert data["message"] == "Discarding malformed cache entry 'default.k'"
        assert data["key"] == "default.k"
        assert data["timestamp"].endswith("Z")

    def test_setup_logging_is_idempotent(self, restore_package_logger: None) -> None:
        setup_logging("DEBUG")
        logger = setup_logging("DEBUG", json_format=True)

        assert logger.name == "cachepool"
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0].formatter, JSONFormatter)
