"""
cachepool - Observability Module

Structured logging helpers.
"""

from .logging import JSONFormatter, setup_logging

__all__ = [
    "JSONFormatter",
    "setup_logging",
]
