"""
cachepool - Key Helpers

Compound keys have the form "<namespace>.<local key>". A namespace never
contains the separator; a local key may, because compound keys are split on
the first separator only.
"""

from typing import Any

from .errors import InvalidNamespaceError

NAMESPACE_SEPARATOR = "."


def validate_namespace(namespace: Any) -> str:
    """
    Check that a namespace can be routed unambiguously.

    Raises:
        InvalidNamespaceError: If the namespace is empty, not a string,
            or contains the separator
    """
    if not isinstance(namespace, str) or not namespace:
        raise InvalidNamespaceError(namespace, "namespace must be a non-empty string")
    if NAMESPACE_SEPARATOR in namespace:
        raise InvalidNamespaceError(namespace, f"namespace may not contain '{NAMESPACE_SEPARATOR}'")
    return namespace


def join_key(namespace: str, key: str) -> str:
    return f"{namespace}{NAMESPACE_SEPARATOR}{key}"


def split_key(key: str) -> tuple[str, str | None]:
    """
    Split a compound key on its first separator.

    Returns:
        (namespace, local_key); local_key is None when the key has no separator
    """
    namespace, separator, local_key = key.partition(NAMESPACE_SEPARATOR)
    if not separator:
        return key, None
    return namespace, local_key
