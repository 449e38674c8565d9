"""
cachepool - Envelope Codec

Serialized form of a CacheItem as persisted into a store:

    {"version": 1, "value": <value>, "expiry": <epoch seconds>}

"expiry" is omitted when the item never expires. The dumps/loads callables
are the extension point for values plain JSON cannot represent.
"""

import json
import math
from collections.abc import Callable
from typing import Any

from ..errors import EnvelopeDecodeError
from .item import CacheItem

ENVELOPE_VERSION = 1

Serializer = Callable[[Any], str]
Deserializer = Callable[[str], Any]


def encode_envelope(item: CacheItem[Any], dumps: Serializer | None = None) -> str:
    """
    Serialize a cache item.

    Args:
        item: Item to serialize
        dumps: Serializer for the envelope dict (default: compact JSON)

    Returns:
        Envelope string
    """
    envelope: dict[str, Any] = {"version": ENVELOPE_VERSION, "value": item.value}
    if item.expiry is not None:
        envelope["expiry"] = item.expiry

    if dumps is None:
        return json.dumps(envelope, ensure_ascii=False, separators=(",", ":"))
    return dumps(envelope)


def decode_envelope(raw: str, loads: Deserializer | None = None) -> CacheItem[Any]:
    """
    Deserialize an envelope string into a cache item.

    Args:
        raw: Envelope string read from a store
        loads: Deserializer producing the envelope dict (default: json.loads)

    Returns:
        Decoded CacheItem

    Raises:
        EnvelopeDecodeError: If the string is not a valid version-1 envelope
    """
    try:
        data = (loads or json.loads)(raw)
    except EnvelopeDecodeError:
        raise
    except Exception as e:
        # Custom deserializers may raise anything
        raise EnvelopeDecodeError(
            f"Stored value is not a decodable envelope: {e}",
            details={"preview": raw[:100], "error": str(e)},
        ) from e

    if not isinstance(data, dict):
        raise EnvelopeDecodeError(
            "Envelope must be an object",
            details={"type": type(data).__name__},
        )

    version = data.get("version")
    if version != ENVELOPE_VERSION:
        raise EnvelopeDecodeError(
            f"Unsupported envelope version: {version!r}",
            details={"version": version, "supported": ENVELOPE_VERSION},
        )

    if "value" not in data:
        raise EnvelopeDecodeError("Envelope has no value field")

    expiry = data.get("expiry")
    if expiry is not None and (isinstance(expiry, bool) or not isinstance(expiry, int | float)):
        raise EnvelopeDecodeError(
            "Envelope expiry must be a number",
            details={"expiry": expiry},
        )

    if expiry is not None:
        try:
            expiry = float(expiry)
        except OverflowError as e:
            raise EnvelopeDecodeError(
                "Envelope expiry is out of range",
                details={"error": str(e)},
            ) from e
        if not math.isfinite(expiry):
            raise EnvelopeDecodeError(
                "Envelope expiry must be finite",
                details={"expiry": str(expiry)},
            )

    return CacheItem(value=data["value"], expiry=expiry)
