"""Byte canonicalizer for wire byte-sequence encodings.

Bindings deliver "a sequence of bytes" as a binary buffer, as a plain list
of small integers, or (after a JSON round trip of a typed array) as an
object keyed by consecutive integer indices. All of them are normalized
into one owned, immutable ``bytes`` buffer.

Shapes the canonicalizer does not recognize are rejected rather than
guessed at. Rejection is reported as None and never raises.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

import structlog

from attachment_core.domain.models.wire_value import (
    BufferBytes,
    BytesShape,
    CanonicalBytes,
    IndexedObject,
    IntegerSequence,
    NoBytes,
    UnrecognizedBytes,
)

logger = structlog.get_logger(__name__)

_BYTE_MAX = 255


def _parse_index(key: Any) -> int | None:
    """Parse an index key: a non-negative int or its canonical decimal string."""
    if isinstance(key, bool):
        return None
    if isinstance(key, int):
        return key if key >= 0 else None
    if isinstance(key, str) and key.isascii() and key.isdigit():
        if key == "0" or not key.startswith("0"):
            return int(key)
    return None


def classify_bytes(value: Any) -> BytesShape:
    """Parse a raw wire value into its byte-sequence shape.

    Args:
        value: Untyped byte payload from the boundary.

    Returns:
        Exactly one of the BytesShape variants.
    """
    if value is None:
        return NoBytes()

    if isinstance(value, memoryview):
        return NoBytes() if value.nbytes == 0 else BufferBytes(data=value)

    if isinstance(value, (bytes, bytearray)):
        return NoBytes() if len(value) == 0 else BufferBytes(data=value)

    if isinstance(value, (list, tuple)):
        return NoBytes() if len(value) == 0 else IntegerSequence(items=tuple(value))

    if isinstance(value, Mapping):
        if len(value) == 0:
            return NoBytes()
        indexed: list[tuple[int, Any]] = []
        for key, item in value.items():
            index = _parse_index(key)
            if index is None:
                return UnrecognizedBytes(
                    type_name=type(value).__name__,
                    detail=f"non-index key {key!r}",
                )
            indexed.append((index, item))
        indexed.sort(key=lambda pair: pair[0])
        if any(index != position for position, (index, _) in enumerate(indexed)):
            return UnrecognizedBytes(
                type_name=type(value).__name__,
                detail="indices are not a dense 0..n-1 range",
            )
        return IndexedObject(items=tuple(indexed))

    return UnrecognizedBytes(
        type_name=type(value).__name__,
        detail="unsupported payload type",
    )


def _pack(items: Iterable[Any]) -> CanonicalBytes | None:
    packed = bytearray()
    for position, item in enumerate(items):
        if isinstance(item, bool) or not isinstance(item, int):
            logger.debug(
                "bytes_element_not_integer",
                position=position,
                element_type=type(item).__name__,
            )
            return None
        if not 0 <= item <= _BYTE_MAX:
            logger.debug("bytes_element_out_of_range", position=position, value=item)
            return None
        packed.append(item)
    return bytes(packed)


def canonicalize_bytes(value: Any) -> CanonicalBytes | None:
    """Normalize any accepted byte encoding into a canonical buffer.

    Args:
        value: Untyped byte payload from the boundary.

    Returns:
        A non-empty, owned ``bytes`` buffer, or None when the payload is
        absent, empty or not canonicalizable.
    """
    try:
        shape = classify_bytes(value)

        if isinstance(shape, NoBytes):
            return None
        if isinstance(shape, BufferBytes):
            # bytes() copies mutable buffers so the result never aliases a
            # view owned elsewhere.
            return bytes(shape.data)
        if isinstance(shape, IntegerSequence):
            return _pack(shape.items)
        if isinstance(shape, IndexedObject):
            return _pack(item for _, item in shape.items)

        logger.debug(
            "bytes_shape_unrecognized",
            type_name=shape.type_name,
            detail=shape.detail,
        )
        return None
    except Exception as e:
        logger.warning("bytes_canonicalize_failed", error=str(e))
        return None
