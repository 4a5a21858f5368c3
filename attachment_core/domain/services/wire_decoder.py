"""Wire value decoder for optional encodings.

The remote-procedure boundary encodes "optional" in several incompatible
ways depending on the binding that produced the response. This module
parses a raw value into a closed set of shapes (see
attachment_core.domain.models.wire_value) and decodes that shape into a
present value or None.

Decoding is total: unrecognized or malformed wrappers decode to None with a
logged diagnostic and never raise.

Leniency: a value that carries no recognized wrapper at all is treated as
present. Some boundary implementations omit the wrapper for fields that are
always populated and callers depend on that, so it is kept deliberately even
though it can mask a malformed response.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import structlog

from attachment_core.domain.models.wire_value import (
    AbsentValue,
    BareValue,
    BufferBytes,
    EmptySequence,
    IndexedObject,
    IntegerSequence,
    OptionalShape,
    OverfullSequence,
    SingletonSequence,
    TaggedNone,
    TaggedSome,
    UnrecognizedWrapper,
)
from attachment_core.domain.services.byte_canonicalizer import classify_bytes

logger = structlog.get_logger(__name__)

# Discriminator key emitted by the generated bindings. A record carrying it
# is always a wrapper, whatever the tag.
STRICT_DISCRIMINATOR = "__kind__"

# Looser discriminator; only treated as a wrapper when the tag is none/some,
# since plain records may legitimately have a "kind" field.
LOOSE_DISCRIMINATOR = "kind"

_NONE_TAG = "none"
_SOME_TAG = "some"

# Upper bound on nested wrappers peeled by unwrap_optional.
MAX_UNWRAP_DEPTH = 16


def _tag_of(raw_tag: Any) -> str | None:
    if isinstance(raw_tag, str):
        lowered = raw_tag.strip().lower()
        if lowered in (_NONE_TAG, _SOME_TAG):
            return lowered
    return None


def _classify_tagged(value: Mapping[Any, Any], key: str) -> OptionalShape | None:
    tag = _tag_of(value[key])
    if tag == _NONE_TAG:
        return TaggedNone()
    if tag == _SOME_TAG:
        return TaggedSome(value=value.get("value"), has_value="value" in value)
    return None


def classify_optional(value: Any) -> OptionalShape:
    """Parse a raw wire value into its optional-encoding shape.

    Args:
        value: Untyped value from the boundary.

    Returns:
        Exactly one of the OptionalShape variants.
    """
    if value is None:
        return AbsentValue()

    if isinstance(value, (list, tuple)):
        if len(value) == 0:
            return EmptySequence()
        if len(value) == 1:
            return SingletonSequence(value=value[0])
        return OverfullSequence(length=len(value))

    if isinstance(value, Mapping):
        if STRICT_DISCRIMINATOR in value:
            shape = _classify_tagged(value, STRICT_DISCRIMINATOR)
            if shape is None:
                return UnrecognizedWrapper(tag=value[STRICT_DISCRIMINATOR])
            return shape
        if LOOSE_DISCRIMINATOR in value:
            shape = _classify_tagged(value, LOOSE_DISCRIMINATOR)
            if shape is not None:
                return shape

    return BareValue(value=value)


def _decode_shape(shape: OptionalShape) -> Any | None:
    if isinstance(shape, (AbsentValue, EmptySequence, TaggedNone)):
        return None
    if isinstance(shape, SingletonSequence):
        return shape.value
    if isinstance(shape, OverfullSequence):
        logger.warning("wire_optional_overfull", length=shape.length)
        return None
    if isinstance(shape, TaggedSome):
        if not shape.has_value:
            logger.warning("wire_optional_some_without_value")
        return shape.value
    if isinstance(shape, UnrecognizedWrapper):
        logger.warning("wire_optional_unrecognized_tag", tag=repr(shape.tag))
        return None
    return shape.value


def decode_optional(value: Any) -> Any | None:
    """Decode one level of optional wrapping.

    Args:
        value: Untyped value from the boundary.

    Returns:
        The wrapped value when present, otherwise None.
    """
    return _decode_shape(classify_optional(value))


def _peel(value: Any, stop_at: Any) -> Any | None:
    current = value
    for _ in range(MAX_UNWRAP_DEPTH):
        if current is None:
            return None
        if stop_at(current):
            return current
        shape = classify_optional(current)
        if isinstance(shape, BareValue):
            return shape.value
        current = _decode_shape(shape)
    logger.warning("wire_optional_too_deep", max_depth=MAX_UNWRAP_DEPTH)
    return None


def unwrap_optional(value: Any) -> Any | None:
    """Peel optional wrappers until a bare value or absence is reached.

    Nested optionals (e.g. an optional field inside an optional record) may
    be wrapped to any depth; no fixed depth is assumed.

    Args:
        value: Untyped value from the boundary.

    Returns:
        The innermost present value, or None.
    """
    return _peel(value, stop_at=lambda _: False)


def _is_int(item: Any) -> bool:
    return isinstance(item, int) and not isinstance(item, bool)


def _is_byte_payload(value: Any) -> bool:
    shape = classify_bytes(value)
    if isinstance(shape, BufferBytes):
        return True
    if isinstance(shape, IntegerSequence):
        return all(_is_int(item) for item in shape.items)
    if isinstance(shape, IndexedObject):
        return all(_is_int(item) for _, item in shape.items)
    return False


def unwrap_bytes_field(value: Any) -> Any | None:
    """Peel optional wrappers around a byte payload.

    Stops as soon as the value already has a byte-payload shape, so that a
    raw integer list is never mistaken for an overfull optional.

    Args:
        value: Untyped bytes field from the boundary.

    Returns:
        The byte payload in its wire encoding, or None.
    """
    return _peel(value, stop_at=_is_byte_payload)


def normalize_string(value: Any) -> str | None:
    """Return a stripped non-empty string, or None."""
    if isinstance(value, str):
        stripped = value.strip()
        if stripped:
            return stripped
    return None
