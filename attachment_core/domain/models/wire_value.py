"""Wire value shape variants.

Values arriving from the remote-procedure boundary are untyped. Before any
decoding they are parsed into one of a closed set of shape variants so that
decoders match exhaustively instead of probing types ad hoc.

Optional encodings:
    None                      -> AbsentValue
    [] / ()                   -> EmptySequence
    [x]                       -> SingletonSequence(x)
    [x, y, ...]               -> OverfullSequence(length)
    {"__kind__": "None"}      -> TaggedNone
    {"__kind__": "Some", ...} -> TaggedSome(value, has_value)
    {"__kind__": "Maybe"}     -> UnrecognizedWrapper(tag)
    anything else             -> BareValue(x)

Byte sequence encodings:
    None / empty              -> NoBytes
    bytes/bytearray/memoryview-> BufferBytes(data)
    [37, 80, ...]             -> IntegerSequence(items)
    {"0": 37, "1": 80, ...}   -> IndexedObject(items)
    anything else             -> UnrecognizedBytes(type_name, detail)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TypeAlias, Union

# Canonical byte buffer: owned, contiguous, immutable.
CanonicalBytes: TypeAlias = bytes


# =============================================================================
# Optional shapes
# =============================================================================


@dataclass(frozen=True)
class AbsentValue:
    """Null or missing value."""


@dataclass(frozen=True)
class EmptySequence:
    """Zero-element sequence encoding "none"."""


@dataclass(frozen=True)
class SingletonSequence:
    """One-element sequence encoding "some"."""

    value: Any


@dataclass(frozen=True)
class OverfullSequence:
    """Sequence longer than one element; a malformed optional."""

    length: int


@dataclass(frozen=True)
class TaggedNone:
    """Discriminated record selecting "none"."""


@dataclass(frozen=True)
class TaggedSome:
    """Discriminated record selecting "some".

    Attributes:
        value: The inner value (None when missing).
        has_value: False when the record carried the "some" tag without a value.
    """

    value: Any
    has_value: bool


@dataclass(frozen=True)
class UnrecognizedWrapper:
    """Discriminated record whose tag is neither "none" nor "some"."""

    tag: Any


@dataclass(frozen=True)
class BareValue:
    """Value with no optional wrapper; treated as present."""

    value: Any


OptionalShape = Union[
    AbsentValue,
    EmptySequence,
    SingletonSequence,
    OverfullSequence,
    TaggedNone,
    TaggedSome,
    UnrecognizedWrapper,
    BareValue,
]


# =============================================================================
# Byte sequence shapes
# =============================================================================


@dataclass(frozen=True)
class NoBytes:
    """Null or zero-length payload."""


@dataclass(frozen=True)
class BufferBytes:
    """Binary buffer (bytes, bytearray or memoryview)."""

    data: Any


@dataclass(frozen=True)
class IntegerSequence:
    """Ordered sequence of small integers."""

    items: tuple[Any, ...]


@dataclass(frozen=True)
class IndexedObject:
    """Mapping whose keys are integer indices.

    Attributes:
        items: (index, value) pairs sorted by index.
    """

    items: tuple[tuple[int, Any], ...]


@dataclass(frozen=True)
class UnrecognizedBytes:
    """Payload in a shape the canonicalizer refuses to guess about."""

    type_name: str
    detail: str


BytesShape = Union[
    NoBytes,
    BufferBytes,
    IntegerSequence,
    IndexedObject,
    UnrecognizedBytes,
]


__all__ = [
    "AbsentValue",
    "BareValue",
    "BufferBytes",
    "BytesShape",
    "CanonicalBytes",
    "EmptySequence",
    "IndexedObject",
    "IntegerSequence",
    "NoBytes",
    "OptionalShape",
    "OverfullSequence",
    "SingletonSequence",
    "TaggedNone",
    "TaggedSome",
    "UnrecognizedBytes",
    "UnrecognizedWrapper",
]
