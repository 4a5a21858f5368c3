"""Content signature engine.

Computes a deterministic, cheap 32-bit FNV-1a fingerprint of attachment
bytes. The signature is a change detector and cache key, not a security
primitive: accidental differences must change it, adversarial collisions
are out of scope.

compute_signature is on the render hot path and is used as a memoization
key, so it is total: every failure maps to a reserved sentinel.
"""

from __future__ import annotations

from typing import Any

import structlog

from attachment_core.domain.models.content_signature import (
    EMPTY_SIGNATURE,
    ERROR_SIGNATURE,
    INVALID_TYPE_SIGNATURE,
    ContentSignature,
)
from attachment_core.domain.models.wire_value import NoBytes
from attachment_core.domain.services.byte_canonicalizer import (
    canonicalize_bytes,
    classify_bytes,
)

logger = structlog.get_logger(__name__)

FNV_OFFSET_BASIS = 0x811C9DC5
FNV_PRIME = 0x01000193
_UINT32_MASK = 0xFFFFFFFF


def fnv1a_32(data: bytes) -> int:
    """Compute the 32-bit FNV-1a hash of a buffer.

    Args:
        data: Bytes to hash.

    Returns:
        Unsigned 32-bit hash value.
    """
    value = FNV_OFFSET_BASIS
    for byte in data:
        value ^= byte
        value = (value * FNV_PRIME) & _UINT32_MASK
    return value


def compute_signature(data: Any) -> ContentSignature:
    """Compute the content signature of a byte buffer.

    Args:
        data: Canonical bytes, or any byte encoding the canonicalizer accepts.

    Returns:
        8 lowercase hex digits, or one of the sentinels:
        "empty" for zero-length input, "invalid-type" when the input cannot
        be canonicalized, "error" for a missing input or unexpected failure.
    """
    try:
        if data is None:
            logger.warning("signature_input_missing")
            return ERROR_SIGNATURE

        if isinstance(data, bytes):
            buffer: bytes | None = data
        elif isinstance(classify_bytes(data), NoBytes):
            return EMPTY_SIGNATURE
        else:
            buffer = canonicalize_bytes(data)
            if buffer is None:
                return INVALID_TYPE_SIGNATURE

        # Checked before hashing: the basis of an empty buffer is a valid
        # hex value and must not be returned.
        if not buffer:
            return EMPTY_SIGNATURE

        return f"{fnv1a_32(buffer):08x}"
    except Exception as e:
        logger.error("signature_compute_failed", error=str(e), exc_info=True)
        return ERROR_SIGNATURE
