"""Content signature sentinels.

A content signature is either 8 lowercase hex digits computed from the bytes,
or one of the reserved sentinels below. The sentinels contain characters
outside [0-9a-f] or are not 8 characters long, so they can never collide with
a computed value.
"""

from __future__ import annotations

import re
from typing import TypeAlias

ContentSignature: TypeAlias = str

EMPTY_SIGNATURE: ContentSignature = "empty"
INVALID_TYPE_SIGNATURE: ContentSignature = "invalid-type"
ERROR_SIGNATURE: ContentSignature = "error"

SENTINEL_SIGNATURES: frozenset[str] = frozenset(
    {EMPTY_SIGNATURE, INVALID_TYPE_SIGNATURE, ERROR_SIGNATURE}
)

_HEX_SIGNATURE = re.compile(r"^[0-9a-f]{8}$")


def is_content_derived(signature: ContentSignature) -> bool:
    """Return True when the signature was computed from real content."""
    return bool(_HEX_SIGNATURE.match(signature))
