"""Document byte builders for tests."""

from __future__ import annotations

HEADER = b"%PDF-"
TRAILER = b"%%EOF"


def build_document(size: int = 202, filler: bytes = b"x") -> bytes:
    """Build a structurally valid document of exactly ``size`` bytes.

    Header, then filler, then the trailer as the last bytes.
    """
    body = size - len(HEADER) - len(TRAILER)
    if body < 0:
        raise ValueError(f"size must be at least {len(HEADER) + len(TRAILER)}")
    return HEADER + (filler * body)[:body] + TRAILER
