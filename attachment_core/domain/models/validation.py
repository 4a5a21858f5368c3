"""Structural validation verdict for attachment bytes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ValidationReason(str, Enum):
    """Why a byte buffer is not a well-formed document.

    Values are the stable reason codes surfaced to consumers.
    """

    EMPTY = "empty"
    TOO_SMALL = "too-small"
    MISSING_HEADER = "missing-header"
    MISSING_TRAILER = "missing-trailer"

    @property
    def message(self) -> str:
        """Human-readable explanation for display."""
        return _REASON_MESSAGES[self]


_REASON_MESSAGES: dict[ValidationReason, str] = {
    ValidationReason.EMPTY: "No document data available",
    ValidationReason.TOO_SMALL: "Document file is too small to be valid",
    ValidationReason.MISSING_HEADER: (
        "Invalid document: missing header. "
        "The file may be corrupted or not a valid document."
    ),
    ValidationReason.MISSING_TRAILER: (
        "Invalid document: missing end-of-file marker. "
        "The file may be incomplete or corrupted."
    ),
}


@dataclass(frozen=True)
class ValidationVerdict:
    """Outcome of a structural sniff test.

    Attributes:
        valid: True when header and trailer checks pass.
        reason: Failure reason, populated only when valid is False.
    """

    valid: bool
    reason: ValidationReason | None = None

    def __post_init__(self) -> None:
        """Enforce that reason is present exactly when invalid."""
        if self.valid and self.reason is not None:
            raise ValueError("reason must be None for a valid verdict")
        if not self.valid and self.reason is None:
            raise ValueError("reason is required for an invalid verdict")

    @classmethod
    def ok(cls) -> "ValidationVerdict":
        """Build a passing verdict."""
        return cls(valid=True)

    @classmethod
    def failed(cls, reason: ValidationReason) -> "ValidationVerdict":
        """Build a failing verdict with the given reason."""
        return cls(valid=False, reason=reason)

    @property
    def message(self) -> str | None:
        """Human-readable reason, or None when valid."""
        return self.reason.message if self.reason is not None else None
