"""Structural validator for attachment documents.

A fast, cheap yes/no before attempting to render: the buffer must be large
enough, start with the document's magic header, and contain the trailer
marker somewhere in its trailing window. This is a sniff test, not a parse.
It accepts some malformed documents whose header and trailer are intact and
rejects every document with a corrupted header or truncated trailer.
"""

from __future__ import annotations

from typing import Any

import structlog

from attachment_core.config.attachment_config import (
    PDF_DOCUMENT_FORMAT,
    DocumentFormatConfig,
)
from attachment_core.domain.models.validation import ValidationReason, ValidationVerdict
from attachment_core.domain.services.byte_canonicalizer import canonicalize_bytes

logger = structlog.get_logger(__name__)


class StructuralValidator:
    """Header/trailer sniff test for one binary document kind.

    Example:
        >>> validator = StructuralValidator()
        >>> validator.validate(b"%PDF-" + b" " * 100 + b"%%EOF").valid
        True
    """

    def __init__(self, document_format: DocumentFormatConfig = PDF_DOCUMENT_FORMAT) -> None:
        """Initialize the validator.

        Args:
            document_format: Header, trailer and size thresholds to enforce.
        """
        self._format = document_format

    @property
    def document_format(self) -> DocumentFormatConfig:
        return self._format

    def validate(self, data: Any) -> ValidationVerdict:
        """Decide whether a buffer is a well-formed document.

        Args:
            data: Canonical bytes. Other byte encodings are canonicalized
                first; anything that cannot be is reported as empty.

        Returns:
            ValidationVerdict with a reason when invalid.
        """
        buffer = data if isinstance(data, bytes) else canonicalize_bytes(data)
        if not buffer:
            return self._reject(ValidationReason.EMPTY, size=0)

        size = len(buffer)
        if size < self._format.min_size:
            return self._reject(ValidationReason.TOO_SMALL, size=size)

        header = self._format.header
        if buffer[: len(header)] != header:
            return self._reject(ValidationReason.MISSING_HEADER, size=size)

        if self.find_trailer(buffer) < 0:
            return self._reject(ValidationReason.MISSING_TRAILER, size=size)

        return ValidationVerdict.ok()

    def find_trailer(self, buffer: bytes) -> int:
        """Locate the trailer marker within the trailing window.

        Every byte offset of the last ``min(len, trailer_window)`` bytes is a
        candidate; the marker must lie entirely inside the window. The match
        is on raw bytes, never on a decoded string.

        Args:
            buffer: Canonical bytes.

        Returns:
            Offset of the first match, or -1.
        """
        window_start = max(0, len(buffer) - self._format.trailer_window)
        return buffer.find(self._format.trailer, window_start)

    def _reject(self, reason: ValidationReason, size: int) -> ValidationVerdict:
        logger.debug("document_validation_failed", reason=reason.value, size=size)
        return ValidationVerdict.failed(reason)


_DEFAULT_VALIDATOR = StructuralValidator()


def validate_document(data: Any) -> ValidationVerdict:
    """Validate bytes against the default document format."""
    return _DEFAULT_VALIDATOR.validate(data)
