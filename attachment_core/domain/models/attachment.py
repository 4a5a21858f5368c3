"""Normalized attachment domain model.

An Attachment is what rendering code receives after a wire record has been
unwrapped, canonicalized and defaulted. It is never built around empty
bytes: absence of a usable payload collapses to "no attachment" upstream.
"""

from __future__ import annotations

from dataclasses import dataclass

from attachment_core.domain.errors.attachment import InvalidAttachmentError


@dataclass(frozen=True)
class Attachment:
    """A single binary document attached to a record.

    Attributes:
        filename: Display/download name, already carrying the document extension.
        content_type: MIME type to bind when creating display resources.
        data: Canonical document bytes (non-empty).
    """

    filename: str
    content_type: str
    data: bytes

    def __post_init__(self) -> None:
        """Validate fields after initialization.

        Raises:
            InvalidAttachmentError: If any field fails validation.
        """
        if not isinstance(self.data, bytes):
            raise InvalidAttachmentError(
                "data", f"must be bytes, got {type(self.data).__name__}"
            )
        if not self.data:
            raise InvalidAttachmentError("data", "must be non-empty")
        if not isinstance(self.filename, str) or not self.filename.strip():
            raise InvalidAttachmentError("filename", "must be a non-empty string")
        if not isinstance(self.content_type, str) or not self.content_type.strip():
            raise InvalidAttachmentError("content_type", "must be a non-empty string")

    @property
    def size(self) -> int:
        """Length of the attachment in bytes."""
        return len(self.data)

    def __repr__(self) -> str:
        return (
            f"Attachment(filename={self.filename!r}, "
            f"content_type={self.content_type!r}, size={self.size})"
        )
