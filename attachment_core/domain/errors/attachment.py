"""Attachment model errors.

Raised only when code constructs an Attachment that breaks its invariants.
Assembly from wire input never raises these: it returns None instead.
"""

from __future__ import annotations

from attachment_core.domain.exceptions import AttachmentCoreError


class InvalidAttachmentError(AttachmentCoreError):
    """Error when an Attachment would be constructed in a degenerate state.

    Attributes:
        field: Name of the offending field.
    """

    def __init__(self, field: str, detail: str) -> None:
        """Initialize the error.

        Args:
            field: Name of the offending field.
            detail: What is wrong with it.
        """
        self.field = field
        super().__init__(f"Invalid attachment: {field} {detail}")
