"""Attachment API models.

Pydantic models describing an attachment and its display state for
rendering code. Bytes are never serialized; only their size and signature.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from attachment_core.application.services.display_resource_cache import (
    DisplayOutcome,
    DisplayResult,
)
from attachment_core.domain.models.attachment import Attachment
from attachment_core.domain.services.signature_engine import compute_signature


class AttachmentSummaryResponse(BaseModel):
    """Response model describing a normalized attachment.

    Attributes:
        filename: Download-ready filename.
        content_type: MIME type.
        size: Length in bytes.
        signature: Content signature of the bytes.
    """

    filename: str = Field(..., description="Download-ready filename")
    content_type: str = Field(..., description="MIME type of the document")
    size: int = Field(..., description="Length of the document in bytes", gt=0)
    signature: str = Field(..., description="Content signature of the document bytes")

    @classmethod
    def from_attachment(cls, attachment: Attachment) -> AttachmentSummaryResponse:
        """Build the summary for a domain attachment."""
        return cls(
            filename=attachment.filename,
            content_type=attachment.content_type,
            size=attachment.size,
            signature=compute_signature(attachment.data),
        )


class DisplayStateResponse(BaseModel):
    """Response model for one display request.

    Attributes:
        outcome: no_document, invalid_document, display_failed or ready.
        signature: Content signature (or sentinel) of the requested bytes.
        handle: Display handle when ready.
        error: Reason code when invalid or not displayable.
        message: Human-readable explanation.
    """

    outcome: DisplayOutcome = Field(..., description="What the viewer should show")
    signature: str = Field(..., description="Content signature or sentinel")
    handle: str | None = Field(default=None, description="Display handle when ready")
    error: str | None = Field(default=None, description="Reason code on failure")
    message: str | None = Field(default=None, description="Human-readable explanation")

    @classmethod
    def from_result(cls, result: DisplayResult) -> DisplayStateResponse:
        """Build the response for a cache DisplayResult."""
        return cls(
            outcome=result.outcome,
            signature=result.signature,
            handle=result.handle,
            error=result.error,
            message=result.message,
        )
