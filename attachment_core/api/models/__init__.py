"""API response models."""

from attachment_core.api.models.attachment import (
    AttachmentSummaryResponse,
    DisplayStateResponse,
)

__all__: list[str] = ["AttachmentSummaryResponse", "DisplayStateResponse"]
