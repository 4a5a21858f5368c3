"""Domain models for attachment core."""

from attachment_core.domain.models.application_status import (
    ApplicationKey,
    ApplicationStatus,
)
from attachment_core.domain.models.attachment import Attachment
from attachment_core.domain.models.content_signature import (
    EMPTY_SIGNATURE,
    ERROR_SIGNATURE,
    INVALID_TYPE_SIGNATURE,
    SENTINEL_SIGNATURES,
    ContentSignature,
    is_content_derived,
)
from attachment_core.domain.models.display_resource import (
    DisplayResource,
    PendingRevocation,
    ResourceState,
    RevocationToken,
)
from attachment_core.domain.models.validation import ValidationReason, ValidationVerdict
from attachment_core.domain.models.wire_value import CanonicalBytes

__all__: list[str] = [
    "ApplicationKey",
    "ApplicationStatus",
    "Attachment",
    "CanonicalBytes",
    "ContentSignature",
    "DisplayResource",
    "EMPTY_SIGNATURE",
    "ERROR_SIGNATURE",
    "INVALID_TYPE_SIGNATURE",
    "PendingRevocation",
    "ResourceState",
    "RevocationToken",
    "SENTINEL_SIGNATURES",
    "ValidationReason",
    "ValidationVerdict",
    "is_content_derived",
]
