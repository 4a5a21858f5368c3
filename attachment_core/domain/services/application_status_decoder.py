"""Decoder for application status lookup responses.

The lookup returns an optional status record. The bindings may deliver the
optional as null, as a zero/one-element list, as a tagged record, or as the
bare record itself. A bare record is only accepted when it carries both
identifiers; any other shape decodes to None with a warning.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import structlog

from attachment_core.domain.models.application_status import (
    ApplicationKey,
    ApplicationStatus,
)
from attachment_core.domain.services.attachment_assembly import (
    ATTACHMENT_FIELD,
    AttachmentAssembler,
)
from attachment_core.domain.services.wire_decoder import (
    normalize_string,
    unwrap_optional,
)

logger = structlog.get_logger(__name__)

_DEFAULT_ASSEMBLER = AttachmentAssembler()


def normalize_application_key(application_id: str, applicant_email: str) -> ApplicationKey:
    """Normalize lookup identifiers so every path queries the same key.

    Args:
        application_id: Identifier as typed by the user.
        applicant_email: Email as typed by the user.

    Returns:
        ApplicationKey with a trimmed id and a trimmed, lower-cased email.
    """
    return ApplicationKey(
        application_id=application_id.strip(),
        applicant_email=applicant_email.strip().lower(),
    )


def _text(record: Mapping[str, Any], key: str) -> str:
    return normalize_string(unwrap_optional(record.get(key))) or ""


def _nanos(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().isdigit():
        return int(value.strip())
    return None


def decode_application_status(
    raw_response: Any,
    assembler: AttachmentAssembler | None = None,
) -> ApplicationStatus | None:
    """Decode a raw status lookup response.

    Args:
        raw_response: Response as received from the boundary.
        assembler: Attachment assembler (default document format if None).

    Returns:
        ApplicationStatus, or None when the response is absent or malformed.
    """
    record = unwrap_optional(raw_response)
    if record is None:
        return None
    if not isinstance(record, Mapping):
        logger.warning(
            "application_status_unexpected_shape",
            type_name=type(record).__name__,
        )
        return None

    application_id = _text(record, "applicationId")
    applicant_email = _text(record, "applicantEmail")
    if not application_id or not applicant_email:
        logger.warning(
            "application_status_missing_identifiers",
            has_application_id=bool(application_id),
            has_applicant_email=bool(applicant_email),
        )
        return None

    attachment = (assembler or _DEFAULT_ASSEMBLER).assemble_field(
        record.get(ATTACHMENT_FIELD)
    )

    return ApplicationStatus(
        application_id=application_id,
        applicant_email=applicant_email,
        applicant_name=_text(record, "applicantName"),
        status=_text(record, "status"),
        visa_type=_text(record, "visaType"),
        last_updated_ns=_nanos(unwrap_optional(record.get("lastUpdated"))),
        comments=normalize_string(unwrap_optional(record.get("comments"))),
        attachment=attachment,
    )
