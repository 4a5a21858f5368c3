"""Attachment assembly from raw wire records.

Composes the wire decoder and byte canonicalizer: unwraps the record, its
``attachment`` field and each of ``filename`` / ``contentType`` / ``bytes``,
canonicalizes the payload and applies defaults.

Wrapper structure with no actual payload is treated exactly like absence:
the result is None, never an Attachment with empty bytes.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import structlog

from attachment_core.config.attachment_config import (
    PDF_DOCUMENT_FORMAT,
    DocumentFormatConfig,
)
from attachment_core.domain.models.attachment import Attachment
from attachment_core.domain.services.byte_canonicalizer import canonicalize_bytes
from attachment_core.domain.services.wire_decoder import (
    normalize_string,
    unwrap_bytes_field,
    unwrap_optional,
)

logger = structlog.get_logger(__name__)

# Wire field names
ATTACHMENT_FIELD = "attachment"
FILENAME_FIELD = "filename"
CONTENT_TYPE_FIELD = "contentType"
BYTES_FIELD = "bytes"


def ensure_extension(
    filename: str | None,
    document_format: DocumentFormatConfig = PDF_DOCUMENT_FORMAT,
) -> str:
    """Return a usable filename carrying the document extension.

    Blank names fall back to the default filename; names without the
    extension (case-insensitive) get it appended.

    Example:
        >>> ensure_extension("visa grant")
        'visa grant.pdf'
        >>> ensure_extension("REPORT.PDF")
        'REPORT.PDF'
    """
    name = (filename or "").strip() or document_format.default_filename
    if not name.lower().endswith(document_format.extension.lower()):
        name = f"{name}{document_format.extension}"
    return name


class AttachmentAssembler:
    """Builds normalized attachments from raw wire records."""

    def __init__(self, document_format: DocumentFormatConfig = PDF_DOCUMENT_FORMAT) -> None:
        """Initialize the assembler.

        Args:
            document_format: Supplies the default MIME type and extension.
        """
        self._format = document_format

    def assemble(self, raw_record: Any) -> Attachment | None:
        """Produce the attachment carried by a raw record, if any.

        Args:
            raw_record: Record as received, optionally wrapped.

        Returns:
            A normalized Attachment, or None when the record, its attachment
            field or the attachment's payload is absent or unusable.
        """
        record = unwrap_optional(raw_record)
        if record is None:
            return None
        if not isinstance(record, Mapping):
            logger.warning(
                "attachment_record_unexpected_shape",
                type_name=type(record).__name__,
            )
            return None
        return self.assemble_field(record.get(ATTACHMENT_FIELD))

    def assemble_field(self, raw_attachment: Any) -> Attachment | None:
        """Produce an attachment from the attachment sub-record alone.

        Args:
            raw_attachment: The ``attachment`` field value, optionally wrapped.

        Returns:
            A normalized Attachment, or None.
        """
        attachment = unwrap_optional(raw_attachment)
        if attachment is None:
            return None
        if not isinstance(attachment, Mapping):
            logger.warning(
                "attachment_field_unexpected_shape",
                type_name=type(attachment).__name__,
            )
            return None

        data = canonicalize_bytes(unwrap_bytes_field(attachment.get(BYTES_FIELD)))
        if not data:
            logger.debug("attachment_payload_absent")
            return None

        filename = ensure_extension(
            normalize_string(unwrap_optional(attachment.get(FILENAME_FIELD))),
            self._format,
        )
        content_type = (
            normalize_string(unwrap_optional(attachment.get(CONTENT_TYPE_FIELD)))
            or self._format.mime_type
        )

        return Attachment(filename=filename, content_type=content_type, data=data)


_DEFAULT_ASSEMBLER = AttachmentAssembler()


def assemble_attachment(raw_record: Any) -> Attachment | None:
    """Assemble an attachment using the default document format."""
    return _DEFAULT_ASSEMBLER.assemble(raw_record)
