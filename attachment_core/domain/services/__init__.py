"""Domain services: pure, total transformations of wire attachments.

Nothing here raises for malformed input; failures are reported through
return values (None, verdicts, sentinel signatures).
"""

from attachment_core.domain.services.application_status_decoder import (
    decode_application_status,
    normalize_application_key,
)
from attachment_core.domain.services.attachment_assembly import (
    AttachmentAssembler,
    assemble_attachment,
    ensure_extension,
)
from attachment_core.domain.services.byte_canonicalizer import (
    canonicalize_bytes,
    classify_bytes,
)
from attachment_core.domain.services.signature_engine import (
    compute_signature,
    fnv1a_32,
)
from attachment_core.domain.services.structural_validator import (
    StructuralValidator,
    validate_document,
)
from attachment_core.domain.services.wire_decoder import (
    classify_optional,
    decode_optional,
    normalize_string,
    unwrap_bytes_field,
    unwrap_optional,
)

__all__: list[str] = [
    "AttachmentAssembler",
    "StructuralValidator",
    "assemble_attachment",
    "canonicalize_bytes",
    "classify_bytes",
    "classify_optional",
    "compute_signature",
    "decode_application_status",
    "decode_optional",
    "ensure_extension",
    "fnv1a_32",
    "normalize_application_key",
    "normalize_string",
    "unwrap_bytes_field",
    "unwrap_optional",
    "validate_document",
]
