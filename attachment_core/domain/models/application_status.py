"""Application status record returned by the public status lookup.

Only the shape needed by rendering code is modelled here: identifiers,
human-facing status fields and the optional attachment. Timestamps arrive
from the boundary as integer nanoseconds since the epoch.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone

from attachment_core.domain.models.attachment import Attachment

_NANOS_PER_SECOND = 1_000_000_000


@dataclass(frozen=True)
class ApplicationKey:
    """Normalized lookup key for an application status.

    Attributes:
        application_id: Trimmed application identifier.
        applicant_email: Trimmed, lower-cased applicant email.
    """

    application_id: str
    applicant_email: str


@dataclass(frozen=True)
class ApplicationStatus:
    """Decoded application status record.

    Attributes:
        application_id: Application identifier.
        applicant_email: Applicant email address.
        applicant_name: Applicant display name (may be empty).
        status: Current status label (may be empty).
        visa_type: Visa subclass label (may be empty).
        last_updated_ns: Last update time in nanoseconds, if present.
        comments: Optional free-text comments.
        attachment: Optional normalized attachment.
    """

    application_id: str
    applicant_email: str
    applicant_name: str = ""
    status: str = ""
    visa_type: str = ""
    last_updated_ns: int | None = None
    comments: str | None = None
    attachment: Attachment | None = None

    @property
    def key(self) -> ApplicationKey:
        """Lookup key for this record."""
        return ApplicationKey(
            application_id=self.application_id.strip(),
            applicant_email=self.applicant_email.strip().lower(),
        )

    @property
    def last_updated_at(self) -> datetime | None:
        """Last update time as an aware UTC datetime.

        None when absent or outside the range datetime can represent.
        """
        if self.last_updated_ns is None:
            return None
        seconds, nanos = divmod(self.last_updated_ns, _NANOS_PER_SECOND)
        try:
            moment = datetime.fromtimestamp(seconds, tz=timezone.utc)
        except (OverflowError, ValueError, OSError):
            return None
        return moment.replace(microsecond=nanos // 1000)

    @property
    def has_attachment(self) -> bool:
        return self.attachment is not None
