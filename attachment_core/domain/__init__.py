"""Domain layer for attachment core.

Pure models and total transformation services. The domain imports nothing
from the application, infrastructure or api layers.
"""

from attachment_core.domain.errors import (
    DisplayCacheClosedError,
    DisplayHostError,
    InvalidAttachmentError,
    UnknownSlotError,
)
from attachment_core.domain.exceptions import AttachmentCoreError
from attachment_core.domain.models import Attachment

__all__: list[str] = [
    "Attachment",
    "AttachmentCoreError",
    "DisplayCacheClosedError",
    "DisplayHostError",
    "InvalidAttachmentError",
    "UnknownSlotError",
]
