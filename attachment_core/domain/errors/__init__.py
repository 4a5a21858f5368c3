"""Domain errors for attachment core.

Provides specific exception classes for different failure scenarios.
All exceptions inherit from AttachmentCoreError.
"""

from attachment_core.domain.errors.attachment import InvalidAttachmentError
from attachment_core.domain.errors.display import (
    DisplayCacheClosedError,
    DisplayCapacityExceededError,
    DisplayHostError,
    UnknownSlotError,
)

__all__: list[str] = [
    "DisplayCacheClosedError",
    "DisplayCapacityExceededError",
    "DisplayHostError",
    "InvalidAttachmentError",
    "UnknownSlotError",
]
