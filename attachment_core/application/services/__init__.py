"""Application services - Use case orchestration.

Available services:
- DisplayResourceCache: Content-addressed display resources with deferred revocation
- RevocationSweeper: Background driver for due revocations
- classify_status_check_error: Status lookup failure classification
"""

from attachment_core.application.services.base import LoggingMixin
from attachment_core.application.services.display_resource_cache import (
    RESOURCE_CREATION_FAILED,
    DisplayOutcome,
    DisplayResourceCache,
    DisplayResult,
    DisplaySlot,
    SlotState,
)
from attachment_core.application.services.revocation_sweeper import RevocationSweeper
from attachment_core.application.services.status_check_errors import (
    StatusCheckError,
    StatusCheckErrorCategory,
    classify_status_check_error,
)

__all__: list[str] = [
    "RESOURCE_CREATION_FAILED",
    "DisplayOutcome",
    "DisplayResourceCache",
    "DisplayResult",
    "DisplaySlot",
    "LoggingMixin",
    "RevocationSweeper",
    "SlotState",
    "StatusCheckError",
    "StatusCheckErrorCategory",
    "classify_status_check_error",
]
