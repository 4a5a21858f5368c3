"""Classification of status lookup failures.

Maps whatever a failed lookup raised into a category the UI can act on,
a user-facing message, and raw details for debugging.
"""

from __future__ import annotations

import traceback
from dataclasses import dataclass
from enum import Enum

from structlog import get_logger

logger = get_logger(__name__)


class StatusCheckErrorCategory(str, Enum):
    """Broad failure class of a status lookup."""

    CONNECTION = "connection"
    BACKEND = "backend"
    UNKNOWN = "unknown"


CONNECTION_MESSAGE = (
    "Unable to connect to the service. "
    "Please check your internet connection and try again."
)
BACKEND_MESSAGE = (
    "The service rejected your request. "
    "Please verify your application details and try again."
)
UNKNOWN_MESSAGE = "Unable to check application status. Please try again later."

# Matched case-insensitively against the exception message, in order
_CONNECTION_MARKERS = (
    "connection not ready",
    "actor not available",
    "agent",
    "fetch",
    "network",
)
_BACKEND_MARKERS = ("unauthorized", "trap", "rejected")


@dataclass(frozen=True)
class StatusCheckError:
    """Structured status lookup failure.

    Attributes:
        message: User-facing message with actionable guidance.
        category: Category for UI handling.
        technical_details: Raw details for debugging.
    """

    message: str
    category: StatusCheckErrorCategory
    technical_details: str


def _technical_details(error: object) -> str:
    if isinstance(error, BaseException):
        header = f"{type(error).__name__}: {error}"
        if error.__traceback__ is None:
            return header
        stack = "".join(traceback.format_tb(error.__traceback__))
        return f"{header}\n{stack}"
    return str(error)


def classify_status_check_error(error: object) -> StatusCheckError:
    """Classify a status lookup failure.

    Connection markers are checked before backend markers. Values that are
    not exceptions always classify as unknown.

    Args:
        error: Whatever the failed lookup raised or rejected with.

    Returns:
        StatusCheckError.
    """
    details = _technical_details(error)

    if isinstance(error, Exception):
        text = str(error).lower()
        if any(marker in text for marker in _CONNECTION_MARKERS):
            category, message = StatusCheckErrorCategory.CONNECTION, CONNECTION_MESSAGE
        elif any(marker in text for marker in _BACKEND_MARKERS):
            category, message = StatusCheckErrorCategory.BACKEND, BACKEND_MESSAGE
        else:
            category, message = StatusCheckErrorCategory.UNKNOWN, UNKNOWN_MESSAGE
    else:
        category, message = StatusCheckErrorCategory.UNKNOWN, UNKNOWN_MESSAGE

    logger.info(
        "status_check_error_classified",
        category=category.value,
        error_type=type(error).__name__,
    )
    return StatusCheckError(message=message, category=category, technical_details=details)
