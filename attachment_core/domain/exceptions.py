"""Base exception classes for the attachment core domain layer."""


class AttachmentCoreError(Exception):
    """Base exception for all attachment core errors.

    All package-specific exceptions MUST inherit from this class.

    Malformed wire input never raises: decoders report absence through their
    return values. Exceptions are reserved for host platform failures and
    programming errors (unknown slots, use after close, invalid models).
    """

    def __init__(self, message: str = "") -> None:
        """Initialize the exception with an optional message.

        Args:
            message: Human-readable error description.
        """
        super().__init__(message)
