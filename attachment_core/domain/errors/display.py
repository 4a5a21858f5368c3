"""Display resource errors.

DisplayHostError is the host platform boundary: adapters raise it (or a
subclass) when a display handle cannot be materialized or revoked. The cache
catches it and converts creation failures into a returned outcome.

UnknownSlotError and DisplayCacheClosedError signal caller bugs and are
propagated.
"""

from __future__ import annotations

from attachment_core.domain.exceptions import AttachmentCoreError


class DisplayHostError(AttachmentCoreError):
    """Host platform could not create or revoke a display resource."""

    pass


class DisplayCapacityExceededError(DisplayHostError):
    """Host platform is out of room for another resident resource.

    Attributes:
        requested_bytes: Size of the rejected resource.
        resident_bytes: Bytes already held by the host.
        max_resident_bytes: Configured capacity.
    """

    def __init__(
        self,
        requested_bytes: int,
        resident_bytes: int,
        max_resident_bytes: int,
    ) -> None:
        """Initialize the error.

        Args:
            requested_bytes: Size of the rejected resource.
            resident_bytes: Bytes already held by the host.
            max_resident_bytes: Configured capacity.
        """
        self.requested_bytes = requested_bytes
        self.resident_bytes = resident_bytes
        self.max_resident_bytes = max_resident_bytes
        super().__init__(
            f"Display host capacity exceeded: {requested_bytes} requested, "
            f"{resident_bytes}/{max_resident_bytes} bytes resident"
        )


class UnknownSlotError(AttachmentCoreError):
    """Error when a request names a slot the cache never opened.

    Attributes:
        slot_id: The unknown slot identifier.
    """

    def __init__(self, slot_id: str) -> None:
        """Initialize the error.

        Args:
            slot_id: The unknown slot identifier.
        """
        self.slot_id = slot_id
        super().__init__(f"Unknown display slot: {slot_id}")


class DisplayCacheClosedError(AttachmentCoreError):
    """Error when the cache is used after close()."""

    def __init__(self) -> None:
        """Initialize the error."""
        super().__init__("Display resource cache is closed")
