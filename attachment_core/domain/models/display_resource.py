"""Display resource lifecycle models.

A display resource is an opaque, revocable handle into host platform memory
(for example an object URL) that lets rendering code show a document without
holding its bytes. The cache owns every resource; consumers only borrow it
while it is ACTIVE or PENDING_REVOCATION.

Lifecycle:
    CREATED -> ACTIVE -> PENDING_REVOCATION -> REVOKED
                  ^               |
                  +---------------+  (same content requested before deadline)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class ResourceState(str, Enum):
    """Lifecycle state of a display resource."""

    CREATED = "created"
    ACTIVE = "active"
    PENDING_REVOCATION = "pending_revocation"
    REVOKED = "revoked"


@dataclass(eq=False)
class DisplayResource:
    """Host display handle tagged with the content it was created for.

    Attributes:
        handle: Host-issued opaque identifier (e.g. "blob:...").
        signature: Content signature of the bytes behind the handle.
        content_type: MIME type bound at creation.
        size: Byte length of the content.
        created_at: Monotonic clock reading at creation.
        state: Current lifecycle state.
    """

    handle: str
    signature: str
    content_type: str
    size: int
    created_at: float
    state: ResourceState = ResourceState.CREATED

    @property
    def is_usable(self) -> bool:
        """True while consumers may still read the handle."""
        return self.state in (ResourceState.ACTIVE, ResourceState.PENDING_REVOCATION)


class RevocationToken:
    """Cancellation token for one scheduled revocation.

    A fresh token is issued every time a resource is scheduled for
    revocation, so cancelling an old schedule never affects a newer one.
    """

    __slots__ = ("_cancelled",)

    def __init__(self) -> None:
        self._cancelled = False

    def cancel(self) -> None:
        """Mark the scheduled revocation as cancelled."""
        self._cancelled = True

    @property
    def cancelled(self) -> bool:
        return self._cancelled


@dataclass(frozen=True)
class PendingRevocation:
    """A revocation scheduled for a fixed monotonic deadline.

    The deadline is fixed when scheduled and is never extended.

    Attributes:
        deadline: Monotonic time at or after which revocation may run.
        token: Cancellation token for this schedule.
    """

    deadline: float
    token: RevocationToken = field(default_factory=RevocationToken)

    def is_due(self, now: float) -> bool:
        """Return True when the deadline has passed and nobody cancelled."""
        return not self.token.cancelled and now >= self.deadline
