"""Recording stub for DisplayHostProtocol.

Issues sequential handles and records every create/revoke call so tests can
assert exactly when the cache touched the host. Failures can be injected
for the next create or for every revoke.

WARNING: This stub is for development/testing only.
Production should use ObjectUrlRegistry or a real host adapter.
"""

from __future__ import annotations

from attachment_core.application.ports.display_host import DisplayHostProtocol
from attachment_core.domain.errors.display import DisplayHostError


class DisplayHostStub(DisplayHostProtocol):
    """In-memory display host for tests.

    Attributes:
        created: (handle, data, content_type) per successful create, in order.
        revoked: Handles passed to revoke_resource, in order.
        live: Handles created and not yet revoked.
        fail_next_create: Number of upcoming creates that should fail.
        fail_revoke: When True, every revoke raises after recording the call.
    """

    def __init__(self, *, fail_next_create: int = 0, fail_revoke: bool = False) -> None:
        self.created: list[tuple[str, bytes, str]] = []
        self.revoked: list[str] = []
        self.live: dict[str, bytes] = {}
        self.fail_next_create = fail_next_create
        self.fail_revoke = fail_revoke
        self.create_attempts = 0
        self._counter = 0

    def create_resource(self, data: bytes, content_type: str) -> str:
        self.create_attempts += 1
        if self.fail_next_create > 0:
            self.fail_next_create -= 1
            raise DisplayHostError("Stub display host refused to create a resource")
        self._counter += 1
        handle = f"stub://resource/{self._counter}"
        self.created.append((handle, data, content_type))
        self.live[handle] = data
        return handle

    def revoke_resource(self, handle: str) -> None:
        self.revoked.append(handle)
        self.live.pop(handle, None)
        if self.fail_revoke:
            raise DisplayHostError(f"Stub display host failed to revoke {handle}")

    def revoke_count(self, handle: str) -> int:
        """Number of times a handle was revoked."""
        return self.revoked.count(handle)

    def clear(self) -> None:
        """Reset recorded calls and injected failures."""
        self.created.clear()
        self.revoked.clear()
        self.live.clear()
        self.fail_next_create = 0
        self.fail_revoke = False
        self.create_attempts = 0
        self._counter = 0
