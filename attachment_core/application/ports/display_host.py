"""Display host port - the host platform's revocable resource store.

A display host turns bytes plus a content type into an opaque handle that
rendering surfaces can read asynchronously (an object URL in a browser, a
temp-file path, a viewer session id). Handles stay valid until revoked.

Implementations should raise DisplayHostError (or a subclass) for platform
failures. The cache treats any exception from create_resource as a "cannot
display" outcome and logs any exception from revoke_resource.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class DisplayHostProtocol(ABC):
    """Abstract interface for host display resources."""

    @abstractmethod
    def create_resource(self, data: bytes, content_type: str) -> str:
        """Materialize a display resource.

        Args:
            data: Canonical document bytes.
            content_type: MIME type to bind to the resource.

        Returns:
            Opaque handle identifying the resource.

        Raises:
            DisplayHostError: If the platform cannot create the resource.
        """
        ...

    @abstractmethod
    def revoke_resource(self, handle: str) -> None:
        """Release a display resource.

        Revoking a handle that is already gone must be a no-op.

        Args:
            handle: Handle returned by create_resource.

        Raises:
            DisplayHostError: If the platform fails to release it.
        """
        ...
