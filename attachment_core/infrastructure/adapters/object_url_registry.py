"""In-process object URL registry.

Implements DisplayHostProtocol the way a browser implements object URLs:
each created resource gets a unique ``blob:`` handle that resolves to the
stored bytes until it is revoked. Resident bytes are capped so resource
exhaustion surfaces as DisplayHostError instead of unbounded growth.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from uuid import uuid4

from structlog import get_logger

from attachment_core.application.ports.display_host import DisplayHostProtocol
from attachment_core.domain.errors.display import DisplayCapacityExceededError

logger = get_logger(__name__)

HANDLE_PREFIX = "blob:attachment-core/"


@dataclass(frozen=True)
class StoredResource:
    """Bytes and content type behind a handle."""

    data: bytes
    content_type: str


class ObjectUrlRegistry(DisplayHostProtocol):
    """Thread-safe handle -> bytes registry.

    Attributes:
        max_resident_bytes: Capacity across all live handles (None = unbounded).
    """

    def __init__(self, max_resident_bytes: int | None = None) -> None:
        """Initialize the registry.

        Args:
            max_resident_bytes: Capacity across all live handles, or None.
        """
        if max_resident_bytes is not None and max_resident_bytes <= 0:
            raise ValueError(
                f"max_resident_bytes must be positive, got {max_resident_bytes}"
            )
        self._max_resident_bytes = max_resident_bytes
        self._resources: dict[str, StoredResource] = {}
        self._resident_bytes = 0
        self._lock = threading.Lock()

    @property
    def max_resident_bytes(self) -> int | None:
        return self._max_resident_bytes

    @property
    def resident_bytes(self) -> int:
        with self._lock:
            return self._resident_bytes

    def __len__(self) -> int:
        with self._lock:
            return len(self._resources)

    def __contains__(self, handle: object) -> bool:
        with self._lock:
            return handle in self._resources

    def create_resource(self, data: bytes, content_type: str) -> str:
        """Store bytes and issue a new handle.

        Raises:
            DisplayCapacityExceededError: If storing would exceed capacity.
        """
        size = len(data)
        with self._lock:
            if (
                self._max_resident_bytes is not None
                and self._resident_bytes + size > self._max_resident_bytes
            ):
                raise DisplayCapacityExceededError(
                    requested_bytes=size,
                    resident_bytes=self._resident_bytes,
                    max_resident_bytes=self._max_resident_bytes,
                )
            handle = f"{HANDLE_PREFIX}{uuid4()}"
            self._resources[handle] = StoredResource(bytes(data), content_type)
            self._resident_bytes += size

        logger.debug(
            "object_url_created",
            handle=handle,
            content_type=content_type,
            size=size,
        )
        return handle

    def revoke_resource(self, handle: str) -> None:
        with self._lock:
            resource = self._resources.pop(handle, None)
            if resource is None:
                return
            self._resident_bytes -= len(resource.data)
        logger.debug("object_url_revoked", handle=handle)

    def resolve(self, handle: str) -> StoredResource | None:
        """Read what a handle points at.

        Args:
            handle: Handle issued by create_resource.

        Returns:
            StoredResource, or None if the handle was revoked or never issued.
        """
        with self._lock:
            return self._resources.get(handle)
