"""Unit tests for the in-process object URL registry."""

import pytest

from attachment_core.application.ports.display_host import DisplayHostProtocol
from attachment_core.domain.errors.display import (
    DisplayCapacityExceededError,
    DisplayHostError,
)
from attachment_core.infrastructure.adapters.object_url_registry import (
    HANDLE_PREFIX,
    ObjectUrlRegistry,
    StoredResource,
)


class TestObjectUrlRegistry:
    """Handle issuance, resolution and revocation."""

    def test_implements_port(self) -> None:
        assert isinstance(ObjectUrlRegistry(), DisplayHostProtocol)

    def test_create_and_resolve(self) -> None:
        registry = ObjectUrlRegistry()
        handle = registry.create_resource(b"abc", "application/pdf")

        assert handle.startswith(HANDLE_PREFIX)
        assert handle in registry
        assert registry.resolve(handle) == StoredResource(b"abc", "application/pdf")
        assert registry.resident_bytes == 3
        assert len(registry) == 1

    def test_unique_handles(self) -> None:
        registry = ObjectUrlRegistry()
        first = registry.create_resource(b"abc", "application/pdf")
        second = registry.create_resource(b"abc", "application/pdf")
        assert first != second

    def test_revoke(self) -> None:
        registry = ObjectUrlRegistry()
        handle = registry.create_resource(b"abc", "application/pdf")
        registry.revoke_resource(handle)

        assert registry.resolve(handle) is None
        assert handle not in registry
        assert registry.resident_bytes == 0

    def test_revoke_unknown_is_noop(self) -> None:
        registry = ObjectUrlRegistry()
        registry.revoke_resource("blob:attachment-core/missing")
        assert len(registry) == 0

    def test_capacity(self) -> None:
        registry = ObjectUrlRegistry(max_resident_bytes=5)
        registry.create_resource(b"abc", "application/pdf")

        with pytest.raises(DisplayCapacityExceededError) as exc_info:
            registry.create_resource(b"def", "application/pdf")

        error = exc_info.value
        assert isinstance(error, DisplayHostError)
        assert error.requested_bytes == 3
        assert error.resident_bytes == 3
        assert error.max_resident_bytes == 5

    def test_capacity_freed_by_revoke(self) -> None:
        registry = ObjectUrlRegistry(max_resident_bytes=5)
        handle = registry.create_resource(b"abc", "application/pdf")
        registry.revoke_resource(handle)
        registry.create_resource(b"defgh", "application/pdf")
        assert registry.resident_bytes == 5

    def test_invalid_capacity(self) -> None:
        with pytest.raises(ValueError):
            ObjectUrlRegistry(max_resident_bytes=0)
