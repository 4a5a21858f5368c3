"""Stub implementations for development and testing."""

from attachment_core.infrastructure.stubs.display_host_stub import DisplayHostStub

__all__: list[str] = ["DisplayHostStub"]
