"""Unit tests for SystemTimeAuthority."""

from attachment_core.application.ports.time_authority import TimeAuthorityProtocol
from attachment_core.infrastructure.adapters.system_time_authority import (
    SystemTimeAuthority,
)


class TestSystemTimeAuthority:
    """Real clock adapter."""

    def test_implements_port(self) -> None:
        assert isinstance(SystemTimeAuthority(), TimeAuthorityProtocol)

    def test_monotonic_non_decreasing(self) -> None:
        clock = SystemTimeAuthority()
        first = clock.monotonic()
        assert clock.monotonic() >= first
