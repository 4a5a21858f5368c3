"""Tests for the FakeTimeAuthority test helper."""

from datetime import timedelta

import pytest

from attachment_core.application.ports.time_authority import TimeAuthorityProtocol
from tests.helpers.fake_time_authority import FakeTimeAuthority


class TestFakeTimeAuthorityProtocolCompliance:
    """FakeTimeAuthority must implement TimeAuthorityProtocol."""

    def test_implements_protocol(self) -> None:
        assert isinstance(FakeTimeAuthority(), TimeAuthorityProtocol)

    def test_default_start_is_zero(self) -> None:
        assert FakeTimeAuthority().monotonic() == 0.0

    def test_start_monotonic(self) -> None:
        assert FakeTimeAuthority(start_monotonic=42.0).monotonic() == 42.0


class TestAdvance:
    """advance() moves the monotonic clock."""

    def test_advance_seconds(self) -> None:
        fake_time = FakeTimeAuthority(start_monotonic=100.0)
        fake_time.advance(seconds=10)
        assert fake_time.monotonic() == 110.0
        assert fake_time.elapsed_monotonic == 10.0

    def test_advance_delta(self) -> None:
        fake_time = FakeTimeAuthority()
        fake_time.advance(delta=timedelta(minutes=1))
        assert fake_time.monotonic() == 60.0

    def test_advances_accumulate(self) -> None:
        fake_time = FakeTimeAuthority()
        fake_time.advance(seconds=2.5)
        fake_time.advance(seconds=2.5)
        assert fake_time.elapsed_monotonic == 5.0

    def test_requires_amount(self) -> None:
        with pytest.raises(ValueError):
            FakeTimeAuthority().advance()

    def test_rejects_negative(self) -> None:
        with pytest.raises(ValueError):
            FakeTimeAuthority().advance(seconds=-1)
