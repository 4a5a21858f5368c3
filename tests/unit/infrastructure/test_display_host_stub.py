"""Unit tests for DisplayHostStub."""

import pytest

from attachment_core.domain.errors.display import DisplayHostError
from attachment_core.infrastructure.stubs.display_host_stub import DisplayHostStub


class TestDisplayHostStub:
    """Recording and failure injection."""

    def test_records_calls(self) -> None:
        stub = DisplayHostStub()
        handle = stub.create_resource(b"abc", "application/pdf")
        stub.revoke_resource(handle)

        assert stub.created == [(handle, b"abc", "application/pdf")]
        assert stub.revoked == [handle]
        assert stub.live == {}
        assert stub.revoke_count(handle) == 1

    def test_fail_next_create(self) -> None:
        stub = DisplayHostStub(fail_next_create=1)
        with pytest.raises(DisplayHostError):
            stub.create_resource(b"abc", "application/pdf")
        assert stub.create_resource(b"abc", "application/pdf")
        assert stub.create_attempts == 2

    def test_fail_revoke_still_records(self) -> None:
        stub = DisplayHostStub(fail_revoke=True)
        handle = stub.create_resource(b"abc", "application/pdf")
        with pytest.raises(DisplayHostError):
            stub.revoke_resource(handle)
        assert stub.revoked == [handle]

    def test_clear(self) -> None:
        stub = DisplayHostStub(fail_revoke=True)
        stub.create_resource(b"abc", "application/pdf")
        stub.clear()
        assert stub.created == []
        assert not stub.fail_revoke
        assert stub.create_resource(b"x", "text/plain") == "stub://resource/1"
