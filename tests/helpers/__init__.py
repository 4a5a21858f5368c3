"""Test helpers for attachment core tests.

Helpers:
    FakeTimeAuthority: Controllable time authority for deterministic tests
    build_document: Structurally valid document bytes of a given size

Usage:
    from tests.helpers import FakeTimeAuthority, build_document
"""

from tests.helpers.documents import build_document
from tests.helpers.fake_time_authority import FakeTimeAuthority

__all__ = ["FakeTimeAuthority", "build_document"]
