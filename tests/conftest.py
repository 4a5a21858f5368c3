"""
Pytest configuration and shared fixtures for attachment core tests.

Testing Standards:
- Async tests run in pytest-asyncio auto mode (enabled in pyproject.toml)
- Every test gets a fresh cache, host and clock
- Unit tests go in tests/unit/
- Integration tests go in tests/integration/
"""

from collections.abc import Iterator

import pytest

from attachment_core.application.services.display_resource_cache import (
    DisplayResourceCache,
)
from attachment_core.config.attachment_config import (
    TEST_DISPLAY_CACHE_CONFIG,
    DisplayCacheConfig,
)
from attachment_core.infrastructure.monitoring.display_metrics import (
    DisplayCacheMetrics,
)
from attachment_core.infrastructure.stubs.display_host_stub import DisplayHostStub
from tests.helpers import FakeTimeAuthority, build_document


@pytest.fixture
def project_version() -> str:
    """Provide the current project version for tests."""
    from attachment_core import __version__

    return __version__


@pytest.fixture
def fake_time_authority() -> FakeTimeAuthority:
    """Fresh controllable clock."""
    return FakeTimeAuthority()


@pytest.fixture
def display_config() -> DisplayCacheConfig:
    """Cache config with a 5 second grace delay."""
    return TEST_DISPLAY_CACHE_CONFIG


@pytest.fixture
def display_host() -> DisplayHostStub:
    """Recording display host."""
    return DisplayHostStub()


@pytest.fixture
def display_metrics() -> DisplayCacheMetrics:
    """Metrics bound to an isolated registry."""
    return DisplayCacheMetrics()


@pytest.fixture
def display_cache(
    display_host: DisplayHostStub,
    fake_time_authority: FakeTimeAuthority,
    display_config: DisplayCacheConfig,
    display_metrics: DisplayCacheMetrics,
) -> Iterator[DisplayResourceCache]:
    """Fresh cache per test, closed afterwards."""
    cache = DisplayResourceCache(
        display_host,
        fake_time_authority,
        config=display_config,
        metrics=display_metrics,
    )
    yield cache
    cache.close()


@pytest.fixture
def valid_document() -> bytes:
    """202-byte structurally valid document."""
    return build_document(202)
