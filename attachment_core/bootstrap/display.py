"""Bootstrap wiring for the display resource cache."""

from __future__ import annotations

from attachment_core.application.ports.display_host import DisplayHostProtocol
from attachment_core.application.ports.time_authority import TimeAuthorityProtocol
from attachment_core.application.services.display_resource_cache import (
    DisplayResourceCache,
)
from attachment_core.application.services.revocation_sweeper import RevocationSweeper
from attachment_core.config.attachment_config import DisplayCacheConfig
from attachment_core.infrastructure.adapters.object_url_registry import (
    ObjectUrlRegistry,
)
from attachment_core.infrastructure.adapters.system_time_authority import (
    SystemTimeAuthority,
)
from attachment_core.infrastructure.monitoring.display_metrics import (
    DisplayCacheMetrics,
)


def create_display_cache(
    *,
    config: DisplayCacheConfig | None = None,
    host: DisplayHostProtocol | None = None,
    time_authority: TimeAuthorityProtocol | None = None,
    metrics: DisplayCacheMetrics | None = None,
) -> DisplayResourceCache:
    """Create a display cache wired to production adapters.

    Args:
        config: Cache config (read from the environment if None).
        host: Display host (an ObjectUrlRegistry sized from config if None).
        time_authority: Clock (system clock if None).
        metrics: Metrics collector (a fresh registry if None).

    Returns:
        A new DisplayResourceCache. The caller owns it and must close() it.
    """
    config = config or DisplayCacheConfig.from_environment()
    return DisplayResourceCache(
        host=host or ObjectUrlRegistry(max_resident_bytes=config.max_resident_bytes),
        time_authority=time_authority or SystemTimeAuthority(),
        config=config,
        metrics=metrics or DisplayCacheMetrics(),
    )


def create_revocation_sweeper(cache: DisplayResourceCache) -> RevocationSweeper:
    """Create a sweeper using the cache's configured sweep interval."""
    return RevocationSweeper(cache)


__all__ = ["create_display_cache", "create_revocation_sweeper"]
