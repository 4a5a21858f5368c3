"""Background driver for deferred revocation.

The display cache only revokes resources when sweep() is called. In an
asyncio host, RevocationSweeper runs a background task that sweeps at a
fixed interval so grace delays actually elapse without consumer activity.
"""

from __future__ import annotations

import asyncio
import contextlib

from structlog import get_logger

from attachment_core.application.services.display_resource_cache import (
    DisplayResourceCache,
)

logger = get_logger(__name__)


class RevocationSweeper:
    """Periodically sweeps a DisplayResourceCache.

    Example:
        >>> sweeper = RevocationSweeper(cache, interval_seconds=1.0)
        >>> await sweeper.start()
        >>> # ... runs in background
        >>> await sweeper.stop()
    """

    def __init__(
        self,
        cache: DisplayResourceCache,
        *,
        interval_seconds: float | None = None,
    ) -> None:
        """Initialize the sweeper.

        Args:
            cache: Cache whose due revocations should fire.
            interval_seconds: Seconds between sweeps (the cache's configured
                sweep interval if None).
        """
        interval = (
            interval_seconds
            if interval_seconds is not None
            else cache.config.sweep_interval_seconds
        )
        if interval <= 0:
            raise ValueError(f"interval_seconds must be positive, got {interval}")
        self._cache = cache
        self._interval = interval
        self._is_running = False
        self._task: asyncio.Task[None] | None = None
        self._total_revoked = 0
        self._log = logger.bind(component="revocation_sweeper")

    @property
    def interval_seconds(self) -> float:
        return self._interval

    @property
    def is_running(self) -> bool:
        """Check if the sweep loop is active."""
        return self._is_running

    @property
    def total_revoked(self) -> int:
        """Resources revoked by this sweeper since it was created."""
        return self._total_revoked

    def run_once(self) -> int:
        """Run one sweep now.

        Returns:
            Number of resources revoked.
        """
        revoked = self._cache.sweep()
        self._total_revoked += revoked
        return revoked

    async def start(self) -> None:
        """Start the background sweep loop. No-op if already running."""
        if self._is_running:
            self._log.warning("sweeper_already_running")
            return

        self._is_running = True
        self._task = asyncio.create_task(self._sweep_loop())
        self._log.info("sweeper_started", interval_seconds=self._interval)

    async def stop(self) -> None:
        """Stop the background sweep loop and wait for it to finish."""
        if not self._is_running:
            self._log.debug("sweeper_not_running")
            return

        self._is_running = False

        if self._task is not None:
            self._task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await self._task
            self._task = None

        self._log.info("sweeper_stopped", total_revoked=self._total_revoked)

    async def _sweep_loop(self) -> None:
        self._log.debug("sweep_loop_started")

        while self._is_running:
            try:
                revoked = self.run_once()
                if revoked:
                    self._log.debug("sweep_completed", revoked=revoked)
            except asyncio.CancelledError:
                break
            except Exception as e:
                self._log.error("sweep_failed", error=str(e), exc_info=True)

            try:
                await asyncio.sleep(self._interval)
            except asyncio.CancelledError:
                break
