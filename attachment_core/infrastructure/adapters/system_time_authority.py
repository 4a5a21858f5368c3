"""System clock adapter for TimeAuthorityProtocol."""

from __future__ import annotations

import time

from attachment_core.application.ports.time_authority import TimeAuthorityProtocol


class SystemTimeAuthority(TimeAuthorityProtocol):
    """Real clock: deadlines from time.monotonic()."""

    def monotonic(self) -> float:
        return time.monotonic()
