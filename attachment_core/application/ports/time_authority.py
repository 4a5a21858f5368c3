"""Time Authority Protocol - injectable clock for deadline bookkeeping.

The display resource cache schedules revocations against monotonic
deadlines. It reads time only through this port so tests can inject a fake
clock and make the grace-delay behavior deterministic.

For production:
    Use SystemTimeAuthority from attachment_core/infrastructure/adapters/

For testing:
    Use FakeTimeAuthority from tests/helpers/fake_time_authority.py
"""

from abc import ABC, abstractmethod


class TimeAuthorityProtocol(ABC):
    """Abstract interface for time authority.

    Example usage:
        class MyService:
            def __init__(self, time_authority: TimeAuthorityProtocol) -> None:
                self._time = time_authority

            def schedule(self, delay: float) -> float:
                return self._time.monotonic() + delay
    """

    @abstractmethod
    def monotonic(self) -> float:
        """Return monotonic clock value for measuring elapsed time.

        Returns:
            Monotonically increasing float value (in seconds).

        Note:
            Use this for deadlines, not for timestamps. The reference point
            is arbitrary - only differences are meaningful.
        """
        ...
