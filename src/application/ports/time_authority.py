"""Time Authority Protocol - interface for consistent timestamp provisioning.

Every timestamp the booth produces (cast vote times, alert raise times,
stats event times) comes from an injected TimeAuthorityProtocol instead of
a direct ``datetime.now()`` call, so tests can freeze and advance time.

For production:
    Use SystemTimeAuthority from src/infrastructure/adapters/

For testing:
    Use FakeTimeAuthority from tests/helpers/fake_time_authority.py
"""

from abc import ABC, abstractmethod
from datetime import datetime


class TimeAuthorityProtocol(ABC):
    """Abstract interface for time authority.

    Example usage:
        class MyService:
            def __init__(self, time_authority: TimeAuthorityProtocol) -> None:
                self._time = time_authority

            def process(self) -> None:
                now = self._time.now()  # NOT datetime.now()
    """

    @abstractmethod
    def now(self) -> datetime:
        """Return current time with timezone awareness (UTC)."""
        ...

    @abstractmethod
    def monotonic(self) -> float:
        """Return monotonic clock value for measuring elapsed time.

        Note:
            Use this for measuring durations (challenge latency), not for
            timestamps. Only differences between values are meaningful.
        """
        ...
