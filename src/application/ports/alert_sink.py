"""Alert sink port - outbound channel to the kiosk display."""

from __future__ import annotations

from abc import abstractmethod
from datetime import datetime
from typing import Protocol

from src.domain.models.alert import BoothAlert


class AlertSinkProtocol(Protocol):
    """Receives alerts raised by the session machine.

    Dismissal timing is a display concern; the sink only remembers when
    each alert was raised and how long it should stay up.
    """

    @abstractmethod
    def raise_alert(self, alert: BoothAlert) -> None:
        """Publish an alert, replacing any alert currently shown."""
        ...

    @abstractmethod
    def active_alert(self, now: datetime) -> BoothAlert | None:
        """Return the alert still visible at ``now``, if any."""
        ...

    @abstractmethod
    def clear(self) -> None:
        """Dismiss the current alert immediately."""
        ...
