"""In-memory alert sink.

Keeps the alert currently on screen plus a history of every alert raised,
which tests use to assert on side effects. A new alert replaces the
current one, as the kiosk shows a single alert banner.
"""

from __future__ import annotations

from datetime import datetime

from src.domain.models.alert import BoothAlert


class AlertSinkStub:
    """In-memory implementation of AlertSinkProtocol."""

    def __init__(self) -> None:
        self._current: BoothAlert | None = None
        self._history: list[BoothAlert] = []

    def raise_alert(self, alert: BoothAlert) -> None:
        self._current = alert
        self._history.append(alert)

    def active_alert(self, now: datetime) -> BoothAlert | None:
        """Return the current alert unless it has auto-dismissed."""
        if self._current is None:
            return None
        if not self._current.is_visible_at(now):
            self._current = None
            return None
        return self._current

    def clear(self) -> None:
        self._current = None

    @property
    def history(self) -> list[BoothAlert]:
        """Every alert raised, oldest first."""
        return list(self._history)

    @property
    def last_alert(self) -> BoothAlert | None:
        return self._history[-1] if self._history else None
