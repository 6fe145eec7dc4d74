"""Alerts raised to the kiosk display."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum

# How long the kiosk shows an alert before dismissing it
DEFAULT_ALERT_DISMISS_SECONDS = 5.0


class AlertKind(Enum):
    """Visual category of an alert."""

    SUCCESS = "success"
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


@dataclass(frozen=True)
class BoothAlert:
    """A transient message for the voter or poll worker.

    Attributes:
        kind: Visual category.
        title: Short heading.
        message: Body text.
        raised_at: When the alert was raised.
        dismiss_after_seconds: Display lifetime.
        critical: True for integrity violations a poll worker must see.
    """

    kind: AlertKind
    title: str
    message: str
    raised_at: datetime
    dismiss_after_seconds: float = DEFAULT_ALERT_DISMISS_SECONDS
    critical: bool = False

    @property
    def expires_at(self) -> datetime:
        return self.raised_at + timedelta(seconds=self.dismiss_after_seconds)

    def is_visible_at(self, now: datetime) -> bool:
        """Return True while the alert has not been auto-dismissed."""
        return now < self.expires_at
