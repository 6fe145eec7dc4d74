"""Booth statistics models.

Counters are never stored directly; they are folded from an append-only
stream of StatsEvents. Replaying the same events always yields the same
counters, and no event kind decrements anything.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class StatsEventKind(Enum):
    """Kinds of events that move the booth counters.

    Kinds:
        VERIFICATION_FAILED: A Failure outcome.
        DUPLICATE_DETECTED: A Duplicate outcome.
        AUTHENTICATED: A Success outcome (no counter moves).
        VOTE_CAST: A vote was recorded at the Complete transition.
    """

    VERIFICATION_FAILED = "verification_failed"
    DUPLICATE_DETECTED = "duplicate_detected"
    AUTHENTICATED = "authenticated"
    VOTE_CAST = "vote_cast"


@dataclass(frozen=True)
class StatsEvent:
    """One entry in the stats event log.

    Attributes:
        kind: What happened.
        occurred_at: When the aggregator saw it.
        voter_id: Voter involved, if any (never set for failures).
    """

    kind: StatsEventKind
    occurred_at: datetime
    voter_id: str | None = None


@dataclass(frozen=True)
class StatsCounters:
    """Read-only snapshot of booth counters.

    Attributes:
        total_registered: Number of eligible voters at this booth.
        voted_count: Votes cast (one per Complete transition).
        duplicate_attempts: Duplicate outcomes seen.
        verification_failures: Failure outcomes seen.
    """

    total_registered: int = 0
    voted_count: int = 0
    duplicate_attempts: int = 0
    verification_failures: int = 0

    def __post_init__(self) -> None:
        """Counters are never negative."""
        for name in (
            "total_registered",
            "voted_count",
            "duplicate_attempts",
            "verification_failures",
        ):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be non-negative")

    @property
    def turnout_rate(self) -> float:
        """Fraction of registered voters who voted; 0.0 with no voters."""
        if self.total_registered == 0:
            return 0.0
        return self.voted_count / self.total_registered

    @property
    def verification_rate(self) -> float:
        """Fraction of verifications that ended in a vote.

        Defined as ``voted / (voted + failures)``; 0.0 when both are zero.
        """
        denominator = self.voted_count + self.verification_failures
        if denominator == 0:
            return 0.0
        return self.voted_count / denominator

    @property
    def pending_count(self) -> int:
        """Registered voters who have not voted yet."""
        return max(self.total_registered - self.voted_count, 0)

    def to_dict(self) -> dict[str, int | float]:
        """Serialize for logs and API responses."""
        return {
            "total_registered": self.total_registered,
            "voted_count": self.voted_count,
            "duplicate_attempts": self.duplicate_attempts,
            "verification_failures": self.verification_failures,
            "turnout_rate": self.turnout_rate,
            "verification_rate": self.verification_rate,
        }
