"""Booth statistics aggregation.

Counters are folded from an append-only event log:

- Failure outcome   -> verification_failures + 1
- Duplicate outcome -> duplicate_attempts + 1
- Success outcome   -> nothing (turnout moves only when a vote is cast)
- Vote cast         -> voted_count + 1

No operation decrements a counter, and ``replay`` over the logged events
always reproduces the live counters.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from structlog import get_logger

from src.domain.models.authentication import (
    AuthenticationOutcome,
    OutcomeKind,
)
from src.domain.models.booth_stats import StatsCounters, StatsEvent, StatsEventKind

if TYPE_CHECKING:
    from src.application.ports.time_authority import TimeAuthorityProtocol
    from src.domain.models.voter import CastVoteRecord

logger = get_logger(__name__)

_OUTCOME_EVENT_KINDS: dict[OutcomeKind, StatsEventKind] = {
    OutcomeKind.SUCCESS: StatsEventKind.AUTHENTICATED,
    OutcomeKind.DUPLICATE: StatsEventKind.DUPLICATE_DETECTED,
    OutcomeKind.FAILURE: StatsEventKind.VERIFICATION_FAILED,
}


class StatsAggregator:
    """Process-scoped booth counters.

    One instance per booth. Nothing about it is global, so independent
    booths in the same process keep independent counters.

    Example:
        >>> stats = StatsAggregator(total_registered=5, time_authority=clock)
        >>> stats.on_outcome(AuthenticationFailure(FailureReason.TIMEOUT))
        >>> stats.snapshot().verification_failures
        1
    """

    def __init__(
        self,
        total_registered: int,
        time_authority: TimeAuthorityProtocol,
        seed_events: Iterable[StatsEvent] = (),
    ) -> None:
        """Initialize the aggregator.

        Args:
            total_registered: Number of eligible voters at this booth.
            time_authority: Clock used to stamp events.
            seed_events: Events recorded before this process started
                (demo baselines). They are folded like any other event.

        Raises:
            ValueError: total_registered is negative, or the seed events
                count more votes than there are registered voters.
        """
        if total_registered < 0:
            raise ValueError(
                f"total_registered must be non-negative, got {total_registered}"
            )
        self._total_registered = total_registered
        self._time = time_authority
        self._events: list[StatsEvent] = []
        self._voted_count = 0
        self._duplicate_attempts = 0
        self._verification_failures = 0

        for event in seed_events:
            self._apply(event)
        if self._voted_count > total_registered:
            raise ValueError(
                f"seed events count {self._voted_count} votes but only "
                f"{total_registered} voters are registered"
            )

    def on_outcome(self, outcome: AuthenticationOutcome) -> None:
        """Fold one authentication outcome into the counters.

        Must be called exactly once per resolved attempt.
        """
        voter = getattr(outcome, "voter", None)
        self._apply(
            StatsEvent(
                kind=_OUTCOME_EVENT_KINDS[outcome.kind],
                occurred_at=self._time.now(),
                voter_id=voter.id if voter is not None else None,
            )
        )

    def record_vote_cast(self, record: CastVoteRecord) -> None:
        """Count a cast vote.

        Only the BALLOT_OPEN -> COMPLETE transition calls this, in the
        same step that marks the voter and appends the record.
        """
        self._apply(
            StatsEvent(
                kind=StatsEventKind.VOTE_CAST,
                occurred_at=record.cast_at,
                voter_id=record.voter_id,
            )
        )

    def snapshot(self) -> StatsCounters:
        """Return a read-only copy of the current counters."""
        return StatsCounters(
            total_registered=self._total_registered,
            voted_count=self._voted_count,
            duplicate_attempts=self._duplicate_attempts,
            verification_failures=self._verification_failures,
        )

    def events(self) -> list[StatsEvent]:
        """Return a copy of the event log in arrival order."""
        return list(self._events)

    @property
    def resolved_attempts(self) -> int:
        """Number of authentication outcomes folded so far."""
        return sum(1 for e in self._events if e.kind != StatsEventKind.VOTE_CAST)

    @classmethod
    def replay(
        cls,
        events: Iterable[StatsEvent],
        total_registered: int,
        time_authority: TimeAuthorityProtocol,
    ) -> StatsAggregator:
        """Rebuild an aggregator from a recorded event stream."""
        return cls(
            total_registered=total_registered,
            time_authority=time_authority,
            seed_events=events,
        )

    def _apply(self, event: StatsEvent) -> None:
        self._events.append(event)
        if event.kind == StatsEventKind.VERIFICATION_FAILED:
            self._verification_failures += 1
        elif event.kind == StatsEventKind.DUPLICATE_DETECTED:
            self._duplicate_attempts += 1
        elif event.kind == StatsEventKind.VOTE_CAST:
            self._voted_count += 1

        logger.debug(
            "stats_event_applied",
            kind=event.kind.value,
            voted_count=self._voted_count,
            duplicate_attempts=self._duplicate_attempts,
            verification_failures=self._verification_failures,
        )
