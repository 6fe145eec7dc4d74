"""Booth kiosk service - the inbound surface of the booth core.

The kiosk front end can trigger exactly three operations:

- start_scan()          run an authentication attempt
- submit_vote(id)       cast the authenticated voter's vote
- reset_session()       get ready for the next voter

Everything else it shows (session state, counters, ballot, alert) is
read-only. After a Success outcome the kiosk opens the ballot straight
away, so the voter goes from the scanner directly to the ballot.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from structlog import get_logger

from src.domain.models.authentication import (
    AuthenticationOutcome,
    AuthenticationSuccess,
)

if TYPE_CHECKING:
    from src.application.ports.alert_sink import AlertSinkProtocol
    from src.application.ports.time_authority import TimeAuthorityProtocol
    from src.application.services.stats_aggregator import StatsAggregator
    from src.application.services.voting_session_machine import (
        VotingSessionMachine,
    )
    from src.domain.models.alert import BoothAlert
    from src.domain.models.booth_stats import StatsCounters
    from src.domain.models.session_state import SessionState
    from src.domain.models.voter import Candidate, CastVoteRecord

logger = get_logger(__name__)


@dataclass(frozen=True)
class ScanResult:
    """Result of start_scan().

    Attributes:
        outcome: The classified authentication outcome.
        state: Session state after the outcome was applied.
    """

    outcome: AuthenticationOutcome
    state: SessionState


@dataclass(frozen=True)
class VoteReceipt:
    """Result of submit_vote().

    Attributes:
        record: The CastVoteRecord created for the vote.
        state: Session state after the vote (COMPLETE).
    """

    record: CastVoteRecord
    state: SessionState


class BoothKioskService:
    """Facade over one booth's session machine and counters.

    Example:
        >>> kiosk = build_booth_kiosk(config, voters, candidates)
        >>> result = await kiosk.start_scan()
        >>> if result.state.phase is SessionPhase.BALLOT_OPEN:
        ...     receipt = kiosk.submit_vote("BJP001")
        >>> kiosk.reset_session()
    """

    def __init__(
        self,
        session_machine: VotingSessionMachine,
        stats_aggregator: StatsAggregator,
        alert_sink: AlertSinkProtocol,
        time_authority: TimeAuthorityProtocol,
        booth_id: str = "",
    ) -> None:
        self._machine = session_machine
        self._stats = stats_aggregator
        self._alerts = alert_sink
        self._time = time_authority
        self._booth_id = booth_id

    @property
    def booth_id(self) -> str:
        return self._booth_id

    async def start_scan(self) -> ScanResult:
        """Run an authentication attempt and open the ballot on success.

        Raises:
            ScanInProgressError: A scan is already running.
            InvalidSessionTransitionError: The session is not IDLE.
        """
        outcome = await self._machine.start_scan()
        if isinstance(outcome, AuthenticationSuccess):
            self._machine.open_ballot()

        state = self._machine.state
        logger.info(
            "kiosk_scan_completed",
            booth_id=self._booth_id,
            outcome=outcome.kind.value,
            phase=state.phase.value,
        )
        return ScanResult(outcome=outcome, state=state)

    def submit_vote(self, candidate_id: str) -> VoteReceipt:
        """Cast the authenticated voter's vote.

        Raises:
            InvalidSessionTransitionError: The ballot is not open.
            UnknownCandidateError: The candidate is not on the ballot.
            VoteIntegrityError: The voter was already marked as voted.
        """
        record = self._machine.submit_vote(candidate_id)
        return VoteReceipt(record=record, state=self._machine.state)

    def reset_session(self) -> SessionState:
        """Return the booth to IDLE for the next voter.

        Raises:
            InvalidSessionTransitionError: A scan is still in progress.
        """
        return self._machine.reset()

    def get_state(self) -> SessionState:
        return self._machine.state

    def get_stats(self) -> StatsCounters:
        return self._stats.snapshot()

    def get_candidates(self) -> list[Candidate]:
        return self._machine.candidates

    def get_active_alert(self) -> BoothAlert | None:
        """Return the alert still on screen, if it has not auto-dismissed."""
        return self._alerts.active_alert(self._time.now())
