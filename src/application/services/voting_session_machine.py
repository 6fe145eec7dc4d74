"""Voting session state machine.

Gates ballot access strictly behind a successful, non-duplicate
authentication:

    IDLE --start_scan--> SCANNING
    SCANNING --Success(v)--> AUTHENTICATED(v)
    SCANNING --Duplicate(v)--> IDLE          (warning alert)
    SCANNING --Failure--> IDLE               (error alert, retry allowed)
    AUTHENTICATED(v) --open_ballot--> BALLOT_OPEN(v)
    BALLOT_OPEN(v) --submit_vote(c)--> COMPLETE(v, c, now)
    COMPLETE --reset--> IDLE

``reset`` is also accepted from AUTHENTICATED and BALLOT_OPEN so a voter
who walks away leaves the booth usable and stays eligible. It is refused
while SCANNING: a pending challenge runs to completion.

The vote-cast step marks the voter, appends the CastVoteRecord and bumps
``voted_count`` with no suspension point in between, so no coroutine can
observe a recorded vote for an unmarked voter or the reverse.
"""

from __future__ import annotations

import asyncio
from collections.abc import Sequence
from typing import TYPE_CHECKING

from structlog import get_logger

from src.domain.errors import (
    AlreadyVotedError,
    DuplicateCandidateIdError,
    InvalidSessionTransitionError,
    UnknownCandidateError,
    VoteIntegrityError,
)
from src.domain.models.alert import (
    DEFAULT_ALERT_DISMISS_SECONDS,
    AlertKind,
    BoothAlert,
)
from src.domain.models.authentication import (
    AuthenticationDuplicate,
    AuthenticationFailure,
    AuthenticationOutcome,
    AuthenticationSuccess,
)
from src.domain.models.session_state import SessionPhase, SessionState
from src.domain.models.voter import Candidate, CastVoteRecord

if TYPE_CHECKING:
    from src.application.ports.alert_sink import AlertSinkProtocol
    from src.application.ports.time_authority import TimeAuthorityProtocol
    from src.application.ports.vote_ledger import CastVoteLedgerProtocol
    from src.application.ports.voter_registry import VoterRegistryProtocol
    from src.application.services.authentication_engine import AuthenticationEngine
    from src.application.services.stats_aggregator import StatsAggregator

logger = get_logger(__name__)

# The same text is shown for every failure reason so the kiosk never
# reveals whether a fingerprint matched an unregistered person.
AUTH_FAILED_TITLE = "Authentication Failed"
AUTH_FAILED_MESSAGE = (
    "Fingerprint verification failed. Please ensure your finger is clean "
    "and properly placed on the scanner."
)
DUPLICATE_TITLE = "Duplicate Vote Detected!"
VOTE_INTEGRITY_TITLE = "Vote Not Recorded"


class VotingSessionMachine:
    """Booth session state machine.

    Owns the current SessionState and drives every transition. Outcomes
    from the authentication engine are fed to the stats aggregator exactly
    once, and alerts go to the alert sink as observable side effects.
    """

    def __init__(
        self,
        authentication_engine: AuthenticationEngine,
        voter_registry: VoterRegistryProtocol,
        vote_ledger: CastVoteLedgerProtocol,
        stats_aggregator: StatsAggregator,
        alert_sink: AlertSinkProtocol,
        time_authority: TimeAuthorityProtocol,
        candidates: Sequence[Candidate],
        booth_id: str = "",
        alert_dismiss_seconds: float = DEFAULT_ALERT_DISMISS_SECONDS,
    ) -> None:
        """Initialize the machine in IDLE.

        Args:
            authentication_engine: Runs and classifies scan attempts.
            voter_registry: Marked at vote cast, never at authentication.
            vote_ledger: Receives one CastVoteRecord per completed vote.
            stats_aggregator: Counters fed from outcomes and vote casts.
            alert_sink: Outbound alerts for the kiosk display.
            time_authority: Clock for vote and alert timestamps.
            candidates: The static ballot.
            booth_id: Stamped on every CastVoteRecord.
            alert_dismiss_seconds: Display lifetime of raised alerts.

        Raises:
            DuplicateCandidateIdError: Two candidates share an id.
        """
        self._engine = authentication_engine
        self._registry = voter_registry
        self._ledger = vote_ledger
        self._stats = stats_aggregator
        self._alerts = alert_sink
        self._time = time_authority
        self._booth_id = booth_id
        self._alert_dismiss_seconds = alert_dismiss_seconds

        self._candidates: dict[str, Candidate] = {}
        for candidate in candidates:
            if candidate.id in self._candidates:
                raise DuplicateCandidateIdError(candidate.id)
            self._candidates[candidate.id] = candidate

        self._state = SessionState.idle()

    @property
    def state(self) -> SessionState:
        """Current session state (immutable snapshot)."""
        return self._state

    @property
    def candidates(self) -> list[Candidate]:
        """The ballot, in the order it was supplied."""
        return list(self._candidates.values())

    async def start_scan(self) -> AuthenticationOutcome:
        """Run one authentication attempt (IDLE -> SCANNING -> ...).

        Returns:
            The classified outcome. The machine ends in AUTHENTICATED for
            a Success and in IDLE for Duplicate or Failure.

        Raises:
            ScanInProgressError: An earlier scan is still unresolved.
            InvalidSessionTransitionError: The session is not IDLE.
        """
        self._state = self._state.with_scanning()
        log = logger.bind(session_id=str(self._state.session_id))
        log.info("scan_started")

        # Never leave the booth stuck in SCANNING
        try:
            outcome = await self._engine.attempt()
        except asyncio.CancelledError:
            log.warning("scan_cancelled")
            self._state = SessionState.idle()
            raise
        except Exception:
            log.exception("scan_aborted_unexpectedly")
            self._state = SessionState.idle()
            raise

        self._stats.on_outcome(outcome)

        if isinstance(outcome, AuthenticationSuccess):
            self._state = self._state.with_authenticated(outcome.voter)
            log.info("session_authenticated", voter_id=outcome.voter.id)
            self._raise(
                AlertKind.SUCCESS,
                "Authentication Successful",
                f"Welcome {outcome.voter.display_name}! Your identity has been "
                "verified. Please proceed to cast your vote.",
            )
        elif isinstance(outcome, AuthenticationDuplicate):
            self._state = SessionState.idle()
            log.warning("session_rejected_duplicate", voter_id=outcome.voter.id)
            self._raise(
                AlertKind.WARNING,
                DUPLICATE_TITLE,
                f"Voter ID {outcome.voter.id} has already cast their vote. "
                "Multiple voting attempts are strictly prohibited.",
            )
        elif isinstance(outcome, AuthenticationFailure):
            self._state = SessionState.idle()
            log.info("session_returned_to_idle", reason=outcome.reason.value)
            self._raise(AlertKind.ERROR, AUTH_FAILED_TITLE, AUTH_FAILED_MESSAGE)

        return outcome

    def open_ballot(self) -> SessionState:
        """Open the ballot for the authenticated voter.

        Raises:
            InvalidSessionTransitionError: The session is not AUTHENTICATED.
        """
        self._state = self._state.with_ballot_open()
        logger.info(
            "ballot_opened",
            session_id=str(self._state.session_id),
            voter_id=self._state.voter.id if self._state.voter else None,
        )
        return self._state

    def submit_vote(self, candidate_id: str) -> CastVoteRecord:
        """Cast the bound voter's vote (BALLOT_OPEN -> COMPLETE).

        Marks the voter, appends the record and counts the vote as one
        step. If the ledger already holds a record for the voter, or the
        registry already marks them, nothing is recorded and the session
        returns to IDLE.

        Args:
            candidate_id: The chosen candidate.

        Returns:
            The CastVoteRecord created for this vote.

        Raises:
            InvalidSessionTransitionError: The ballot is not open.
            UnknownCandidateError: The candidate is not on the ballot; the
                ballot stays open.
            VoteIntegrityError: The voter already has a ledger record or the
                registry rejected ``mark_voted``.
        """
        state = self._state
        if state.phase != SessionPhase.BALLOT_OPEN or state.voter is None:
            raise InvalidSessionTransitionError(
                phase=state.phase,
                trigger="submit_vote",
                allowed_triggers=list(state.allowed_triggers),
            )
        if candidate_id not in self._candidates:
            logger.warning(
                "vote_rejected_unknown_candidate",
                session_id=str(state.session_id),
                candidate_id=candidate_id,
            )
            raise UnknownCandidateError(candidate_id)

        voter = state.voter
        log = logger.bind(session_id=str(state.session_id), voter_id=voter.id)
        cast_at = self._time.now()

        try:
            if self._ledger.get_for_voter(voter.id) is not None:
                raise AlreadyVotedError(voter.id)
            self._registry.mark_voted(voter.id)
        except AlreadyVotedError as e:
            # Stale Success classification: an invariant broke upstream
            log.critical(
                "vote_integrity_violation",
                candidate_id=candidate_id,
                error=str(e),
            )
            self._state = SessionState.idle()
            self._raise(
                AlertKind.ERROR,
                VOTE_INTEGRITY_TITLE,
                f"Voter ID {voter.id} is already recorded as having voted. "
                "This vote was not counted. Please call a poll worker.",
                critical=True,
            )
            raise VoteIntegrityError(voter.id, candidate_id) from e

        record = CastVoteRecord(
            voter_id=voter.id,
            candidate_id=candidate_id,
            cast_at=cast_at,
            booth_id=self._booth_id,
        )
        self._ledger.append(record)
        self._stats.record_vote_cast(record)
        self._state = state.with_vote(candidate_id, cast_at)

        log.info("vote_cast", record_id=str(record.record_id))
        self._raise(
            AlertKind.SUCCESS,
            "Vote Recorded Successfully!",
            "Your vote has been securely recorded. Thank you for participating "
            "in the democratic process.",
        )
        return record

    def reset(self) -> SessionState:
        """Return to IDLE, dropping the voter binding.

        Raises:
            InvalidSessionTransitionError: A scan is still in progress.
        """
        previous = self._state
        if "reset" not in previous.allowed_triggers:
            raise InvalidSessionTransitionError(
                phase=previous.phase,
                trigger="reset",
                allowed_triggers=list(previous.allowed_triggers),
            )

        if previous.phase in (SessionPhase.AUTHENTICATED, SessionPhase.BALLOT_OPEN):
            logger.info(
                "session_abandoned",
                session_id=str(previous.session_id),
                voter_id=previous.voter.id if previous.voter else None,
            )

        self._state = SessionState.idle()
        self._alerts.clear()
        logger.info(
            "session_reset",
            previous_session_id=str(previous.session_id),
            previous_phase=previous.phase.value,
            session_id=str(self._state.session_id),
        )
        return self._state

    def _raise(
        self,
        kind: AlertKind,
        title: str,
        message: str,
        critical: bool = False,
    ) -> None:
        self._alerts.raise_alert(
            BoothAlert(
                kind=kind,
                title=title,
                message=message,
                raised_at=self._time.now(),
                dismiss_after_seconds=self._alert_dismiss_seconds,
                critical=critical,
            )
        )
