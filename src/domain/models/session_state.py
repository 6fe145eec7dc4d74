"""Booth session state.

The session moves through a strict sequence for each voter interaction:

    IDLE -> SCANNING -> AUTHENTICATED -> BALLOT_OPEN -> COMPLETE -> IDLE

with failure and duplicate outcomes sending SCANNING straight back to
IDLE. Exactly one voter is bound from AUTHENTICATED through COMPLETE, and
returning to IDLE drops the binding and issues a fresh session id.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum
from uuid import UUID

from uuid6 import uuid7

from src.domain.models.voter import VoterIdentity


class SessionPhase(Enum):
    """Phase of the current booth session."""

    IDLE = "IDLE"
    SCANNING = "SCANNING"
    AUTHENTICATED = "AUTHENTICATED"
    BALLOT_OPEN = "BALLOT_OPEN"
    COMPLETE = "COMPLETE"

    def binds_voter(self) -> bool:
        """Return True for phases that carry an active voter."""
        return self in _VOTER_PHASES


_VOTER_PHASES = frozenset(
    {SessionPhase.AUTHENTICATED, SessionPhase.BALLOT_OPEN, SessionPhase.COMPLETE}
)

# Externally triggered operations allowed from each phase. Outcome-driven
# transitions out of SCANNING are internal to the machine.
ALLOWED_TRIGGERS: dict[SessionPhase, tuple[str, ...]] = {
    SessionPhase.IDLE: ("start_scan", "reset"),
    SessionPhase.SCANNING: (),
    SessionPhase.AUTHENTICATED: ("open_ballot", "reset"),
    SessionPhase.BALLOT_OPEN: ("submit_vote", "reset"),
    SessionPhase.COMPLETE: ("reset",),
}


@dataclass(frozen=True, eq=True)
class SessionState:
    """Immutable snapshot of the booth session.

    Attributes:
        phase: Current phase.
        session_id: UUIDv7 of the current voter interaction.
        voter: Active voter (AUTHENTICATED, BALLOT_OPEN, COMPLETE only).
        candidate_id: Chosen candidate (COMPLETE only).
        cast_at: When the vote was recorded (COMPLETE only).
    """

    phase: SessionPhase = SessionPhase.IDLE
    session_id: UUID = field(default_factory=uuid7)
    voter: VoterIdentity | None = None
    candidate_id: str | None = None
    cast_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate that fields match the phase."""
        if self.phase.binds_voter() and self.voter is None:
            raise ValueError(f"{self.phase.value} requires an active voter")
        if not self.phase.binds_voter() and self.voter is not None:
            raise ValueError(f"{self.phase.value} must not carry a voter")
        is_complete = self.phase == SessionPhase.COMPLETE
        if is_complete and (self.candidate_id is None or self.cast_at is None):
            raise ValueError("COMPLETE requires candidate_id and cast_at")
        if not is_complete and (
            self.candidate_id is not None or self.cast_at is not None
        ):
            raise ValueError(f"{self.phase.value} must not carry a cast vote")

    @property
    def allowed_triggers(self) -> tuple[str, ...]:
        """Externally triggered operations permitted in this phase."""
        return ALLOWED_TRIGGERS[self.phase]

    def _require(self, trigger: str, expected: SessionPhase) -> None:
        """Raise unless the session is in ``expected`` phase."""
        from src.domain.errors.session import InvalidSessionTransitionError

        if self.phase != expected:
            raise InvalidSessionTransitionError(
                phase=self.phase,
                trigger=trigger,
                allowed_triggers=list(self.allowed_triggers),
            )

    def with_scanning(self) -> SessionState:
        """Create new state for a scan in progress (IDLE -> SCANNING).

        Raises:
            ScanInProgressError: If a scan is already unresolved.
            InvalidSessionTransitionError: If the session is not IDLE.
        """
        from src.domain.errors.session import ScanInProgressError

        if self.phase == SessionPhase.SCANNING:
            raise ScanInProgressError(self.phase)
        self._require("start_scan", SessionPhase.IDLE)
        return replace(self, phase=SessionPhase.SCANNING)

    def with_authenticated(self, voter: VoterIdentity) -> SessionState:
        """Bind the authenticated voter (SCANNING -> AUTHENTICATED)."""
        self._require("authenticate", SessionPhase.SCANNING)
        return replace(self, phase=SessionPhase.AUTHENTICATED, voter=voter)

    def with_ballot_open(self) -> SessionState:
        """Open the ballot for the bound voter (AUTHENTICATED -> BALLOT_OPEN)."""
        self._require("open_ballot", SessionPhase.AUTHENTICATED)
        return replace(self, phase=SessionPhase.BALLOT_OPEN)

    def with_vote(self, candidate_id: str, cast_at: datetime) -> SessionState:
        """Record the cast vote (BALLOT_OPEN -> COMPLETE).

        Args:
            candidate_id: The chosen candidate.
            cast_at: When the vote was recorded.

        Returns:
            New SessionState in COMPLETE with the same voter bound.
        """
        self._require("submit_vote", SessionPhase.BALLOT_OPEN)
        return replace(
            self,
            phase=SessionPhase.COMPLETE,
            candidate_id=candidate_id,
            cast_at=cast_at,
        )

    @classmethod
    def idle(cls) -> SessionState:
        """Return a fresh IDLE state with a new session id and no voter."""
        return cls()

    def to_dict(self) -> dict[str, str | None]:
        """Serialize for logs and API responses."""
        return {
            "phase": self.phase.value,
            "session_id": str(self.session_id),
            "voter_id": self.voter.id if self.voter else None,
            "voter_name": self.voter.display_name if self.voter else None,
            "candidate_id": self.candidate_id,
            "cast_at": self.cast_at.isoformat() if self.cast_at else None,
        }
