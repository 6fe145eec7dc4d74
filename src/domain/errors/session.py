"""Booth session errors.

These errors are raised by the voting session state machine. Every one of
them leaves the machine in a well-defined phase; none of them should
crash the kiosk process.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from src.domain.exceptions import BoothError

if TYPE_CHECKING:
    from src.domain.models.session_state import SessionPhase


class SessionError(BoothError):
    """Base error for booth session operations."""

    pass


class InvalidSessionTransitionError(SessionError):
    """Raised when a trigger is not permitted in the current phase.

    Attributes:
        phase: The phase the session was in.
        trigger: Name of the rejected trigger.
        allowed_triggers: Triggers permitted from ``phase``.
    """

    def __init__(
        self,
        phase: SessionPhase,
        trigger: str,
        allowed_triggers: list[str] | None = None,
    ) -> None:
        """Initialize the error.

        Args:
            phase: The phase the session was in.
            trigger: Name of the rejected trigger.
            allowed_triggers: Triggers permitted from ``phase`` (optional).
        """
        self.phase = phase
        self.trigger = trigger
        self.allowed_triggers = allowed_triggers or []

        allowed_str = (
            f" Allowed: {self.allowed_triggers}" if self.allowed_triggers else ""
        )
        super().__init__(
            f"Cannot {trigger} while session is {phase.value}.{allowed_str}"
        )


class ScanInProgressError(InvalidSessionTransitionError):
    """Raised when a scan is started while another is still unresolved."""

    def __init__(self, phase: SessionPhase) -> None:
        super().__init__(phase, "start_scan")


class UnknownCandidateError(SessionError):
    """Raised when a vote names a candidate that is not on the ballot.

    Attributes:
        candidate_id: The unknown candidate id.
    """

    def __init__(self, candidate_id: str) -> None:
        self.candidate_id = candidate_id
        super().__init__(f"Candidate {candidate_id} is not on the ballot")


class VoteIntegrityError(SessionError):
    """Raised when casting a vote finds the voter already marked as voted.

    The voter passed authentication as a new voter but the registry
    rejected ``mark_voted``. The Success classification was stale, which
    points at a concurrency bug upstream. The vote is NOT recorded and the
    session returns to Idle.

    Attributes:
        voter_id: The voter whose vote was rejected.
        candidate_id: The candidate the rejected vote named.
    """

    def __init__(self, voter_id: str, candidate_id: str) -> None:
        """Initialize the error.

        Args:
            voter_id: The voter whose vote was rejected.
            candidate_id: The candidate the rejected vote named.
        """
        self.voter_id = voter_id
        self.candidate_id = candidate_id
        super().__init__(
            f"Vote for voter {voter_id} rejected: registry already marks this "
            "voter as voted"
        )
