"""Booth API request/response models.

Pydantic models for the kiosk endpoints. Failure outcomes deliberately
carry no reason field: the kiosk shows the same message for every kind
of failed verification.
"""

from __future__ import annotations

from datetime import datetime
from typing import Annotated
from uuid import UUID

from pydantic import BaseModel, Field, PlainSerializer

from src.application.services.booth_kiosk_service import ScanResult, VoteReceipt
from src.domain.models.alert import BoothAlert
from src.domain.models.authentication import AuthenticationFailure
from src.domain.models.booth_stats import StatsCounters
from src.domain.models.session_state import SessionState
from src.domain.models.voter import Candidate, CastVoteRecord

# Custom datetime serializer for ISO 8601 with Z suffix (Pydantic v2)
DateTimeWithZ = Annotated[
    datetime,
    PlainSerializer(
        lambda v: v.isoformat().replace("+00:00", "Z") if v else None, return_type=str
    ),
]


class SessionStateResponse(BaseModel):
    """Current booth session.

    Attributes:
        phase: IDLE, SCANNING, AUTHENTICATED, BALLOT_OPEN or COMPLETE.
        session_id: UUIDv7 of the session; changes on every return to idle.
        voter_id: Bound voter between authentication and completion.
        voter_name: Display name of the bound voter.
        candidate_id: Chosen candidate once the vote is cast.
        cast_at: When the vote was cast.
        allowed_triggers: Triggers the session accepts in this phase.
    """

    phase: str = Field(..., description="Session phase")
    session_id: UUID = Field(..., description="Session identifier (UUIDv7)")
    voter_id: str | None = Field(default=None, description="Bound voter id")
    voter_name: str | None = Field(default=None, description="Bound voter name")
    candidate_id: str | None = Field(default=None, description="Chosen candidate")
    cast_at: DateTimeWithZ | None = Field(default=None, description="Vote time")
    allowed_triggers: list[str] = Field(
        default_factory=list,
        description="Triggers accepted in the current phase",
    )

    @classmethod
    def from_state(cls, state: SessionState) -> SessionStateResponse:
        return cls(
            phase=state.phase.value,
            session_id=state.session_id,
            voter_id=state.voter.id if state.voter else None,
            voter_name=state.voter.display_name if state.voter else None,
            candidate_id=state.candidate_id,
            cast_at=state.cast_at,
            allowed_triggers=list(state.allowed_triggers),
        )


class OutcomeResponse(BaseModel):
    """Classified authentication outcome as shown to the kiosk."""

    kind: str = Field(..., description="success, duplicate or failure")
    attempt_id: UUID = Field(..., description="Attempt identifier (UUIDv7)")
    method: str | None = Field(default=None, description="Biometric method used")
    voter_id: str | None = Field(default=None, description="Matched voter id")
    voter_name: str | None = Field(default=None, description="Matched voter name")


class ScanResponse(BaseModel):
    """Response to POST /v1/booth/scan."""

    outcome: OutcomeResponse
    session: SessionStateResponse

    @classmethod
    def from_result(cls, result: ScanResult) -> ScanResponse:
        outcome = result.outcome
        method = outcome.method.value if outcome.method is not None else None
        if isinstance(outcome, AuthenticationFailure):
            outcome_response = OutcomeResponse(
                kind=outcome.kind.value,
                attempt_id=outcome.attempt_id,
                method=method,
            )
        else:
            outcome_response = OutcomeResponse(
                kind=outcome.kind.value,
                attempt_id=outcome.attempt_id,
                method=method,
                voter_id=outcome.voter.id,
                voter_name=outcome.voter.display_name,
            )
        return cls(
            outcome=outcome_response,
            session=SessionStateResponse.from_state(result.state),
        )


class VoteRequest(BaseModel):
    """Request to cast the authenticated voter's vote."""

    candidate_id: str = Field(
        ...,
        min_length=1,
        description="Id of the chosen candidate",
    )


class CastVoteRecordResponse(BaseModel):
    """One recorded vote."""

    record_id: UUID
    voter_id: str
    candidate_id: str
    cast_at: DateTimeWithZ
    booth_id: str

    @classmethod
    def from_record(cls, record: CastVoteRecord) -> CastVoteRecordResponse:
        return cls(
            record_id=record.record_id,
            voter_id=record.voter_id,
            candidate_id=record.candidate_id,
            cast_at=record.cast_at,
            booth_id=record.booth_id,
        )


class VoteResponse(BaseModel):
    """Response to POST /v1/booth/vote."""

    record: CastVoteRecordResponse
    session: SessionStateResponse

    @classmethod
    def from_receipt(cls, receipt: VoteReceipt) -> VoteResponse:
        return cls(
            record=CastVoteRecordResponse.from_record(receipt.record),
            session=SessionStateResponse.from_state(receipt.state),
        )


class StatsResponse(BaseModel):
    """Booth counters with derived rates.

    Attributes:
        turnout_rate: voted_count / total_registered, 0.0 when empty.
        verification_rate: voted_count / (voted_count + verification_failures),
            0.0 when both are zero.
    """

    total_registered: int = Field(..., ge=0)
    voted_count: int = Field(..., ge=0)
    pending_count: int = Field(..., ge=0)
    duplicate_attempts: int = Field(..., ge=0)
    verification_failures: int = Field(..., ge=0)
    turnout_rate: float = Field(..., ge=0.0)
    verification_rate: float = Field(..., ge=0.0, le=1.0)

    @classmethod
    def from_counters(cls, counters: StatsCounters) -> StatsResponse:
        return cls(
            total_registered=counters.total_registered,
            voted_count=counters.voted_count,
            pending_count=counters.pending_count,
            duplicate_attempts=counters.duplicate_attempts,
            verification_failures=counters.verification_failures,
            turnout_rate=counters.turnout_rate,
            verification_rate=counters.verification_rate,
        )


class CandidateResponse(BaseModel):
    """One ballot entry."""

    id: str
    name: str
    party: str
    symbol: str = ""

    @classmethod
    def from_candidate(cls, candidate: Candidate) -> CandidateResponse:
        return cls(
            id=candidate.id,
            name=candidate.name,
            party=candidate.party,
            symbol=candidate.symbol,
        )


class CandidateListResponse(BaseModel):
    """The static ballot, in display order."""

    candidates: list[CandidateResponse]


class AlertResponse(BaseModel):
    """The alert currently on the kiosk screen."""

    kind: str = Field(..., description="success, error, warning or info")
    title: str
    message: str
    critical: bool = False
    raised_at: DateTimeWithZ
    expires_at: DateTimeWithZ

    @classmethod
    def from_alert(cls, alert: BoothAlert) -> AlertResponse:
        return cls(
            kind=alert.kind.value,
            title=alert.title,
            message=alert.message,
            critical=alert.critical,
            raised_at=alert.raised_at,
            expires_at=alert.expires_at,
        )


class ActiveAlertResponse(BaseModel):
    """Wrapper so an auto-dismissed alert reads as ``{"alert": null}``."""

    alert: AlertResponse | None = None


class BoothErrorResponse(BaseModel):
    """Error response for booth operations (RFC 7807).

    Attributes:
        type: Error type URI.
        title: Human-readable error title.
        status: HTTP status code.
        detail: Detailed error message.
        instance: Request path that caused the error.
        phase: Session phase when the request was rejected.
        allowed_triggers: Triggers the session would have accepted.
        candidate_id: Candidate id involved, if any.
    """

    type: str = Field(..., description="Error type URI")
    title: str = Field(..., description="Human-readable error title")
    status: int = Field(..., description="HTTP status code")
    detail: str = Field(..., description="Detailed error message")
    instance: str = Field(..., description="Request path that caused the error")
    phase: str | None = Field(default=None, description="Session phase")
    allowed_triggers: list[str] | None = Field(
        default=None, description="Triggers accepted in the current phase"
    )
    candidate_id: str | None = Field(default=None, description="Candidate id")
