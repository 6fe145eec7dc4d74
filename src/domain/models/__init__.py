"""Domain models for the voting booth."""

from src.domain.models.alert import AlertKind, BoothAlert
from src.domain.models.authentication import (
    AuthenticationDuplicate,
    AuthenticationFailure,
    AuthenticationOutcome,
    AuthenticationSuccess,
    FailureReason,
    OutcomeKind,
)
from src.domain.models.biometric import (
    BiometricCapture,
    BiometricChallenge,
    BiometricMatchResult,
    BiometricMethod,
    ChallengeResponse,
)
from src.domain.models.booth_stats import StatsCounters, StatsEvent, StatsEventKind
from src.domain.models.session_state import SessionPhase, SessionState
from src.domain.models.voter import Candidate, CastVoteRecord, VoterIdentity

__all__: list[str] = [
    "AlertKind",
    "AuthenticationDuplicate",
    "AuthenticationFailure",
    "AuthenticationOutcome",
    "AuthenticationSuccess",
    "BiometricCapture",
    "BiometricChallenge",
    "BiometricMatchResult",
    "BiometricMethod",
    "BoothAlert",
    "Candidate",
    "CastVoteRecord",
    "ChallengeResponse",
    "FailureReason",
    "OutcomeKind",
    "SessionPhase",
    "SessionState",
    "StatsCounters",
    "StatsEvent",
    "StatsEventKind",
    "VoterIdentity",
]
