"""Authentication outcome variants.

Every authentication attempt resolves to exactly one of three outcomes:

    Success(voter)    biometric matched, voter registered, has not voted
    Duplicate(voter)  biometric matched, voter registered, already voted
    Failure(reason)   anything else

The variants are separate frozen dataclasses sharing an ``OutcomeKind``
tag, so callers can either ``match`` on the class or switch on ``kind``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Union
from uuid import UUID

from uuid6 import uuid7

from src.domain.models.biometric import BiometricMethod
from src.domain.models.voter import VoterIdentity


class OutcomeKind(Enum):
    """Tag shared by the three outcome variants."""

    SUCCESS = "success"
    DUPLICATE = "duplicate"
    FAILURE = "failure"


class FailureReason(Enum):
    """Why an attempt failed.

    Only the engine and the logs see the reason. The voter always gets the
    same message so the kiosk never reveals whether a fingerprint matched
    an unregistered person.

    Reasons:
        BIOMETRIC_MISMATCH: The biometric did not match (or was declined).
        NO_REGISTRY_MATCH: The biometric matched but resolved to no
            eligible voter.
        PROVIDER_ERROR: The biometric capability failed (fail closed).
        TIMEOUT: The challenge did not complete in time (fail closed).
    """

    BIOMETRIC_MISMATCH = "biometric-mismatch"
    NO_REGISTRY_MATCH = "no-registry-match"
    PROVIDER_ERROR = "provider-error"
    TIMEOUT = "timeout"


@dataclass(frozen=True)
class AuthenticationSuccess:
    """A new voter authenticated and may open the ballot."""

    kind: ClassVar[OutcomeKind] = OutcomeKind.SUCCESS

    voter: VoterIdentity
    method: BiometricMethod
    attempt_id: UUID = field(default_factory=uuid7)


@dataclass(frozen=True)
class AuthenticationDuplicate:
    """An already-voted voter authenticated; the ballot stays closed."""

    kind: ClassVar[OutcomeKind] = OutcomeKind.DUPLICATE

    voter: VoterIdentity
    method: BiometricMethod
    attempt_id: UUID = field(default_factory=uuid7)


@dataclass(frozen=True)
class AuthenticationFailure:
    """The attempt failed; no voter is bound."""

    kind: ClassVar[OutcomeKind] = OutcomeKind.FAILURE

    reason: FailureReason
    method: BiometricMethod | None = None
    attempt_id: UUID = field(default_factory=uuid7)


AuthenticationOutcome = Union[
    AuthenticationSuccess, AuthenticationDuplicate, AuthenticationFailure
]
