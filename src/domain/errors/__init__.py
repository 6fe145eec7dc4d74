"""Domain errors for the voting booth.

Provides specific exception classes for different failure scenarios.
All exceptions inherit from BoothError.
"""

from src.domain.errors.biometric import (
    BiometricDeclinedError,
    BiometricProviderError,
    BiometricTimeoutError,
)
from src.domain.errors.registry import (
    AlreadyVotedError,
    DuplicateCandidateIdError,
    DuplicateVoterIdError,
    RegistryError,
    VoterNotEligibleError,
)
from src.domain.errors.session import (
    InvalidSessionTransitionError,
    ScanInProgressError,
    SessionError,
    UnknownCandidateError,
    VoteIntegrityError,
)

__all__: list[str] = [
    "AlreadyVotedError",
    "BiometricDeclinedError",
    "BiometricProviderError",
    "BiometricTimeoutError",
    "DuplicateCandidateIdError",
    "DuplicateVoterIdError",
    "InvalidSessionTransitionError",
    "RegistryError",
    "ScanInProgressError",
    "SessionError",
    "UnknownCandidateError",
    "VoteIntegrityError",
    "VoterNotEligibleError",
]
