"""Unit tests for the booth exception hierarchy."""

import pytest

from src.domain.errors import (
    AlreadyVotedError,
    BiometricDeclinedError,
    BiometricProviderError,
    BiometricTimeoutError,
    DuplicateCandidateIdError,
    DuplicateVoterIdError,
    InvalidSessionTransitionError,
    RegistryError,
    ScanInProgressError,
    SessionError,
    UnknownCandidateError,
    VoteIntegrityError,
    VoterNotEligibleError,
)
from src.domain.exceptions import BoothError
from src.domain.models.session_state import SessionPhase


class TestHierarchy:
    """Every booth error is a BoothError."""

    @pytest.mark.parametrize(
        "error",
        [
            BiometricProviderError("boom"),
            BiometricTimeoutError(30.0),
            BiometricDeclinedError("declined"),
            AlreadyVotedError("IND001"),
            VoterNotEligibleError("IND999"),
            DuplicateVoterIdError("IND001"),
            DuplicateCandidateIdError("BJP001"),
            InvalidSessionTransitionError(SessionPhase.IDLE, "submit_vote"),
            ScanInProgressError(SessionPhase.SCANNING),
            UnknownCandidateError("XYZ"),
            VoteIntegrityError("IND001", "BJP001"),
        ],
    )
    def test_is_booth_error(self, error: BoothError) -> None:
        assert isinstance(error, BoothError)

    def test_timeout_is_provider_error(self) -> None:
        assert isinstance(BiometricTimeoutError(1.0), BiometricProviderError)

    def test_declined_is_not_provider_error(self) -> None:
        """A user declining is not an infrastructure failure."""
        assert not isinstance(BiometricDeclinedError("no"), BiometricProviderError)

    def test_registry_and_session_groups(self) -> None:
        assert isinstance(AlreadyVotedError("IND001"), RegistryError)
        assert isinstance(VoteIntegrityError("IND001", "BJP001"), SessionError)


class TestAttributes:
    """Errors carry their identifying fields."""

    def test_already_voted_carries_voter_id(self) -> None:
        error = AlreadyVotedError("IND003")

        assert error.voter_id == "IND003"
        assert "IND003" in str(error)

    def test_timeout_carries_seconds_and_method(self) -> None:
        error = BiometricTimeoutError(30.0, method="platform")

        assert error.timeout_seconds == 30.0
        assert error.method == "platform"

    def test_vote_integrity_carries_both_ids(self) -> None:
        error = VoteIntegrityError("IND002", "INC001")

        assert error.voter_id == "IND002"
        assert error.candidate_id == "INC001"

    def test_transition_error_without_allowed_list(self) -> None:
        error = InvalidSessionTransitionError(SessionPhase.SCANNING, "reset")

        assert error.allowed_triggers == []
        assert str(error) == "Cannot reset while session is SCANNING."
