"""Unit tests for AuthenticationEngine.

Tests cover:
- Success for a matched, registered, new voter
- Duplicate for a matched voter already marked as voted
- Failure(BIOMETRIC_MISMATCH) without any registry lookup
- Failure(NO_REGISTRY_MATCH) when resolution yields nobody
- Provider errors and timeouts failing closed
- The engine never marking a voter
"""

from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest

from src.application.services.authentication_engine import AuthenticationEngine
from src.domain.errors import BiometricProviderError, BiometricTimeoutError
from src.domain.models.authentication import (
    AuthenticationDuplicate,
    AuthenticationFailure,
    AuthenticationSuccess,
    FailureReason,
)
from src.domain.models.biometric import (
    BiometricCapture,
    BiometricChallenge,
    BiometricMatchResult,
    BiometricMethod,
)
from src.domain.models.voter import VoterIdentity
from tests.helpers import FakeTimeAuthority

VOTER = VoterIdentity(id="IND003", display_name="Amit Singh")


def _matched(method: BiometricMethod = BiometricMethod.SIMULATED) -> BiometricMatchResult:
    return BiometricMatchResult(
        matched=True,
        method=method,
        capture=BiometricCapture(challenge_id=uuid4(), method=method),
    )


@pytest.fixture
def provider() -> MagicMock:
    """Biometric provider that matches on the fallback path."""
    mock = MagicMock()
    mock.check_availability = MagicMock(return_value=False)
    mock.authenticate = AsyncMock(return_value=_matched())
    return mock


@pytest.fixture
def registry() -> MagicMock:
    """Registry resolving every capture to a voter who has not voted."""
    mock = MagicMock()
    mock.resolve_matched_voter = MagicMock(return_value=VOTER)
    mock.has_voted = MagicMock(return_value=False)
    return mock


@pytest.fixture
def engine(provider: MagicMock, registry: MagicMock) -> AuthenticationEngine:
    return AuthenticationEngine(
        biometric_provider=provider,
        voter_registry=registry,
        time_authority=FakeTimeAuthority(),
    )


class TestClassification:
    """Tests for the three outcome variants."""

    @pytest.mark.asyncio
    async def test_new_voter_is_success(
        self, engine: AuthenticationEngine, registry: MagicMock
    ) -> None:
        outcome = await engine.attempt()

        assert isinstance(outcome, AuthenticationSuccess)
        assert outcome.voter == VOTER
        assert outcome.method == BiometricMethod.SIMULATED
        registry.has_voted.assert_called_once_with("IND003")

    @pytest.mark.asyncio
    async def test_already_voted_is_duplicate(
        self, engine: AuthenticationEngine, registry: MagicMock
    ) -> None:
        registry.has_voted.return_value = True

        outcome = await engine.attempt()

        assert isinstance(outcome, AuthenticationDuplicate)
        assert outcome.voter == VOTER

    @pytest.mark.asyncio
    async def test_no_registry_match_is_failure(
        self, engine: AuthenticationEngine, registry: MagicMock
    ) -> None:
        registry.resolve_matched_voter.return_value = None

        outcome = await engine.attempt()

        assert isinstance(outcome, AuthenticationFailure)
        assert outcome.reason == FailureReason.NO_REGISTRY_MATCH
        registry.has_voted.assert_not_called()

    @pytest.mark.asyncio
    async def test_platform_path_reports_platform_method(
        self, engine: AuthenticationEngine, provider: MagicMock
    ) -> None:
        provider.check_availability.return_value = True
        provider.authenticate.return_value = _matched(BiometricMethod.PLATFORM)

        outcome = await engine.attempt()

        assert isinstance(outcome, AuthenticationSuccess)
        assert outcome.method == BiometricMethod.PLATFORM


class TestBiometricFirst:
    """Matching is evaluated strictly before registry membership."""

    @pytest.mark.asyncio
    async def test_mismatch_never_consults_registry(
        self,
        engine: AuthenticationEngine,
        provider: MagicMock,
        registry: MagicMock,
    ) -> None:
        provider.authenticate.return_value = BiometricMatchResult(
            matched=False, method=BiometricMethod.SIMULATED
        )

        outcome = await engine.attempt()

        assert isinstance(outcome, AuthenticationFailure)
        assert outcome.reason == FailureReason.BIOMETRIC_MISMATCH
        assert registry.resolve_matched_voter.call_count == 0
        assert registry.has_voted.call_count == 0

    @pytest.mark.asyncio
    async def test_mismatch_for_voted_voter_is_failure_not_duplicate(
        self,
        engine: AuthenticationEngine,
        provider: MagicMock,
        registry: MagicMock,
    ) -> None:
        """An already-voted voter whose scan fails is a Failure."""
        registry.has_voted.return_value = True
        provider.authenticate.return_value = BiometricMatchResult(
            matched=False, method=BiometricMethod.SIMULATED
        )

        outcome = await engine.attempt()

        assert isinstance(outcome, AuthenticationFailure)

    @pytest.mark.asyncio
    async def test_fresh_challenge_per_attempt(
        self, engine: AuthenticationEngine, provider: MagicMock
    ) -> None:
        await engine.attempt()
        await engine.attempt()

        first = provider.authenticate.await_args_list[0].args[0]
        second = provider.authenticate.await_args_list[1].args[0]
        assert isinstance(first, BiometricChallenge)
        assert first.challenge_id != second.challenge_id


class TestFailClosed:
    """Infrastructure failures are failures, never passes."""

    @pytest.mark.asyncio
    async def test_provider_error_is_failure(
        self,
        engine: AuthenticationEngine,
        provider: MagicMock,
        registry: MagicMock,
    ) -> None:
        provider.authenticate.side_effect = BiometricProviderError(
            "authenticator unavailable", method="platform"
        )

        outcome = await engine.attempt()

        assert isinstance(outcome, AuthenticationFailure)
        assert outcome.reason == FailureReason.PROVIDER_ERROR
        assert outcome.method is None
        registry.resolve_matched_voter.assert_not_called()

    @pytest.mark.asyncio
    async def test_timeout_is_failure(
        self,
        engine: AuthenticationEngine,
        provider: MagicMock,
        registry: MagicMock,
    ) -> None:
        provider.authenticate.side_effect = BiometricTimeoutError(30.0)

        outcome = await engine.attempt()

        assert isinstance(outcome, AuthenticationFailure)
        assert outcome.reason == FailureReason.TIMEOUT
        registry.resolve_matched_voter.assert_not_called()


class TestNoMutation:
    """The engine never marks voters."""

    @pytest.mark.asyncio
    async def test_success_does_not_mark_voter(
        self, engine: AuthenticationEngine, registry: MagicMock
    ) -> None:
        await engine.attempt()

        registry.mark_voted.assert_not_called()

    @pytest.mark.asyncio
    async def test_duplicate_does_not_mark_voter(
        self, engine: AuthenticationEngine, registry: MagicMock
    ) -> None:
        registry.has_voted.return_value = True

        await engine.attempt()

        registry.mark_voted.assert_not_called()
