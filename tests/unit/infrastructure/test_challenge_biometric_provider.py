"""Unit tests for ChallengeBiometricProvider.

Tests cover:
- platform vs fallback path selection
- decline maps to a normal non-match
- timeout maps to BiometricTimeoutError
- any other source exception maps to BiometricProviderError
"""

from unittest.mock import MagicMock

import pytest

from src.domain.errors import BiometricProviderError, BiometricTimeoutError
from src.domain.models.biometric import BiometricChallenge, BiometricMethod
from src.infrastructure.adapters.biometric import ChallengeBiometricProvider
from src.infrastructure.stubs import ScriptedChallengeSourceStub, ScriptStep


@pytest.fixture
def challenge() -> BiometricChallenge:
    return BiometricChallenge.create()


class TestPathSelection:
    """Tests for check_availability() and source selection."""

    def test_no_platform_source_is_unavailable(self) -> None:
        provider = ChallengeBiometricProvider(ScriptedChallengeSourceStub())

        assert provider.check_availability() is False

    def test_platform_reports_available(self) -> None:
        platform = ScriptedChallengeSourceStub(method=BiometricMethod.PLATFORM)
        provider = ChallengeBiometricProvider(
            ScriptedChallengeSourceStub(), platform_source=platform
        )

        assert provider.check_availability() is True

    def test_availability_check_exception_is_unavailable(self) -> None:
        platform = MagicMock()
        platform.is_available.side_effect = RuntimeError("no authenticator")
        provider = ChallengeBiometricProvider(
            ScriptedChallengeSourceStub(), platform_source=platform
        )

        assert provider.check_availability() is False

    @pytest.mark.asyncio
    async def test_available_platform_is_used(
        self, challenge: BiometricChallenge
    ) -> None:
        fallback = ScriptedChallengeSourceStub([ScriptStep.no_match()])
        platform = ScriptedChallengeSourceStub(
            [ScriptStep.match("tpl-1")], method=BiometricMethod.PLATFORM
        )
        provider = ChallengeBiometricProvider(fallback, platform_source=platform)

        result = await provider.authenticate(challenge)

        assert result.matched is True
        assert result.method == BiometricMethod.PLATFORM
        assert platform.challenges == [challenge]
        assert fallback.challenges == []

    @pytest.mark.asyncio
    async def test_unavailable_platform_falls_back(
        self, challenge: BiometricChallenge
    ) -> None:
        fallback = ScriptedChallengeSourceStub([ScriptStep.match("tpl-2")])
        platform = ScriptedChallengeSourceStub(
            method=BiometricMethod.PLATFORM, available=False
        )
        provider = ChallengeBiometricProvider(fallback, platform_source=platform)

        result = await provider.authenticate(challenge)

        assert result.method == BiometricMethod.SIMULATED
        assert platform.challenges == []


class TestMatchResults:
    """Tests for mapping source responses to BiometricMatchResult."""

    @pytest.mark.asyncio
    async def test_match_carries_capture(self, challenge: BiometricChallenge) -> None:
        provider = ChallengeBiometricProvider(
            ScriptedChallengeSourceStub([ScriptStep.match("tpl-9")])
        )

        result = await provider.authenticate(challenge)

        assert result.capture is not None
        assert result.capture.challenge_id == challenge.challenge_id
        assert result.capture.template_ref == "tpl-9"

    @pytest.mark.asyncio
    async def test_no_match_has_no_capture(self, challenge: BiometricChallenge) -> None:
        provider = ChallengeBiometricProvider(
            ScriptedChallengeSourceStub([ScriptStep.no_match()])
        )

        result = await provider.authenticate(challenge)

        assert result.matched is False
        assert result.capture is None

    @pytest.mark.asyncio
    async def test_decline_is_non_match(self, challenge: BiometricChallenge) -> None:
        provider = ChallengeBiometricProvider(
            ScriptedChallengeSourceStub([ScriptStep.decline()])
        )

        result = await provider.authenticate(challenge)

        assert result.matched is False


class TestErrorMapping:
    """Infrastructure failures surface as provider errors."""

    @pytest.mark.asyncio
    async def test_hang_times_out(self, challenge: BiometricChallenge) -> None:
        provider = ChallengeBiometricProvider(
            ScriptedChallengeSourceStub([ScriptStep.hang()]),
            timeout_seconds=0.05,
        )

        with pytest.raises(BiometricTimeoutError) as exc_info:
            await provider.authenticate(challenge)

        assert exc_info.value.timeout_seconds == 0.05
        assert exc_info.value.method == "simulated"

    @pytest.mark.asyncio
    async def test_source_exception_becomes_provider_error(
        self, challenge: BiometricChallenge
    ) -> None:
        provider = ChallengeBiometricProvider(
            ScriptedChallengeSourceStub([ScriptStep.error("sensor unplugged")])
        )

        with pytest.raises(BiometricProviderError) as exc_info:
            await provider.authenticate(challenge)

        assert "sensor unplugged" in str(exc_info.value)
        assert not isinstance(exc_info.value, BiometricTimeoutError)

    def test_non_positive_timeout_rejected(self) -> None:
        with pytest.raises(ValueError, match="timeout_seconds"):
            ChallengeBiometricProvider(ScriptedChallengeSourceStub(), timeout_seconds=0)
