"""Unit tests for the simulated and scripted challenge sources."""

import pytest

from src.domain.errors import BiometricDeclinedError
from src.domain.models.biometric import BiometricChallenge
from src.infrastructure.stubs import (
    ScriptedChallengeSourceStub,
    ScriptStep,
    SimulatedChallengeSourceStub,
)


class TestSimulatedChallengeSourceStub:
    """Tests for the timer-based simulation."""

    @pytest.mark.asyncio
    async def test_rate_one_always_matches(self) -> None:
        source = SimulatedChallengeSourceStub(match_rate=1.0, delay_seconds=0)

        responses = [await source.respond(BiometricChallenge.create()) for _ in range(10)]

        assert all(r.matched for r in responses)

    @pytest.mark.asyncio
    async def test_rate_zero_never_matches(self) -> None:
        source = SimulatedChallengeSourceStub(match_rate=0.0, delay_seconds=0)

        responses = [await source.respond(BiometricChallenge.create()) for _ in range(10)]

        assert not any(r.matched for r in responses)

    @pytest.mark.asyncio
    async def test_seeded_sequence_is_reproducible(self) -> None:
        a = SimulatedChallengeSourceStub(match_rate=0.5, delay_seconds=0, seed=11)
        b = SimulatedChallengeSourceStub(match_rate=0.5, delay_seconds=0, seed=11)
        challenge = BiometricChallenge.create()

        seq_a = [(await a.respond(challenge)).matched for _ in range(20)]
        seq_b = [(await b.respond(challenge)).matched for _ in range(20)]

        assert seq_a == seq_b

    @pytest.mark.parametrize(
        ("match_rate", "delay_seconds"),
        [(-0.1, 0.0), (1.5, 0.0), (0.5, -1.0)],
    )
    def test_invalid_parameters_rejected(
        self, match_rate: float, delay_seconds: float
    ) -> None:
        with pytest.raises(ValueError):
            SimulatedChallengeSourceStub(
                match_rate=match_rate, delay_seconds=delay_seconds
            )


class TestScriptedChallengeSourceStub:
    """Tests for scripted playback."""

    @pytest.mark.asyncio
    async def test_plays_steps_in_order(self) -> None:
        source = ScriptedChallengeSourceStub(
            [ScriptStep.match("tpl-1"), ScriptStep.no_match()]
        )

        first = await source.respond(BiometricChallenge.create())
        second = await source.respond(BiometricChallenge.create())

        assert first.matched and first.template_ref == "tpl-1"
        assert not second.matched
        assert source.remaining == 0
        assert len(source.challenges) == 2

    @pytest.mark.asyncio
    async def test_exhausted_script_is_no_match(self) -> None:
        source = ScriptedChallengeSourceStub()

        response = await source.respond(BiometricChallenge.create())

        assert response.matched is False

    @pytest.mark.asyncio
    async def test_decline_and_error_raise(self) -> None:
        source = ScriptedChallengeSourceStub()
        source.queue(ScriptStep.decline(), ScriptStep.error("boom"))

        with pytest.raises(BiometricDeclinedError):
            await source.respond(BiometricChallenge.create())
        with pytest.raises(RuntimeError, match="boom"):
            await source.respond(BiometricChallenge.create())
