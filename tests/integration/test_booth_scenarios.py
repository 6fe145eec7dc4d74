"""Integration tests for end-to-end booth sessions.

Each scenario drives the wired kiosk through scan, vote and reset and
checks the registry-visible outcome and the counters together.
"""

import asyncio

import pytest

from src.domain.models.authentication import (
    AuthenticationDuplicate,
    AuthenticationFailure,
    AuthenticationSuccess,
    FailureReason,
)
from src.domain.models.session_state import SessionPhase
from src.infrastructure.stubs import ScriptStep
from tests.helpers import BoothHarness, make_booth

pytestmark = pytest.mark.integration


class TestNewVoterCastsVote:
    """A registered voter who has not voted authenticates and votes."""

    @pytest.mark.asyncio
    async def test_success_then_vote(self, booth: BoothHarness) -> None:
        booth.scanner.queue(ScriptStep.match("tpl-V1"))

        result = await booth.kiosk.start_scan()

        assert isinstance(result.outcome, AuthenticationSuccess)
        assert result.outcome.voter.id == "V1"
        assert result.state.phase == SessionPhase.BALLOT_OPEN

        receipt = booth.kiosk.submit_vote("CAND-A")

        assert receipt.record.voter_id == "V1"
        assert receipt.record.candidate_id == "CAND-A"
        assert receipt.record.cast_at == booth.clock.now()
        assert receipt.state.phase == SessionPhase.COMPLETE
        assert booth.kiosk.get_stats().voted_count == 1

        # A second scan of the same voter is now a duplicate
        booth.kiosk.reset_session()
        booth.scanner.queue(ScriptStep.match("tpl-V1"))
        assert isinstance(
            (await booth.kiosk.start_scan()).outcome, AuthenticationDuplicate
        )


class TestAlreadyVotedVoterRejected:
    """A voter marked as voted is reported as a duplicate."""

    @pytest.mark.asyncio
    async def test_duplicate_detected(self) -> None:
        booth = make_booth(already_voted=("V2",))
        booth.scanner.queue(ScriptStep.match("tpl-V2"))
        before = booth.kiosk.get_stats()

        result = await booth.kiosk.start_scan()

        after = booth.kiosk.get_stats()
        assert isinstance(result.outcome, AuthenticationDuplicate)
        assert result.outcome.voter.id == "V2"
        assert result.state.phase == SessionPhase.IDLE
        assert after.voted_count == before.voted_count
        assert after.duplicate_attempts == before.duplicate_attempts + 1

        alert = booth.kiosk.get_active_alert()
        assert alert is not None
        assert alert.title == "Duplicate Vote Detected!"


class TestBiometricMismatch:
    """A non-matching scan never reaches the registry."""

    @pytest.mark.asyncio
    async def test_mismatch_skips_resolution(self, booth: BoothHarness) -> None:
        booth.scanner.queue(ScriptStep.no_match())

        result = await booth.kiosk.start_scan()

        assert isinstance(result.outcome, AuthenticationFailure)
        assert result.outcome.reason == FailureReason.BIOMETRIC_MISMATCH
        assert booth.resolver.resolve.call_count == 0
        assert booth.kiosk.get_stats().verification_failures == 1
        assert result.state.phase == SessionPhase.IDLE

    @pytest.mark.asyncio
    async def test_retry_after_failure(self, booth: BoothHarness) -> None:
        booth.scanner.queue(ScriptStep.no_match(), ScriptStep.match("tpl-V3"))

        await booth.kiosk.start_scan()
        result = await booth.kiosk.start_scan()

        assert isinstance(result.outcome, AuthenticationSuccess)
        assert booth.resolver.resolve.call_count == 1


class TestResetBetweenVoters:
    """Completing one voter leaves nothing behind for the next."""

    @pytest.mark.asyncio
    async def test_next_voter_authenticates(self, booth: BoothHarness) -> None:
        booth.scanner.queue(ScriptStep.match("tpl-V1"), ScriptStep.match("tpl-V2"))
        first = await booth.kiosk.start_scan()
        booth.kiosk.submit_vote("CAND-A")

        idle = booth.kiosk.reset_session()

        assert idle.phase == SessionPhase.IDLE
        assert idle.voter is None
        assert idle.candidate_id is None
        assert idle.cast_at is None
        assert idle.session_id != first.state.session_id

        second = await booth.kiosk.start_scan()

        assert isinstance(second.outcome, AuthenticationSuccess)
        assert second.outcome.voter.id == "V2"
        assert second.state.voter is not None
        assert second.state.voter.id == "V2"
        assert second.state.candidate_id is None

        booth.kiosk.submit_vote("CAND-B")
        stats = booth.kiosk.get_stats()
        assert stats.voted_count == 2
        assert stats.pending_count == 1


class TestCancelledScan:
    """A scan cancelled mid-challenge leaves the booth usable."""

    @pytest.mark.asyncio
    async def test_booth_recovers_after_cancellation(
        self, booth: BoothHarness
    ) -> None:
        booth.scanner.queue(ScriptStep.hang())
        scan = asyncio.create_task(booth.kiosk.start_scan())
        await asyncio.sleep(0.01)
        assert booth.kiosk.get_state().phase == SessionPhase.SCANNING

        scan.cancel()
        with pytest.raises(asyncio.CancelledError):
            await scan

        assert booth.kiosk.get_state().phase == SessionPhase.IDLE
        assert booth.kiosk.reset_session().phase == SessionPhase.IDLE
        assert booth.kiosk.get_stats().verification_failures == 0

        booth.scanner.queue(ScriptStep.match("tpl-V1"))
        result = await booth.kiosk.start_scan()

        assert isinstance(result.outcome, AuthenticationSuccess)
        assert result.state.phase == SessionPhase.BALLOT_OPEN


class TestEmptyCounters:
    """Rates are defined before any attempt."""

    def test_rates_with_no_activity(self, booth: BoothHarness) -> None:
        stats = booth.kiosk.get_stats()

        assert stats.turnout_rate == 0.0
        assert stats.verification_rate == 0.0

    def test_rates_with_empty_registry(self) -> None:
        booth = make_booth(voters=())

        stats = booth.kiosk.get_stats()
        assert stats.total_registered == 0
        assert stats.turnout_rate == 0.0
