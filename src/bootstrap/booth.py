"""Bootstrap wiring for the booth kiosk.

``build_booth_kiosk`` assembles one booth from a BoothConfig and a roster.
The API uses a lazily built process singleton through ``get_booth_kiosk``;
tests swap or drop it with ``set_booth_kiosk`` / ``reset_booth_kiosk``.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from structlog import get_logger

from src.application.ports.biometric_provider import BiometricChallengeSourceProtocol
from src.application.ports.time_authority import TimeAuthorityProtocol
from src.application.ports.voter_registry import VoterResolutionStrategyProtocol
from src.application.services.authentication_engine import AuthenticationEngine
from src.application.services.booth_kiosk_service import BoothKioskService
from src.application.services.stats_aggregator import StatsAggregator
from src.application.services.voting_session_machine import VotingSessionMachine
from src.config.booth_config import PLATFORM_MATCH_RATE, BoothConfig
from src.config.demo_roster import DEMO_CANDIDATES, DEMO_VOTERS
from src.domain.models.biometric import BiometricMethod
from src.domain.models.booth_stats import StatsEvent
from src.domain.models.voter import Candidate, VoterIdentity
from src.infrastructure.adapters.biometric import ChallengeBiometricProvider
from src.infrastructure.adapters.system_time_authority import SystemTimeAuthority
from src.infrastructure.stubs.alert_sink_stub import AlertSinkStub
from src.infrastructure.stubs.biometric_challenge_source_stub import (
    SimulatedChallengeSourceStub,
)
from src.infrastructure.stubs.vote_ledger_stub import CastVoteLedgerStub
from src.infrastructure.stubs.voter_registry_stub import VoterRegistryStub
from src.infrastructure.stubs.voter_resolution_stub import RandomVoterResolutionStub

logger = get_logger(__name__)

_booth_kiosk: BoothKioskService | None = None


def build_booth_kiosk(
    config: BoothConfig,
    voters: Iterable[VoterIdentity] = DEMO_VOTERS,
    candidates: Sequence[Candidate] = DEMO_CANDIDATES,
    *,
    already_voted: Iterable[str] = (),
    fallback_source: BiometricChallengeSourceProtocol | None = None,
    platform_source: BiometricChallengeSourceProtocol | None = None,
    resolution_strategy: VoterResolutionStrategyProtocol | None = None,
    time_authority: TimeAuthorityProtocol | None = None,
    seed_events: Iterable[StatsEvent] = (),
) -> BoothKioskService:
    """Wire every port of one booth.

    Any collaborator left as None gets the default for the config: the
    timer-based scanner simulation, a simulated platform authenticator
    when ``config.platform_available`` is set, uniform random resolution
    and the system clock.

    Raises:
        DuplicateVoterIdError: Two voters share an id.
        DuplicateCandidateIdError: Two candidates share an id.
    """
    clock = time_authority or SystemTimeAuthority()

    if fallback_source is None:
        fallback_source = SimulatedChallengeSourceStub(
            match_rate=config.simulated_match_rate,
            delay_seconds=config.scan_delay_seconds,
            method=BiometricMethod.SIMULATED,
            seed=config.random_seed,
        )
    if platform_source is None and config.platform_available:
        # Own random stream, offset from the scanner seed
        platform_seed = (
            config.random_seed + 1 if config.random_seed is not None else None
        )
        platform_source = SimulatedChallengeSourceStub(
            match_rate=PLATFORM_MATCH_RATE,
            delay_seconds=config.scan_delay_seconds,
            method=BiometricMethod.PLATFORM,
            seed=platform_seed,
        )

    registry = VoterRegistryStub(
        voters=voters,
        resolution_strategy=resolution_strategy
        or RandomVoterResolutionStub(seed=config.random_seed),
        already_voted=already_voted,
    )
    provider = ChallengeBiometricProvider(
        fallback_source=fallback_source,
        platform_source=platform_source,
        timeout_seconds=config.biometric_timeout_seconds,
    )
    stats = StatsAggregator(
        total_registered=registry.total_registered(),
        time_authority=clock,
        seed_events=seed_events,
    )
    alerts = AlertSinkStub()
    engine = AuthenticationEngine(
        biometric_provider=provider,
        voter_registry=registry,
        time_authority=clock,
    )
    machine = VotingSessionMachine(
        authentication_engine=engine,
        voter_registry=registry,
        vote_ledger=CastVoteLedgerStub(),
        stats_aggregator=stats,
        alert_sink=alerts,
        time_authority=clock,
        candidates=candidates,
        booth_id=config.booth_id,
        alert_dismiss_seconds=config.alert_dismiss_seconds,
    )

    logger.info(
        "booth_kiosk_built",
        booth_id=config.booth_id,
        registered=registry.total_registered(),
        candidates=len(machine.candidates),
        platform_source=platform_source is not None,
    )
    return BoothKioskService(
        session_machine=machine,
        stats_aggregator=stats,
        alert_sink=alerts,
        time_authority=clock,
        booth_id=config.booth_id,
    )


def get_booth_kiosk() -> BoothKioskService:
    """Get the process booth kiosk, building it from the environment."""
    global _booth_kiosk
    if _booth_kiosk is None:
        _booth_kiosk = build_booth_kiosk(BoothConfig.from_environment())
    return _booth_kiosk


def set_booth_kiosk(kiosk: BoothKioskService) -> None:
    """Set custom booth kiosk for testing."""
    global _booth_kiosk
    _booth_kiosk = kiosk


def reset_booth_kiosk() -> None:
    """Reset the singleton instance for testing."""
    global _booth_kiosk
    _booth_kiosk = None
