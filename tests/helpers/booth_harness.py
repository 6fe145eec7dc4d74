"""Deterministically wired booth for integration tests.

Only the biometric source, the capture resolution policy and the clock
are replaced; everything else is what ``build_booth_kiosk`` wires in
production.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from unittest.mock import MagicMock

from src.application.ports.voter_registry import VoterResolutionStrategyProtocol
from src.application.services.booth_kiosk_service import BoothKioskService
from src.bootstrap.booth import build_booth_kiosk
from src.config import TEST_BOOTH_CONFIG
from src.domain.models.voter import Candidate, VoterIdentity
from src.infrastructure.stubs import (
    FixedMappingResolutionStub,
    ScriptedChallengeSourceStub,
)
from tests.helpers.fake_time_authority import FakeTimeAuthority

HARNESS_VOTERS = (
    VoterIdentity(id="V1", display_name="First Voter"),
    VoterIdentity(id="V2", display_name="Second Voter"),
    VoterIdentity(id="V3", display_name="Third Voter"),
)
HARNESS_CANDIDATES = (
    Candidate(id="CAND-A", name="Candidate A", party="Party A"),
    Candidate(id="CAND-B", name="Candidate B", party="Party B"),
)


@dataclass
class BoothHarness:
    """A wired booth plus handles on its replaceable collaborators.

    Attributes:
        kiosk: The booth under test.
        scanner: Scripted fallback challenge source.
        resolver: Spy wrapping the resolution strategy.
        clock: Fake time authority shared by every component.
    """

    kiosk: BoothKioskService
    scanner: ScriptedChallengeSourceStub
    resolver: MagicMock
    clock: FakeTimeAuthority


def make_booth(
    already_voted: Iterable[str] = (),
    voters: Iterable[VoterIdentity] = HARNESS_VOTERS,
    resolution_strategy: VoterResolutionStrategyProtocol | None = None,
) -> BoothHarness:
    """Build a booth where template ``tpl-<id>`` resolves to voter ``<id>``."""
    voters = tuple(voters)
    scanner = ScriptedChallengeSourceStub()
    resolver = MagicMock(
        wraps=resolution_strategy
        or FixedMappingResolutionStub({f"tpl-{v.id}": v.id for v in voters})
    )
    clock = FakeTimeAuthority()
    kiosk = build_booth_kiosk(
        TEST_BOOTH_CONFIG,
        voters=voters,
        candidates=HARNESS_CANDIDATES,
        already_voted=already_voted,
        fallback_source=scanner,
        resolution_strategy=resolver,
        time_authority=clock,
    )
    return BoothHarness(kiosk=kiosk, scanner=scanner, resolver=resolver, clock=clock)
