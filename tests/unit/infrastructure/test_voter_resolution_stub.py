"""Unit tests for voter resolution strategies."""

from collections import Counter
from uuid import uuid4

from src.domain.models.biometric import BiometricCapture, BiometricMethod
from src.domain.models.voter import VoterIdentity
from src.infrastructure.stubs import (
    FixedMappingResolutionStub,
    RandomVoterResolutionStub,
)
from tests.helpers import BiasedDuplicateResolver

VOTERS = [VoterIdentity(id=f"IND00{i}", display_name=f"Voter {i}") for i in range(1, 6)]
CAPTURE = BiometricCapture(challenge_id=uuid4(), method=BiometricMethod.SIMULATED)


class TestRandomVoterResolutionStub:
    """Tests for uniform random resolution."""

    def test_seeded_picks_are_reproducible(self) -> None:
        a = RandomVoterResolutionStub(seed=42)
        b = RandomVoterResolutionStub(seed=42)

        picks_a = [a.resolve(CAPTURE, VOTERS, frozenset()) for _ in range(20)]
        picks_b = [b.resolve(CAPTURE, VOTERS, frozenset()) for _ in range(20)]

        assert picks_a == picks_b

    def test_picks_only_eligible_ids(self) -> None:
        strategy = RandomVoterResolutionStub(seed=1)
        ids = {v.id for v in VOTERS}

        assert all(
            strategy.resolve(CAPTURE, VOTERS, frozenset()) in ids for _ in range(50)
        )

    def test_no_bias_toward_voted(self) -> None:
        """Already-voted voters are not picked more often than others."""
        strategy = RandomVoterResolutionStub(seed=3)
        voted = frozenset({"IND001"})

        counts = Counter(strategy.resolve(CAPTURE, VOTERS, voted) for _ in range(2000))

        # Uniform expectation is 400 per voter
        assert counts["IND001"] < 500

    def test_empty_registry_resolves_to_none(self) -> None:
        assert RandomVoterResolutionStub().resolve(CAPTURE, [], frozenset()) is None


class TestFixedMappingResolutionStub:
    """Tests for template_ref mapping."""

    def test_mapping(self) -> None:
        strategy = FixedMappingResolutionStub({"tpl-3": "IND003"})
        capture = BiometricCapture(
            challenge_id=uuid4(), method=BiometricMethod.PLATFORM, template_ref="tpl-3"
        )

        assert strategy.resolve(capture, VOTERS, frozenset()) == "IND003"

    def test_missing_template_ref(self) -> None:
        strategy = FixedMappingResolutionStub({"tpl-3": "IND003"})

        assert strategy.resolve(CAPTURE, VOTERS, frozenset()) is None


class TestBiasedDuplicateResolver:
    """The repeat-voter bias exists only as a test helper."""

    def test_full_bias_always_picks_voted(self) -> None:
        resolver = BiasedDuplicateResolver(bias=1.0)
        voted = frozenset({"IND002", "IND004"})

        picks = {resolver.resolve(CAPTURE, VOTERS, voted) for _ in range(30)}

        assert picks <= voted
        assert resolver.calls == 30

    def test_falls_back_when_nobody_voted(self) -> None:
        resolver = BiasedDuplicateResolver(bias=1.0)

        assert resolver.resolve(CAPTURE, VOTERS, frozenset()) in {v.id for v in VOTERS}
