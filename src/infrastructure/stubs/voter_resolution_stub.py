"""Voter resolution strategies.

Without real template matching, resolution from a capture to a voter is a
policy. Two are provided:

- RandomVoterResolutionStub: uniform pick among all eligible voters. This
  is the demo default and has no bias toward voters who already voted.
- FixedMappingResolutionStub: looks up ``capture.template_ref`` in a fixed
  map, the way a real system would resolve from a stored template.
"""

from __future__ import annotations

import random
from collections.abc import Mapping, Sequence

from src.domain.models.biometric import BiometricCapture
from src.domain.models.voter import VoterIdentity


class RandomVoterResolutionStub:
    """Uniform random resolution among eligible voters.

    Attributes:
        seed: Seed for the private RNG; None for nondeterministic picks.
    """

    def __init__(self, seed: int | None = None) -> None:
        self.seed = seed
        self._rng = random.Random(seed)

    def resolve(
        self,
        capture: BiometricCapture,
        eligible: Sequence[VoterIdentity],
        voted_ids: frozenset[str],
    ) -> str | None:
        if not eligible:
            return None
        return self._rng.choice(list(eligible)).id


class FixedMappingResolutionStub:
    """Resolve captures through a template_ref -> voter_id map.

    Captures without a template_ref, or with an unmapped one, resolve to
    nobody. A mapped id that is not registered is passed through; the
    registry turns it into None.
    """

    def __init__(self, mapping: Mapping[str, str]) -> None:
        self._mapping = dict(mapping)

    def resolve(
        self,
        capture: BiometricCapture,
        eligible: Sequence[VoterIdentity],
        voted_ids: frozenset[str],
    ) -> str | None:
        if capture.template_ref is None:
            return None
        return self._mapping.get(capture.template_ref)
