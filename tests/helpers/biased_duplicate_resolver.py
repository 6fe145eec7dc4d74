"""BiasedDuplicateResolver - resolution strategy that favors repeat voters.

The demo kiosk once preferred an already-voted identity so duplicate
detection could be shown off. That bias lives here, as a test fixture,
never in the shipped resolution strategies.
"""

from __future__ import annotations

import random
from collections.abc import Sequence

from src.domain.models.biometric import BiometricCapture
from src.domain.models.voter import VoterIdentity


class BiasedDuplicateResolver:
    """Resolve to an already-voted voter with probability ``bias``.

    Falls back to a uniform pick among all eligible voters when nobody
    has voted yet or the coin says no.

    Attributes:
        bias: Probability in [0, 1] of picking an already-voted voter.
        calls: Number of resolve() calls made.
    """

    def __init__(self, bias: float = 1.0, seed: int | None = 0) -> None:
        if not 0.0 <= bias <= 1.0:
            raise ValueError(f"bias must be within [0, 1], got {bias}")
        self.bias = bias
        self.calls = 0
        self._rng = random.Random(seed)

    def resolve(
        self,
        capture: BiometricCapture,
        eligible: Sequence[VoterIdentity],
        voted_ids: frozenset[str],
    ) -> str | None:
        self.calls += 1
        if not eligible:
            return None
        voted = sorted(v.id for v in eligible if v.id in voted_ids)
        if voted and self._rng.random() < self.bias:
            return self._rng.choice(voted)
        return self._rng.choice(list(eligible)).id
