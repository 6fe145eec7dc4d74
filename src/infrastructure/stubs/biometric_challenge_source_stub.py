"""Biometric challenge sources for demos and tests.

SimulatedChallengeSourceStub reproduces the kiosk demo: after a short
delay the scan matches with a fixed probability. ScriptedChallengeSourceStub
plays back a fixed sequence of steps so tests get deterministic
match/no-match/decline/error/hang behavior.

WARNING: These sources perform no real biometric matching.
"""

from __future__ import annotations

import asyncio
import random
from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from src.domain.errors import BiometricDeclinedError
from src.domain.models.biometric import (
    BiometricChallenge,
    BiometricMethod,
    ChallengeResponse,
)


class SimulatedChallengeSourceStub:
    """Random match signal after a timer delay.

    Attributes:
        method: Reported biometric method.
        match_rate: Probability in [0, 1] that a scan matches.
        delay_seconds: Simulated scanning time.
        available: Value returned by is_available().
    """

    def __init__(
        self,
        match_rate: float = 0.85,
        delay_seconds: float = 2.0,
        method: BiometricMethod = BiometricMethod.SIMULATED,
        seed: int | None = None,
        available: bool = True,
    ) -> None:
        if not 0.0 <= match_rate <= 1.0:
            raise ValueError(f"match_rate must be within [0, 1], got {match_rate}")
        if delay_seconds < 0:
            raise ValueError(f"delay_seconds must be non-negative, got {delay_seconds}")
        self.method = method
        self.match_rate = match_rate
        self.delay_seconds = delay_seconds
        self.available = available
        self._rng = random.Random(seed)

    def is_available(self) -> bool:
        return self.available

    async def respond(self, challenge: BiometricChallenge) -> ChallengeResponse:
        await asyncio.sleep(self.delay_seconds)
        return ChallengeResponse(matched=self._rng.random() < self.match_rate)


class ScriptKind(Enum):
    """What a scripted step does."""

    MATCH = "match"
    NO_MATCH = "no_match"
    DECLINE = "decline"
    ERROR = "error"
    HANG = "hang"


@dataclass(frozen=True)
class ScriptStep:
    """One scripted response.

    Attributes:
        kind: Behavior of the step.
        template_ref: Template reported on MATCH.
        message: Error text for ERROR steps.
    """

    kind: ScriptKind
    template_ref: str | None = None
    message: str = "scripted biometric failure"

    @classmethod
    def match(cls, template_ref: str | None = None) -> ScriptStep:
        return cls(ScriptKind.MATCH, template_ref=template_ref)

    @classmethod
    def no_match(cls) -> ScriptStep:
        return cls(ScriptKind.NO_MATCH)

    @classmethod
    def decline(cls) -> ScriptStep:
        return cls(ScriptKind.DECLINE)

    @classmethod
    def error(cls, message: str = "scripted biometric failure") -> ScriptStep:
        return cls(ScriptKind.ERROR, message=message)

    @classmethod
    def hang(cls) -> ScriptStep:
        return cls(ScriptKind.HANG)


class ScriptedChallengeSourceStub:
    """Deterministic challenge source driven by a script.

    When the script runs out, every further challenge is a NO_MATCH.

    Attributes:
        method: Reported biometric method.
        available: Value returned by is_available().
        challenges: Every challenge received, in order.
    """

    def __init__(
        self,
        steps: Iterable[ScriptStep] = (),
        method: BiometricMethod = BiometricMethod.SIMULATED,
        available: bool = True,
    ) -> None:
        self.method = method
        self.available = available
        self.challenges: list[BiometricChallenge] = []
        self._steps: deque[ScriptStep] = deque(steps)

    def queue(self, *steps: ScriptStep) -> None:
        """Append steps to the script."""
        self._steps.extend(steps)

    @property
    def remaining(self) -> int:
        return len(self._steps)

    def is_available(self) -> bool:
        return self.available

    async def respond(self, challenge: BiometricChallenge) -> ChallengeResponse:
        self.challenges.append(challenge)
        step = self._steps.popleft() if self._steps else ScriptStep.no_match()

        if step.kind == ScriptKind.MATCH:
            return ChallengeResponse(matched=True, template_ref=step.template_ref)
        if step.kind == ScriptKind.DECLINE:
            raise BiometricDeclinedError("User dismissed the biometric prompt")
        if step.kind == ScriptKind.ERROR:
            raise RuntimeError(step.message)
        if step.kind == ScriptKind.HANG:
            # Runs until the provider's timeout cancels it
            await asyncio.Event().wait()
        return ChallengeResponse(matched=False)
