"""Biometric provider ports.

BiometricProviderProtocol is what the authentication engine talks to.
BiometricChallengeSourceProtocol is the pluggable capability underneath it
that actually produces a match signal: a platform authenticator, a browser
credential ceremony, or a simulation. Tests inject scripted sources so
match/no-match sequences are deterministic.

Contract notes:
- A user failing to match is a normal ``matched=False`` result.
- Infrastructure failures raise BiometricProviderError (or its
  BiometricTimeoutError subclass); callers MUST treat them as a failed
  match, never as a pass.
- Neither protocol may touch the voter registry or the stats counters.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Protocol

from src.domain.models.biometric import (
    BiometricChallenge,
    BiometricMatchResult,
    BiometricMethod,
    ChallengeResponse,
)


class BiometricChallengeSourceProtocol(Protocol):
    """Capability that answers a biometric challenge.

    Attributes:
        method: The BiometricMethod this source implements.
    """

    method: BiometricMethod

    @abstractmethod
    def is_available(self) -> bool:
        """Return True if this source can run in the current context."""
        ...

    @abstractmethod
    async def respond(self, challenge: BiometricChallenge) -> ChallengeResponse:
        """Run the challenge and report whether the biometric matched.

        Args:
            challenge: The challenge to answer.

        Returns:
            ChallengeResponse with the raw match signal.

        Raises:
            BiometricDeclinedError: The user dismissed the prompt.
            Exception: Any other failure is an infrastructure failure.
        """
        ...


class BiometricProviderProtocol(Protocol):
    """Protocol for the booth's biometric capability."""

    @abstractmethod
    def check_availability(self) -> bool:
        """Return True if platform biometric verification is supported.

        False means the provider will use its fallback path; it does not
        mean authentication is impossible.
        """
        ...

    @abstractmethod
    async def authenticate(self, challenge: BiometricChallenge) -> BiometricMatchResult:
        """Run one biometric challenge.

        This is the only suspension point of an authentication attempt.

        Args:
            challenge: The challenge issued for this attempt.

        Returns:
            BiometricMatchResult; ``capture`` is present only on a match.

        Raises:
            BiometricTimeoutError: The challenge exceeded its timeout.
            BiometricProviderError: The capability failed.
        """
        ...
