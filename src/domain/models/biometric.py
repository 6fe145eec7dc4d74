"""Biometric challenge value objects.

A challenge is issued per authentication attempt. The provider answers it
with a BiometricMatchResult; on a match the result carries an opaque
BiometricCapture that the voter registry resolves to an identity.
"""

from __future__ import annotations

import secrets
from dataclasses import dataclass, field
from enum import Enum
from uuid import UUID

from uuid6 import uuid7

# Challenge nonce size, matching a WebAuthn challenge buffer
CHALLENGE_NONCE_BYTES = 32

DEFAULT_CHALLENGE_REASON = "Verify your identity to access the ballot"


class BiometricMethod(Enum):
    """How a match signal was produced.

    Methods:
        PLATFORM: Native platform authenticator (fingerprint reader).
        WEB_CREDENTIAL: Browser credential ceremony with user verification.
        SIMULATED: Timer-based simulation used for demos and tests.
    """

    PLATFORM = "platform"
    WEB_CREDENTIAL = "web-credential"
    SIMULATED = "simulated"


@dataclass(frozen=True)
class BiometricChallenge:
    """A single authentication challenge.

    Attributes:
        challenge_id: UUIDv7 identifier of the challenge.
        nonce: Random bytes the authenticator must answer.
        reason: Prompt text shown by the platform dialog.
    """

    challenge_id: UUID
    nonce: bytes
    reason: str = DEFAULT_CHALLENGE_REASON

    @classmethod
    def create(cls, reason: str = DEFAULT_CHALLENGE_REASON) -> BiometricChallenge:
        """Issue a fresh challenge with a random nonce."""
        return cls(
            challenge_id=uuid7(),
            nonce=secrets.token_bytes(CHALLENGE_NONCE_BYTES),
            reason=reason,
        )


@dataclass(frozen=True)
class BiometricCapture:
    """Opaque result of a successful biometric match.

    Attributes:
        challenge_id: The challenge this capture answered.
        method: How the match was produced.
        template_ref: Reference to the matched stored template, when the
            source knows one. Resolution strategies may key on it.
        capture_id: UUIDv7 identifier of the capture.
    """

    challenge_id: UUID
    method: BiometricMethod
    template_ref: str | None = None
    capture_id: UUID = field(default_factory=uuid7)


@dataclass(frozen=True)
class ChallengeResponse:
    """Raw answer from a challenge source before the provider wraps it."""

    matched: bool
    template_ref: str | None = None


@dataclass(frozen=True)
class BiometricMatchResult:
    """Result of BiometricProvider.authenticate().

    Attributes:
        matched: True when the biometric matched an enrolled template.
        method: The method that produced the signal.
        capture: The opaque capture, present only when ``matched``.
    """

    matched: bool
    method: BiometricMethod
    capture: BiometricCapture | None = None

    def __post_init__(self) -> None:
        """A capture exists exactly when the biometric matched."""
        if self.matched and self.capture is None:
            raise ValueError("matched result requires a capture")
        if not self.matched and self.capture is not None:
            raise ValueError("unmatched result must not carry a capture")
