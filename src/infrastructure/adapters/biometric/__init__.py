"""Biometric provider adapters."""

from src.infrastructure.adapters.biometric.challenge_biometric_provider import (
    DEFAULT_CHALLENGE_TIMEOUT_SECONDS,
    ChallengeBiometricProvider,
)

__all__: list[str] = ["ChallengeBiometricProvider", "DEFAULT_CHALLENGE_TIMEOUT_SECONDS"]
