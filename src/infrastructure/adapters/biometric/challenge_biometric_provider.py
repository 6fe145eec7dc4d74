"""Biometric provider backed by challenge sources.

Path selection:
- If a platform source is configured and reports available, use it.
- Otherwise use the fallback source (browser credential ceremony or the
  timer-based simulation).

The path changes only how ``matched`` is produced. Error mapping:
- BiometricDeclinedError from a source -> ``matched=False`` (the user
  said no; that is not an infrastructure failure)
- challenge exceeds ``timeout_seconds`` -> BiometricTimeoutError
- any other source exception -> BiometricProviderError
"""

from __future__ import annotations

import asyncio

from structlog import get_logger

from src.application.ports.biometric_provider import BiometricChallengeSourceProtocol
from src.domain.errors import (
    BiometricDeclinedError,
    BiometricProviderError,
    BiometricTimeoutError,
)
from src.domain.models.biometric import (
    BiometricCapture,
    BiometricChallenge,
    BiometricMatchResult,
)

logger = get_logger(__name__)

# Matches the 30 second timeout of a platform credential ceremony
DEFAULT_CHALLENGE_TIMEOUT_SECONDS = 30.0


class ChallengeBiometricProvider:
    """BiometricProviderProtocol implementation over challenge sources."""

    def __init__(
        self,
        fallback_source: BiometricChallengeSourceProtocol,
        platform_source: BiometricChallengeSourceProtocol | None = None,
        timeout_seconds: float = DEFAULT_CHALLENGE_TIMEOUT_SECONDS,
    ) -> None:
        """Initialize the provider.

        Args:
            fallback_source: Used whenever the platform path is unavailable.
            platform_source: Native platform authenticator, if any.
            timeout_seconds: Upper bound on one challenge.
        """
        if timeout_seconds <= 0:
            raise ValueError(f"timeout_seconds must be positive, got {timeout_seconds}")
        self._fallback = fallback_source
        self._platform = platform_source
        self._timeout = timeout_seconds

    def check_availability(self) -> bool:
        """Return True if the platform authenticator can be used."""
        if self._platform is None:
            return False
        try:
            return bool(self._platform.is_available())
        except Exception as e:
            logger.warning("platform_availability_check_failed", error=str(e))
            return False

    async def authenticate(self, challenge: BiometricChallenge) -> BiometricMatchResult:
        """Run the challenge on the selected source.

        Raises:
            BiometricTimeoutError: The source did not answer in time.
            BiometricProviderError: The source failed.
        """
        source = (
            self._platform
            if self._platform is not None and self.check_availability()
            else self._fallback
        )
        method = source.method

        try:
            response = await asyncio.wait_for(
                source.respond(challenge), timeout=self._timeout
            )
        except BiometricDeclinedError:
            logger.info("biometric_prompt_declined", method=method.value)
            return BiometricMatchResult(matched=False, method=method)
        except asyncio.TimeoutError:
            raise BiometricTimeoutError(self._timeout, method=method.value) from None
        except BiometricProviderError:
            raise
        except Exception as e:
            raise BiometricProviderError(
                f"{method.value} biometric challenge failed: {e}",
                method=method.value,
            ) from e

        if not response.matched:
            return BiometricMatchResult(matched=False, method=method)

        return BiometricMatchResult(
            matched=True,
            method=method,
            capture=BiometricCapture(
                challenge_id=challenge.challenge_id,
                method=method,
                template_ref=response.template_ref,
            ),
        )
