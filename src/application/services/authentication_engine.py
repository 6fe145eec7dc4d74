"""Authentication engine - one biometric attempt, classified.

Turns a biometric capture attempt into exactly one outcome:

    Success(voter) | Duplicate(voter) | Failure(reason)

Order of evaluation (do not reorder):
1. Check platform availability (selects the provider path only)
2. Run the biometric challenge; no match -> Failure, stop
3. Resolve the capture to a registered voter; none -> Failure
4. Registry says already voted -> Duplicate (nothing is marked)
5. Otherwise -> Success (marking happens only when a vote is cast)

Biometric matching is evaluated strictly before registry membership, so
an unmatched capture never consumes a registry lookup and a duplicate is
only ever reported for a capture that really matched.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from structlog import get_logger

from src.domain.errors import BiometricProviderError, BiometricTimeoutError
from src.domain.models.authentication import (
    AuthenticationDuplicate,
    AuthenticationFailure,
    AuthenticationOutcome,
    AuthenticationSuccess,
    FailureReason,
)
from src.domain.models.biometric import (
    DEFAULT_CHALLENGE_REASON,
    BiometricChallenge,
)

if TYPE_CHECKING:
    from src.application.ports.biometric_provider import BiometricProviderProtocol
    from src.application.ports.time_authority import TimeAuthorityProtocol
    from src.application.ports.voter_registry import VoterRegistryProtocol

logger = get_logger(__name__)


class AuthenticationEngine:
    """Runs and classifies authentication attempts.

    The engine is stateless between attempts. It never mutates the voter
    registry and never touches the stats counters; the session machine
    feeds its outcomes to both.

    Example:
        >>> engine = AuthenticationEngine(
        ...     biometric_provider=provider,
        ...     voter_registry=registry,
        ...     time_authority=clock,
        ... )
        >>> outcome = await engine.attempt()
    """

    def __init__(
        self,
        biometric_provider: BiometricProviderProtocol,
        voter_registry: VoterRegistryProtocol,
        time_authority: TimeAuthorityProtocol,
        challenge_reason: str = DEFAULT_CHALLENGE_REASON,
    ) -> None:
        """Initialize the engine.

        Args:
            biometric_provider: Source of the pass/fail biometric signal.
            voter_registry: Eligibility and duplicate-vote authority.
            time_authority: Clock for measuring challenge latency.
            challenge_reason: Prompt text for the platform dialog.
        """
        self._provider = biometric_provider
        self._registry = voter_registry
        self._time = time_authority
        self._challenge_reason = challenge_reason

    async def attempt(self) -> AuthenticationOutcome:
        """Run one authentication attempt.

        Returns:
            Exactly one of AuthenticationSuccess, AuthenticationDuplicate
            or AuthenticationFailure. Never raises for biometric or
            infrastructure failures; those become Failure outcomes.
        """
        challenge = BiometricChallenge.create(self._challenge_reason)
        log = logger.bind(challenge_id=str(challenge.challenge_id))

        # Step 1: path selection only, never the outcome contract
        platform_available = self._provider.check_availability()
        log.info(
            "authentication_attempt_started",
            path="platform" if platform_available else "fallback",
        )

        # Step 2: biometric challenge (the only suspension point)
        started = self._time.monotonic()
        try:
            result = await self._provider.authenticate(challenge)
        except BiometricTimeoutError as e:
            log.warning(
                "authentication_failed",
                reason=FailureReason.TIMEOUT.value,
                timeout_seconds=e.timeout_seconds,
                method=e.method,
            )
            return AuthenticationFailure(reason=FailureReason.TIMEOUT)
        except BiometricProviderError as e:
            # Fail closed: an infrastructure failure is never a pass
            log.error(
                "biometric_provider_failed",
                reason=FailureReason.PROVIDER_ERROR.value,
                error=str(e),
                method=e.method,
            )
            return AuthenticationFailure(reason=FailureReason.PROVIDER_ERROR)

        elapsed = self._time.monotonic() - started
        log = log.bind(method=result.method.value, challenge_seconds=round(elapsed, 3))

        if not result.matched or result.capture is None:
            log.warning(
                "authentication_failed",
                reason=FailureReason.BIOMETRIC_MISMATCH.value,
            )
            return AuthenticationFailure(
                reason=FailureReason.BIOMETRIC_MISMATCH,
                method=result.method,
            )

        # Step 3: resolve the matched capture to a registered voter
        voter = self._registry.resolve_matched_voter(result.capture)
        if voter is None:
            log.warning(
                "authentication_failed",
                reason=FailureReason.NO_REGISTRY_MATCH.value,
                capture_id=str(result.capture.capture_id),
            )
            return AuthenticationFailure(
                reason=FailureReason.NO_REGISTRY_MATCH,
                method=result.method,
            )

        log = log.bind(voter_id=voter.id)

        # Step 4: duplicate check; nothing is marked or recorded here
        if self._registry.has_voted(voter.id):
            log.warning("duplicate_vote_attempt_detected")
            return AuthenticationDuplicate(voter=voter, method=result.method)

        # Step 5: new voter; marked only when the vote is actually cast
        log.info("authentication_succeeded")
        return AuthenticationSuccess(voter=voter, method=result.method)
