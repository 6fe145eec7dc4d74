"""Biometric provider errors.

A user who fails to match, or who declines the prompt, is NOT an error:
providers report that as ``matched=False``. The exceptions here cover
infrastructure failures only, and the authentication engine treats every
one of them as a failed attempt (fail closed).
"""

from __future__ import annotations

from src.domain.exceptions import BoothError


class BiometricProviderError(BoothError):
    """Raised when the biometric capability itself fails.

    Examples: the platform authenticator is absent, or credential creation
    was rejected for a reason other than the user declining.

    Attributes:
        method: Value of the BiometricMethod in use, if one was selected.
    """

    def __init__(self, message: str, method: str | None = None) -> None:
        """Initialize the error.

        Args:
            message: Description of the infrastructure failure.
            method: The biometric method that failed, if known.
        """
        self.method = method
        super().__init__(message)


class BiometricTimeoutError(BiometricProviderError):
    """Raised when a challenge does not complete within its timeout.

    Attributes:
        timeout_seconds: The timeout that elapsed.
    """

    def __init__(self, timeout_seconds: float, method: str | None = None) -> None:
        """Initialize the error.

        Args:
            timeout_seconds: The timeout that elapsed.
            method: The biometric method that timed out, if known.
        """
        self.timeout_seconds = timeout_seconds
        super().__init__(
            f"Biometric challenge timed out after {timeout_seconds:g}s",
            method=method,
        )


class BiometricDeclinedError(BoothError):
    """Raised by a challenge source when the user dismisses the prompt.

    Providers convert this into a ``matched=False`` result; it never
    reaches the authentication engine.
    """

    pass
