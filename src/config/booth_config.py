"""Booth configuration.

This module defines configuration for a single voting booth with
environment variable overrides for deployment tuning.

Environment Variables:
- BOOTH_ID: Identifier stamped on cast vote records (default: 247-A)
- BOOTH_BIOMETRIC_TIMEOUT_SECONDS: Upper bound on one challenge (default: 30.0)
- BOOTH_SCAN_DELAY_SECONDS: Simulated scanning time (default: 2.0)
- BOOTH_SIMULATED_MATCH_RATE: Probability a simulated scan matches (default: 0.85)
- BOOTH_PLATFORM_AVAILABLE: Whether a platform authenticator is present (default: false)
- BOOTH_ALERT_DISMISS_SECONDS: Alert display lifetime (default: 5.0)
- BOOTH_RANDOM_SEED: Seed for the simulation RNGs (default: unset)
"""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_BOOTH_ID = "247-A"

# The platform authenticator simulation matched slightly more often than
# the scanner simulation
PLATFORM_MATCH_RATE = 0.9

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


def _get_str_env(key: str, default: str) -> str:
    value = os.environ.get(key)
    if value is None or not value.strip():
        return default
    return value.strip()


def _get_float_env(key: str, default: float) -> float:
    """Get float environment variable with default.

    Args:
        key: Environment variable name.
        default: Default value if not set or invalid.

    Returns:
        Parsed float value or default.
    """
    value = os.environ.get(key)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        return default


def _get_bool_env(key: str, default: bool) -> bool:
    value = os.environ.get(key)
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    return default


def _get_optional_int_env(key: str) -> int | None:
    value = os.environ.get(key)
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        return None


@dataclass(frozen=True)
class BoothConfig:
    """Configuration for one booth.

    All values can be overridden via environment variables.

    Attributes:
        booth_id: Stamped on every CastVoteRecord and log entry.
        biometric_timeout_seconds: A challenge running longer than this is
            a TIMEOUT failure. Default: 30 seconds.
        scan_delay_seconds: How long the simulated scanner takes.
            Default: 2 seconds.
        simulated_match_rate: Probability in [0, 1] that a simulated scan
            matches. Default: 0.85.
        platform_available: Wire a simulated platform authenticator that
            takes precedence over the scanner. Default: False.
        alert_dismiss_seconds: Lifetime of kiosk alerts. Default: 5 seconds.
        random_seed: Seed for simulation RNGs; None for nondeterminism.
    """

    booth_id: str = DEFAULT_BOOTH_ID
    biometric_timeout_seconds: float = 30.0
    scan_delay_seconds: float = 2.0
    simulated_match_rate: float = 0.85
    platform_available: bool = False
    alert_dismiss_seconds: float = 5.0
    random_seed: int | None = None

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if not self.booth_id:
            raise ValueError("booth_id must be non-empty")
        if self.biometric_timeout_seconds <= 0:
            raise ValueError(
                "biometric_timeout_seconds must be positive, "
                f"got {self.biometric_timeout_seconds}"
            )
        if self.scan_delay_seconds < 0:
            raise ValueError(
                f"scan_delay_seconds must be non-negative, got {self.scan_delay_seconds}"
            )
        if self.scan_delay_seconds >= self.biometric_timeout_seconds:
            raise ValueError(
                f"scan_delay_seconds ({self.scan_delay_seconds}) must be less than "
                f"biometric_timeout_seconds ({self.biometric_timeout_seconds})"
            )
        if not 0.0 <= self.simulated_match_rate <= 1.0:
            raise ValueError(
                "simulated_match_rate must be within [0, 1], "
                f"got {self.simulated_match_rate}"
            )
        if self.alert_dismiss_seconds <= 0:
            raise ValueError(
                "alert_dismiss_seconds must be positive, "
                f"got {self.alert_dismiss_seconds}"
            )

    @classmethod
    def from_environment(cls) -> BoothConfig:
        """Create config from environment variables with defaults.

        Unparseable values fall back to the default for that field.

        Returns:
            BoothConfig with values from environment or defaults.
        """
        return cls(
            booth_id=_get_str_env("BOOTH_ID", DEFAULT_BOOTH_ID),
            biometric_timeout_seconds=_get_float_env(
                "BOOTH_BIOMETRIC_TIMEOUT_SECONDS", 30.0
            ),
            scan_delay_seconds=_get_float_env("BOOTH_SCAN_DELAY_SECONDS", 2.0),
            simulated_match_rate=_get_float_env("BOOTH_SIMULATED_MATCH_RATE", 0.85),
            platform_available=_get_bool_env("BOOTH_PLATFORM_AVAILABLE", False),
            alert_dismiss_seconds=_get_float_env("BOOTH_ALERT_DISMISS_SECONDS", 5.0),
            random_seed=_get_optional_int_env("BOOTH_RANDOM_SEED"),
        )


# Pre-defined configurations for common use cases

# Default config (no environment overrides)
DEFAULT_BOOTH_CONFIG = BoothConfig()

# Testing config: no scanning delay, short timeout, seeded RNGs
TEST_BOOTH_CONFIG = BoothConfig(
    booth_id="TEST-1",
    biometric_timeout_seconds=1.0,
    scan_delay_seconds=0.0,
    random_seed=7,
)
