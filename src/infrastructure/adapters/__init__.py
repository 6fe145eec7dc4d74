"""Infrastructure adapters implementing application ports."""

from src.infrastructure.adapters.biometric import ChallengeBiometricProvider
from src.infrastructure.adapters.system_time_authority import SystemTimeAuthority

__all__: list[str] = ["ChallengeBiometricProvider", "SystemTimeAuthority"]
