"""Application ports - Abstract interfaces for infrastructure adapters.

This module defines the contracts that infrastructure adapters must implement.
Ports enable dependency inversion and make the application layer testable.

Available ports:
- BiometricProviderProtocol / BiometricChallengeSourceProtocol: match signal
- VoterRegistryProtocol / VoterResolutionStrategyProtocol: eligibility and
  duplicate-vote detection
- CastVoteLedgerProtocol: one record per cast vote
- AlertSinkProtocol: alerts for the kiosk display
- TimeAuthorityProtocol: injected clock
"""

from src.application.ports.alert_sink import AlertSinkProtocol
from src.application.ports.biometric_provider import (
    BiometricChallengeSourceProtocol,
    BiometricProviderProtocol,
)
from src.application.ports.time_authority import TimeAuthorityProtocol
from src.application.ports.vote_ledger import CastVoteLedgerProtocol
from src.application.ports.voter_registry import (
    VoterRegistryProtocol,
    VoterResolutionStrategyProtocol,
)

__all__: list[str] = [
    "AlertSinkProtocol",
    "BiometricChallengeSourceProtocol",
    "BiometricProviderProtocol",
    "CastVoteLedgerProtocol",
    "TimeAuthorityProtocol",
    "VoterRegistryProtocol",
    "VoterResolutionStrategyProtocol",
]
