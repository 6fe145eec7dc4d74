"""Infrastructure stubs - in-memory implementations of application ports.

The booth holds all state in memory for the lifetime of the process, so
these in-memory implementations are also what the composition root wires
in by default.

Available stubs:
- VoterRegistryStub: Eligible voters and the monotonic voted set
- CastVoteLedgerStub: One CastVoteRecord per voter
- AlertSinkStub: Current alert plus history
- RandomVoterResolutionStub / FixedMappingResolutionStub: capture resolution
- SimulatedChallengeSourceStub / ScriptedChallengeSourceStub: match signal

WARNING: The challenge sources perform no real biometric matching.
"""

from src.infrastructure.stubs.alert_sink_stub import AlertSinkStub
from src.infrastructure.stubs.biometric_challenge_source_stub import (
    ScriptedChallengeSourceStub,
    ScriptKind,
    ScriptStep,
    SimulatedChallengeSourceStub,
)
from src.infrastructure.stubs.vote_ledger_stub import CastVoteLedgerStub
from src.infrastructure.stubs.voter_registry_stub import VoterRegistryStub
from src.infrastructure.stubs.voter_resolution_stub import (
    FixedMappingResolutionStub,
    RandomVoterResolutionStub,
)

__all__: list[str] = [
    "AlertSinkStub",
    "CastVoteLedgerStub",
    "FixedMappingResolutionStub",
    "RandomVoterResolutionStub",
    "ScriptKind",
    "ScriptStep",
    "ScriptedChallengeSourceStub",
    "SimulatedChallengeSourceStub",
    "VoterRegistryStub",
]
