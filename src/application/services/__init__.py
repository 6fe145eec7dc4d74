"""Application services - Use case orchestration.

This module contains application services that orchestrate domain
operations and coordinate with infrastructure adapters through ports.

Available services:
- AuthenticationEngine: One biometric attempt, classified
- VotingSessionMachine: Session state machine gating the ballot
- StatsAggregator: Event-folded booth counters
- BoothKioskService: Inbound facade for the kiosk front end
"""

from src.application.services.authentication_engine import AuthenticationEngine
from src.application.services.booth_kiosk_service import (
    BoothKioskService,
    ScanResult,
    VoteReceipt,
)
from src.application.services.stats_aggregator import StatsAggregator
from src.application.services.voting_session_machine import VotingSessionMachine

__all__: list[str] = [
    "AuthenticationEngine",
    "BoothKioskService",
    "ScanResult",
    "StatsAggregator",
    "VoteReceipt",
    "VotingSessionMachine",
]
