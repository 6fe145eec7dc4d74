"""
API models (Pydantic DTOs) for the booth.

This module contains all Pydantic request/response models
used by API endpoints.
"""

from src.api.models.booth import (
    ActiveAlertResponse,
    AlertResponse,
    BoothErrorResponse,
    CandidateListResponse,
    CandidateResponse,
    CastVoteRecordResponse,
    OutcomeResponse,
    ScanResponse,
    SessionStateResponse,
    StatsResponse,
    VoteRequest,
    VoteResponse,
)
from src.api.models.health import HealthResponse

__all__: list[str] = [
    "ActiveAlertResponse",
    "AlertResponse",
    "BoothErrorResponse",
    "CandidateListResponse",
    "CandidateResponse",
    "CastVoteRecordResponse",
    "HealthResponse",
    "OutcomeResponse",
    "ScanResponse",
    "SessionStateResponse",
    "StatsResponse",
    "VoteRequest",
    "VoteResponse",
]
