"""
Domain layer - Pure business logic for the voting booth.

This layer contains:
- Voter, candidate and cast-vote models
- Authentication outcome variants
- Session state and its transition rules
- Stats counters and events
- Domain exceptions

CRITICAL: This layer must NOT import from application, infrastructure, or api.
"""

from src.domain.exceptions import BoothError

__all__: list[str] = ["BoothError"]
