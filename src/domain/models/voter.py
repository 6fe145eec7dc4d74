"""Voter, candidate and cast-vote reference models.

VoterIdentity and Candidate are static reference data supplied when the
booth starts; neither is created or deleted during a session. A
CastVoteRecord is created exactly once per completed vote, in the same
step that marks the voter as having voted.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID

from uuid6 import uuid7


@dataclass(frozen=True, eq=True)
class VoterIdentity:
    """A registered person eligible to vote at this booth.

    Attributes:
        id: Stable, unique voter id (e.g. "IND001").
        display_name: Name shown to the voter after authentication.
    """

    id: str
    display_name: str

    def __post_init__(self) -> None:
        """Validate identity invariants."""
        if not self.id or not self.id.strip():
            raise ValueError("voter id must be a non-empty string")


@dataclass(frozen=True, eq=True)
class Candidate:
    """A candidate on the static ballot.

    Attributes:
        id: Unique candidate id (e.g. "BJP001").
        name: Candidate display name.
        party: Party name.
        symbol: Electoral symbol shown next to the name (display only).
    """

    id: str
    name: str
    party: str
    symbol: str = ""

    def __post_init__(self) -> None:
        """Validate candidate invariants."""
        if not self.id or not self.id.strip():
            raise ValueError("candidate id must be a non-empty string")


@dataclass(frozen=True, eq=True)
class CastVoteRecord:
    """Record of one vote cast at this booth.

    Not linked to any tally; it exists to prove a vote was recorded for
    the voter exactly once.

    Attributes:
        voter_id: The voter who cast the vote.
        candidate_id: The chosen candidate.
        cast_at: When the vote was recorded (UTC).
        booth_id: The booth that recorded the vote.
        record_id: UUIDv7 identifier for this record.
    """

    voter_id: str
    candidate_id: str
    cast_at: datetime
    booth_id: str = ""
    record_id: UUID = field(default_factory=uuid7)

    def to_dict(self) -> dict[str, str]:
        """Serialize for receipts and logs."""
        return {
            "record_id": str(self.record_id),
            "voter_id": self.voter_id,
            "candidate_id": self.candidate_id,
            "cast_at": self.cast_at.isoformat(),
            "booth_id": self.booth_id,
        }
