"""Cast vote ledger port.

Append-only store of CastVoteRecords. At most one record exists per voter
id; a second append for the same voter is rejected.

The session machine looks up ``get_for_voter`` before marking the voter,
so ``append`` for a voter with no record must not fail: the registry mark
is not rolled back.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Protocol

from src.domain.models.voter import CastVoteRecord


class CastVoteLedgerProtocol(Protocol):
    """Protocol for recording cast votes."""

    @abstractmethod
    def append(self, record: CastVoteRecord) -> None:
        """Append a record.

        Raises:
            AlreadyVotedError: A record already exists for the voter.
        """
        ...

    @abstractmethod
    def get_for_voter(self, voter_id: str) -> CastVoteRecord | None:
        """Return the record for a voter, or None."""
        ...

    @abstractmethod
    def records(self) -> list[CastVoteRecord]:
        """Return all records in the order they were cast."""
        ...
