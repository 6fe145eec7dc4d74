"""In-memory cast vote ledger.

Append-only; holds at most one CastVoteRecord per voter id.
"""

from __future__ import annotations

import threading

from src.domain.errors import AlreadyVotedError
from src.domain.models.voter import CastVoteRecord


class CastVoteLedgerStub:
    """In-memory implementation of CastVoteLedgerProtocol."""

    def __init__(self) -> None:
        self._records: list[CastVoteRecord] = []
        self._by_voter: dict[str, CastVoteRecord] = {}
        self._lock = threading.Lock()

    def append(self, record: CastVoteRecord) -> None:
        """Append a record.

        Raises:
            AlreadyVotedError: The voter already has a record.
        """
        with self._lock:
            if record.voter_id in self._by_voter:
                raise AlreadyVotedError(record.voter_id)
            self._by_voter[record.voter_id] = record
            self._records.append(record)

    def get_for_voter(self, voter_id: str) -> CastVoteRecord | None:
        return self._by_voter.get(voter_id)

    def records(self) -> list[CastVoteRecord]:
        return list(self._records)
