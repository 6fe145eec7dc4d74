"""In-memory voter registry.

The booth keeps no state across process restarts, so this in-memory
registry is the registry. It enforces:
- unique voter ids at construction
- ``voted`` is a subset of the eligible ids and only grows
- ``mark_voted`` succeeds at most once per id, serialized by a lock so
  two threads racing on the same id cannot both succeed
- resolution to an id that is not registered yields None
"""

from __future__ import annotations

import threading
from collections.abc import Iterable
from typing import TYPE_CHECKING

from structlog import get_logger

from src.domain.errors import (
    AlreadyVotedError,
    DuplicateVoterIdError,
    VoterNotEligibleError,
)
from src.domain.models.biometric import BiometricCapture
from src.domain.models.voter import VoterIdentity

if TYPE_CHECKING:
    from src.application.ports.voter_registry import VoterResolutionStrategyProtocol

logger = get_logger(__name__)


class VoterRegistryStub:
    """In-memory implementation of VoterRegistryProtocol.

    Attributes:
        resolution_strategy: Maps matched captures to voter ids.
    """

    def __init__(
        self,
        voters: Iterable[VoterIdentity],
        resolution_strategy: VoterResolutionStrategyProtocol,
        already_voted: Iterable[str] = (),
    ) -> None:
        """Initialize the registry.

        Args:
            voters: Eligible identities; ids must be unique.
            resolution_strategy: Capture-to-voter resolution policy.
            already_voted: Ids to pre-mark as voted (e.g. votes cast before
                this booth session started).

        Raises:
            DuplicateVoterIdError: Two voters share an id.
            VoterNotEligibleError: A pre-voted id is not registered.
        """
        self._voters: dict[str, VoterIdentity] = {}
        for voter in voters:
            if voter.id in self._voters:
                raise DuplicateVoterIdError(voter.id)
            self._voters[voter.id] = voter

        self._voted: set[str] = set()
        for voter_id in already_voted:
            if voter_id not in self._voters:
                raise VoterNotEligibleError(voter_id)
            self._voted.add(voter_id)

        self.resolution_strategy = resolution_strategy
        self._lock = threading.Lock()

    def is_eligible(self, voter_id: str) -> bool:
        return voter_id in self._voters

    def has_voted(self, voter_id: str) -> bool:
        return voter_id in self._voted

    def mark_voted(self, voter_id: str) -> None:
        """Mark a voter as voted exactly once.

        Raises:
            VoterNotEligibleError: The id is not registered.
            AlreadyVotedError: The voter was already marked.
        """
        with self._lock:
            if voter_id not in self._voters:
                raise VoterNotEligibleError(voter_id)
            if voter_id in self._voted:
                raise AlreadyVotedError(voter_id)
            self._voted.add(voter_id)
        logger.info("voter_marked_voted", voter_id=voter_id)

    def resolve_matched_voter(self, capture: BiometricCapture) -> VoterIdentity | None:
        """Resolve a capture through the strategy; unregistered ids yield None."""
        voter_id = self.resolution_strategy.resolve(
            capture,
            self.eligible_voters(),
            self.voted_ids(),
        )
        if voter_id is None:
            return None

        voter = self._voters.get(voter_id)
        if voter is None:
            logger.warning(
                "resolved_voter_not_registered",
                capture_id=str(capture.capture_id),
                voter_id=voter_id,
            )
        return voter

    def get_voter(self, voter_id: str) -> VoterIdentity | None:
        return self._voters.get(voter_id)

    def eligible_voters(self) -> list[VoterIdentity]:
        return list(self._voters.values())

    def voted_ids(self) -> frozenset[str]:
        return frozenset(self._voted)

    def total_registered(self) -> int:
        return len(self._voters)
