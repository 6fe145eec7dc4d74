"""Voter registry ports.

The registry is the authoritative list of eligible voters and the only
record of who has already voted. ``voted`` is a subset of the eligible
ids and only grows; ``has_voted`` is the sole duplicate-vote check.

Resolution from an opaque biometric capture to a concrete identity is
delegated to an injected VoterResolutionStrategyProtocol. Whatever the
strategy, one capture resolves to exactly one eligible identity or none.
"""

from __future__ import annotations

from abc import abstractmethod
from collections.abc import Sequence
from typing import Protocol

from src.domain.models.biometric import BiometricCapture
from src.domain.models.voter import VoterIdentity


class VoterResolutionStrategyProtocol(Protocol):
    """Maps a matched capture to a registered voter id."""

    @abstractmethod
    def resolve(
        self,
        capture: BiometricCapture,
        eligible: Sequence[VoterIdentity],
        voted_ids: frozenset[str],
    ) -> str | None:
        """Pick the voter id this capture belongs to.

        Args:
            capture: The opaque capture from a successful match.
            eligible: Registered identities, in registration order.
            voted_ids: Ids already marked as voted (read-only view).

        Returns:
            A voter id, or None if the capture matches nobody. The
            registry rejects ids that are not eligible.
        """
        ...


class VoterRegistryProtocol(Protocol):
    """Protocol for the booth's voter registry."""

    @abstractmethod
    def is_eligible(self, voter_id: str) -> bool:
        """Return True if the id belongs to a registered voter."""
        ...

    @abstractmethod
    def has_voted(self, voter_id: str) -> bool:
        """Return True if the voter is already marked as voted."""
        ...

    @abstractmethod
    def mark_voted(self, voter_id: str) -> None:
        """Mark the voter as having voted.

        The read-then-write is serialized; two concurrent calls for the
        same id cannot both succeed.

        Raises:
            AlreadyVotedError: The voter was already marked.
            VoterNotEligibleError: The id is not registered.
        """
        ...

    @abstractmethod
    def resolve_matched_voter(self, capture: BiometricCapture) -> VoterIdentity | None:
        """Resolve a matched capture to an eligible identity, or None."""
        ...

    @abstractmethod
    def get_voter(self, voter_id: str) -> VoterIdentity | None:
        """Return the registered identity for an id, or None."""
        ...

    @abstractmethod
    def eligible_voters(self) -> list[VoterIdentity]:
        """Return all registered identities in registration order."""
        ...

    @abstractmethod
    def voted_ids(self) -> frozenset[str]:
        """Return a frozen copy of the voted set."""
        ...

    @abstractmethod
    def total_registered(self) -> int:
        """Return the number of registered voters."""
        ...
