"""Voter registry and reference data errors.

The registry's ``voted`` set only grows. ``AlreadyVotedError`` is the
guard on that invariant: it fires when ``mark_voted`` is called a second
time for the same voter, which can only happen if an earlier Success
classification went stale.
"""

from __future__ import annotations

from src.domain.exceptions import BoothError


class RegistryError(BoothError):
    """Base error for voter registry and ballot reference data."""

    pass


class AlreadyVotedError(RegistryError):
    """Raised when marking a voter who is already marked as voted.

    Attributes:
        voter_id: The voter that was already marked.
    """

    def __init__(self, voter_id: str) -> None:
        """Initialize the error.

        Args:
            voter_id: The voter that was already marked.
        """
        self.voter_id = voter_id
        super().__init__(f"Voter {voter_id} is already marked as having voted")


class VoterNotEligibleError(RegistryError):
    """Raised when an operation names a voter id absent from the registry.

    Attributes:
        voter_id: The unknown voter id.
    """

    def __init__(self, voter_id: str) -> None:
        """Initialize the error.

        Args:
            voter_id: The unknown voter id.
        """
        self.voter_id = voter_id
        super().__init__(f"Voter {voter_id} is not in the eligible registry")


class DuplicateVoterIdError(RegistryError):
    """Raised when the eligible voter list contains the same id twice."""

    def __init__(self, voter_id: str) -> None:
        self.voter_id = voter_id
        super().__init__(f"Duplicate voter id in registry: {voter_id}")


class DuplicateCandidateIdError(RegistryError):
    """Raised when the ballot contains the same candidate id twice."""

    def __init__(self, candidate_id: str) -> None:
        self.candidate_id = candidate_id
        super().__init__(f"Duplicate candidate id on ballot: {candidate_id}")
