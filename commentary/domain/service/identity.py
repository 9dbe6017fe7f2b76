"""Voter identity collaborator."""

from abc import ABC, abstractmethod

from commentary.domain.value import VoterId


class IdentityResolver(ABC):
    """Supplies a stable voter identity for the current call."""

    @abstractmethod
    def resolve(self) -> VoterId:
        """Return the identity of whoever is voting."""
        pass
