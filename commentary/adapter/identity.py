"""Identity resolvers for vote casting."""

from commentary.domain.service.identity import IdentityResolver
from commentary.domain.value import VoterId


class StaticIdentityResolver(IdentityResolver):
    """Resolver bound to one identity, built per request by the caller."""

    def __init__(self, voter_id: str) -> None:
        if not voter_id:
            raise ValueError("Voter identity must not be empty")
        self._voter_id = VoterId(voter_id)

    def resolve(self) -> VoterId:
        return self._voter_id
