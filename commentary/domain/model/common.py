"""Base model for all domain entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for all domain models.

    Domain models are immutable; updates produce copies.
    """

    model_config = ConfigDict(frozen=True)
