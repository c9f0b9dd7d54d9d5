"""Base model for all domain entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for all domain models.

    Domain models are immutable; changes produce new instances via model_copy.
    """

    model_config = ConfigDict(frozen=True)
