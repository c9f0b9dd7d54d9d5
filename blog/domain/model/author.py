"""Author identity embedded in posts."""

from pydantic import Field

from blog.domain.model.common import DomainModel
from blog.domain.value import UserId


class Author(DomainModel):
    """Identity of an authenticated user.

    Produced by the authentication collaborator and copied onto a post when
    it is created.
    """

    id: UserId = Field(min_length=1)
    username: str = Field(min_length=1, max_length=255)
