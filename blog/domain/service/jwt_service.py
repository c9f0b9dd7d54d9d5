"""JWT token domain service."""

import logfire

from blog.config import AuthSettings
from blog.domain.error import NotAuthenticatedError
from blog.domain.model import Author
from blog.domain.value import UserId
from blog.util.jwt import JWTError, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Domain service for JWT token operations.

    Stands in for the authentication collaborator: it only verifies tokens
    issued elsewhere and turns them into an Author identity.
    """

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_token(self, author: Author) -> str:
        """Create JWT token for an author.

        Args:
            author: Identity to encode

        Returns:
            JWT token string
        """
        with logfire.span("jwt_service.create_token", username=author.username):
            token = create_token(author.id, author.username, self.auth_settings)
            logfire.info("JWT token created", user_id=author.id)
            return token

    def authenticate(self, token: str | None) -> Author:
        """Resolve a token into the caller's identity.

        Args:
            token: JWT token string from the request, if any

        Returns:
            The authenticated author

        Raises:
            NotAuthenticatedError: If the token is missing, invalid or expired
        """
        if not token:
            raise NotAuthenticatedError("Authentication required")

        with logfire.span("jwt_service.authenticate"):
            try:
                payload = verify_token(token, self.auth_settings)
            except JWTError as e:
                logfire.warn("JWT token verification failed", error=str(e))
                raise NotAuthenticatedError(str(e)) from e

            logfire.info(
                "JWT token verified",
                user_id=payload.user_id,
                username=payload.username,
            )
            return Author(id=UserId(payload.user_id), username=payload.username)
