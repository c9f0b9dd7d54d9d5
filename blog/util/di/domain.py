"""Domain layer DI providers."""

from dishka import Scope, provide

from blog.config import AuthSettings, PostSettings
from blog.domain.repository import PostRepository
from blog.domain.service import JWTService, PostService
from blog.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_post_service(
        self, post_repository: PostRepository, post_settings: PostSettings
    ) -> PostService:
        """Provide post domain service."""
        return PostService(post_repository=post_repository, settings=post_settings)
