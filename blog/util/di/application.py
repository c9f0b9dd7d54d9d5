"""Application layer DI providers."""

from dishka import Scope, provide

from blog.application.guard import AuthenticateGuard, OwnershipGuard, ResolvePostGuard
from blog.application.usecase.post import (
    CreatePostUseCase,
    DeletePostUseCase,
    GetPostUseCase,
    ListPostsUseCase,
    SeedPostsUseCase,
    UpdatePostUseCase,
)
from blog.config import SeedSettings
from blog.domain.service import JWTService, PostService
from blog.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Application guards and use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # Guards
    @provide
    def get_authenticate_guard(self, jwt_service: JWTService) -> AuthenticateGuard:
        """Provide authentication guard."""
        return AuthenticateGuard(jwt_service=jwt_service)

    @provide
    def get_resolve_post_guard(self, post_service: PostService) -> ResolvePostGuard:
        """Provide post lookup guard."""
        return ResolvePostGuard(post_service=post_service)

    @provide(scope=Scope.APP)
    def get_ownership_guard(self) -> OwnershipGuard:
        """Provide ownership guard."""
        return OwnershipGuard()

    # Post use cases
    @provide
    def get_list_posts_use_case(self, post_service: PostService) -> ListPostsUseCase:
        """Provide list posts use case."""
        return ListPostsUseCase(post_service=post_service)

    @provide(scope=Scope.APP)
    def get_get_post_use_case(self) -> GetPostUseCase:
        """Provide get post use case."""
        return GetPostUseCase()

    @provide
    def get_create_post_use_case(self, post_service: PostService) -> CreatePostUseCase:
        """Provide create post use case."""
        return CreatePostUseCase(post_service=post_service)

    @provide
    def get_update_post_use_case(self, post_service: PostService) -> UpdatePostUseCase:
        """Provide update post use case."""
        return UpdatePostUseCase(post_service=post_service)

    @provide
    def get_delete_post_use_case(self, post_service: PostService) -> DeletePostUseCase:
        """Provide delete post use case."""
        return DeletePostUseCase(post_service=post_service)

    @provide
    def get_seed_posts_use_case(
        self, post_service: PostService, seed_settings: SeedSettings
    ) -> SeedPostsUseCase:
        """Provide seed posts use case."""
        return SeedPostsUseCase(post_service=post_service, seed_settings=seed_settings)
