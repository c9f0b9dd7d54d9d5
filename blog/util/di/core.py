"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from blog.config import AuthSettings, PostSettings, SeedSettings, Settings
from blog.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    scope = Scope.APP

    @provide
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Provide auth settings."""
        return settings.auth

    @provide
    def provide_post_settings(self, settings: Settings) -> PostSettings:
        """Provide pagination and preview settings."""
        return settings.posts

    @provide
    def provide_seed_settings(self, settings: Settings) -> SeedSettings:
        """Provide fake data settings."""
        return settings.seed
