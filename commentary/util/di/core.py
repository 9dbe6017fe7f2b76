"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from commentary.config import CommentSettings, Settings, VoteSettings
from commentary.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_comment_settings(self, settings: Settings) -> CommentSettings:
        """Provide comment listing defaults."""
        return settings.comments

    @provide(scope=Scope.APP)
    def provide_vote_settings(self, settings: Settings) -> VoteSettings:
        """Provide vote settings."""
        return settings.votes
