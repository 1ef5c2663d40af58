"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from huddle.config import AuthSettings, CommentSettings, Settings, StorageSettings
from huddle.util.di.base import ProviderBase
from huddle.util.error import ConfigurationError

DEFAULT_JWT_SECRET = "CHANGE_ME_IN_PRODUCTION"


class ProdConfigProvider(ProviderBase):
    """Configuration provider.

    Settings are loaded from environment variables and the .env file.
    """

    scope = Scope.APP

    @provide
    def provide_settings(self) -> Settings:
        """Provide application settings from environment.

        Raises:
            ConfigurationError: If production runs with the default JWT secret
        """
        settings = Settings()
        if (
            settings.environment == "production"
            and settings.auth.jwt_secret == DEFAULT_JWT_SECRET
        ):
            raise ConfigurationError("AUTH__JWT_SECRET must be set in production")
        return settings

    @provide
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        return settings.auth

    @provide
    def provide_comment_settings(self, settings: Settings) -> CommentSettings:
        return settings.comments

    @provide
    def provide_storage_settings(self, settings: Settings) -> StorageSettings:
        return settings.storage
