"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from hive.config import (
    AuthSettings,
    PaymentSettings,
    PostListingSettings,
    QuotaSettings,
    Settings,
)
from hive.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    scope = Scope.APP

    @provide
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        return settings.auth

    @provide
    def provide_quota_settings(self, settings: Settings) -> QuotaSettings:
        return settings.quota

    @provide
    def provide_payment_settings(self, settings: Settings) -> PaymentSettings:
        return settings.payments

    @provide
    def provide_post_listing_settings(self, settings: Settings) -> PostListingSettings:
        return settings.posts
