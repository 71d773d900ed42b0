"""Configuration providers."""

from dishka import Scope, from_context, provide

from blogtaxonomy.config import RelatedPostsSettings, Settings
from blogtaxonomy.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Exposes the settings handed to the container.

    ``Settings`` is never built here: whoever creates the container loads it
    once and passes it in as context, so the app and the DI graph agree.
    """

    settings = from_context(provides=Settings, scope=Scope.APP)

    @provide(scope=Scope.APP)
    def provide_related_posts_settings(
        self, settings: Settings
    ) -> RelatedPostsSettings:
        """Provide related posts defaults."""
        return settings.related_posts
