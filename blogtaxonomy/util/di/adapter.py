"""Adapter DI providers."""

from dishka import Scope, provide

from blogtaxonomy.adapter.url import PageUrlGenerator
from blogtaxonomy.config import Settings
from blogtaxonomy.domain.service import UrlGenerator
from blogtaxonomy.util.di.base import ProviderBase


class ProdAdapterProvider(ProviderBase):
    """Adapter provider - concrete, no mocks needed."""

    @provide(scope=Scope.APP)
    def get_url_generator(self, settings: Settings) -> UrlGenerator:
        """Provide page URL generator built from configured page patterns."""
        return PageUrlGenerator(base_url=settings.base_url, pages=settings.pages)
