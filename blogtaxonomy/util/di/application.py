"""Application layer DI providers."""

from dishka import Scope, provide

from blogtaxonomy.application.usecase.related import (
    GetRelatedPostsUseCase,
    ListOrderOptionsUseCase,
)
from blogtaxonomy.config import RelatedPostsSettings
from blogtaxonomy.domain.service import RelatedPostService, UrlService
from blogtaxonomy.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    @provide(scope=Scope.REQUEST)
    def get_get_related_posts_use_case(
        self, related_post_service: RelatedPostService, url_service: UrlService
    ) -> GetRelatedPostsUseCase:
        """Provide get related posts use case."""
        return GetRelatedPostsUseCase(
            related_post_service=related_post_service, url_service=url_service
        )

    @provide(scope=Scope.APP)
    def get_list_order_options_use_case(
        self, related_posts_settings: RelatedPostsSettings
    ) -> ListOrderOptionsUseCase:
        """Provide list ordering options use case."""
        return ListOrderOptionsUseCase(
            default_order_by=related_posts_settings.default_order_by
        )
