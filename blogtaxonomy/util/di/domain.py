"""Domain layer DI providers."""

from dishka import Scope, provide

from blogtaxonomy.domain.repository import PostRepository
from blogtaxonomy.domain.service import (
    RelatedPostService,
    TagOverlapFinder,
    UrlGenerator,
    UrlService,
)
from blogtaxonomy.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    """

    scope = Scope.REQUEST

    @provide
    def get_tag_overlap_finder(
        self, post_repository: PostRepository
    ) -> TagOverlapFinder:
        """Provide tag overlap finder."""
        return TagOverlapFinder(post_repository=post_repository)

    @provide
    def get_related_post_service(
        self, post_repository: PostRepository, tag_overlap_finder: TagOverlapFinder
    ) -> RelatedPostService:
        """Provide related post resolver."""
        return RelatedPostService(
            post_repository=post_repository, tag_overlap_finder=tag_overlap_finder
        )

    @provide
    def get_url_service(self, url_generator: UrlGenerator) -> UrlService:
        """Provide URL assignment service."""
        return UrlService(url_generator=url_generator)
