"""Get related posts use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel

from blogtaxonomy.application.usecase.base import BaseUseCase
from blogtaxonomy.domain.service import RelatedPostService, UrlService
from blogtaxonomy.domain.value import RelatedPostsOptions


class CategoryItem(BaseModel):
    """Category of a related post."""

    name: str
    slug: str
    url: str | None


class RelatedPostItem(BaseModel):
    """Related post in response."""

    post_id: str
    slug: str
    title: str
    published_at: datetime | None
    tag_names: list[str]
    categories: list[CategoryItem]
    url: str | None


class GetRelatedPostsRequest(RelatedPostsOptions):
    """Get related posts request.

    Same fields and defaults as the component options.
    """


class GetRelatedPostsResponse(BaseModel):
    """Get related posts response."""

    posts: list[RelatedPostItem]


class GetRelatedPostsUseCase(
    BaseUseCase[GetRelatedPostsRequest, GetRelatedPostsResponse]
):
    """Use case for resolving a post's related posts and their URLs."""

    def __init__(
        self, related_post_service: RelatedPostService, url_service: UrlService
    ) -> None:
        """Initialize get related posts use case.

        Args:
            related_post_service: Related post resolver
            url_service: Render URL assignment
        """
        self.related_post_service = related_post_service
        self.url_service = url_service

    async def execute(self, request: GetRelatedPostsRequest) -> GetRelatedPostsResponse:
        """Execute get related posts flow.

        Args:
            request: Seed post key and listing options

        Returns:
            Related posts; empty when the seed is unknown or untagged
        """
        with logfire.span(
            "get_related_posts.execute",
            seed=request.slug,
            order_by=request.order_by,
            limit=request.limit,
        ):
            posts = await self.related_post_service.resolve(request)
            posts = self.url_service.assign_urls(
                posts,
                post_page=request.post_page,
                category_page=request.category_page,
            )

            items = [
                RelatedPostItem(
                    post_id=str(post.id),
                    slug=post.slug.root,
                    title=post.title,
                    published_at=post.published_at,
                    tag_names=[tag.name.root for tag in post.tags],
                    categories=[
                        CategoryItem(
                            name=category.name,
                            slug=category.slug.root,
                            url=category.url,
                        )
                        for category in post.categories
                    ],
                    url=post.url,
                )
                for post in posts
            ]

            logfire.info("Related posts listed", count=len(items))
            return GetRelatedPostsResponse(posts=items)
