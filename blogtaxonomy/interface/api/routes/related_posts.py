"""Related post routes."""

from datetime import datetime

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Query, status
from pydantic import ValidationError

from blogtaxonomy.application.usecase.related import (
    GetRelatedPostsRequest,
    GetRelatedPostsResponse,
    GetRelatedPostsUseCase,
    ListOrderOptionsResponse,
    ListOrderOptionsUseCase,
)
from blogtaxonomy.config import RelatedPostsSettings

router = APIRouter(
    prefix="/related-posts",
    tags=["related-posts"],
    route_class=DishkaRoute,
)


@router.get(
    "/order-options",
    response_model=ListOrderOptionsResponse,
    summary="List ordering options",
    description="Get the ordering keys accepted by the order_by parameter.",
)
async def list_order_options(
    use_case: FromDishka[ListOrderOptionsUseCase],
) -> ListOrderOptionsResponse:
    """List the allowed ordering keys.

    Example:
        GET /related-posts/order-options
    """
    return await use_case.execute()


@router.get(
    "/{slug}",
    response_model=GetRelatedPostsResponse,
    summary="List posts related to a post",
    description="Published posts sharing at least one tag with the given post.",
)
async def get_related_posts(
    slug: str,
    use_case: FromDishka[GetRelatedPostsUseCase],
    defaults: FromDishka[RelatedPostsSettings],
    limit: str | None = None,
    order_by: str | None = None,
    post_page: str | None = None,
    category_page: str | None = None,
    exclude_posts: list[str] = Query(default=[]),
    exclude_categories: list[str] = Query(default=[]),
    include_categories: list[str] = Query(default=[]),
    published_after: datetime | None = None,
    published_before: datetime | None = None,
    min_shared_tags: int = Query(default=1, ge=1),
) -> GetRelatedPostsResponse:
    """List posts related to the post with the given slug or UUID.

    An unknown or untagged post yields an empty list, not a 404. Malformed
    limits are treated as "no limit".

    Args:
        slug: Seed post slug or UUID
        use_case: Get related posts use case (injected)
        defaults: Configured defaults for omitted parameters (injected)
        limit: Maximum number of posts, 0 for all
        order_by: One of the ordering options
        post_page: Page used to build post URLs
        category_page: Page used to build category URLs
        exclude_posts: Slugs or UUIDs of posts to leave out
        exclude_categories: Slugs of categories whose posts are left out
        include_categories: Slugs of categories posts must be filed under
        published_after: Earliest publication date
        published_before: Latest publication date
        min_shared_tags: Minimum number of tags shared with the seed post

    Example:
        GET /related-posts/hello-world?order_by=relevance%20desc&limit=3
    """
    with logfire.span("api.get_related_posts", slug=slug, order_by=order_by):
        try:
            request = GetRelatedPostsRequest(
                slug=slug,
                limit=limit if limit is not None else defaults.default_limit,
                order_by=order_by or defaults.default_order_by,
                post_page=post_page or defaults.post_page,
                category_page=category_page or defaults.category_page,
                exclude_posts=exclude_posts,
                exclude_categories=exclude_categories,
                include_categories=include_categories,
                published_after=published_after,
                published_before=published_before,
                min_shared_tags=min_shared_tags,
            )
        except ValidationError as e:
            logfire.warn("Related posts validation error", error=str(e))
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=str(e),
            )

        try:
            return await use_case.execute(request)
        except Exception as e:
            logfire.error(
                "Unexpected error resolving related posts", slug=slug, error=str(e)
            )
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Failed to resolve related posts",
            )
