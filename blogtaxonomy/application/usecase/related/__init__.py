"""Related post use cases."""

from .get_related_posts import (
    CategoryItem,
    GetRelatedPostsRequest,
    GetRelatedPostsResponse,
    GetRelatedPostsUseCase,
    RelatedPostItem,
)
from .list_order_options import ListOrderOptionsResponse, ListOrderOptionsUseCase

__all__ = [
    "CategoryItem",
    "GetRelatedPostsRequest",
    "GetRelatedPostsResponse",
    "GetRelatedPostsUseCase",
    "ListOrderOptionsResponse",
    "ListOrderOptionsUseCase",
    "RelatedPostItem",
]
