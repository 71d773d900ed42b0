"""Domain value objects for blog taxonomy."""

from blogtaxonomy.domain.value.identifiers import CategoryId, PostId, TagId
from blogtaxonomy.domain.value.options import RelatedPostsOptions
from blogtaxonomy.domain.value.ordering import (
    ALLOWED_ORDERINGS,
    RankingKey,
    SortDirection,
    SortField,
)
from blogtaxonomy.domain.value.types import Slug, TagName

__all__ = [
    # Identifiers
    "PostId",
    "TagId",
    "CategoryId",
    # Types
    "Slug",
    "TagName",
    # Options
    "RelatedPostsOptions",
    # Ordering
    "ALLOWED_ORDERINGS",
    "RankingKey",
    "SortDirection",
    "SortField",
]
