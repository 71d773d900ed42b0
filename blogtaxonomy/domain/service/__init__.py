"""Domain services."""

from .base import Service
from .filter_chain import (
    ExcludeCategoriesFilter,
    ExcludePostsFilter,
    IncludeCategoriesFilter,
    MinimumSharedTagsFilter,
    PostFilter,
    PublishedBetweenFilter,
    apply_filters,
    build_filters,
)
from .ranking import apply_ranking, ordering_for
from .related_post_service import RelatedPostService
from .tag_overlap import TagOverlapFinder
from .url_service import UrlGenerator, UrlService

__all__ = [
    "ExcludeCategoriesFilter",
    "ExcludePostsFilter",
    "IncludeCategoriesFilter",
    "MinimumSharedTagsFilter",
    "PostFilter",
    "PublishedBetweenFilter",
    "RelatedPostService",
    "Service",
    "TagOverlapFinder",
    "UrlGenerator",
    "UrlService",
    "apply_filters",
    "apply_ranking",
    "build_filters",
    "ordering_for",
]
