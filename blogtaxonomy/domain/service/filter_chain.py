"""Inclusion/exclusion filters for related post queries."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Iterable, Optional, Sequence
from uuid import UUID

from blogtaxonomy.domain.query import (
    Between,
    CandidateQuery,
    HasRelated,
    In,
    PostField,
    Relation,
    RelatedField,
    SharedTagCountAtLeast,
)
from blogtaxonomy.domain.value import RelatedPostsOptions, TagId


class PostFilter(ABC):
    """A contributor that ANDs extra constraints onto a candidate query.

    Filters may only append to the query they receive.
    """

    @abstractmethod
    def apply(self, query: CandidateQuery) -> None:
        """Attach this filter's constraints to the query."""
        pass


class ExcludePostsFilter(PostFilter):
    """Exclude specific posts, given by slug or UUID."""

    def __init__(self, keys: Iterable[str]) -> None:
        self.ids: list[UUID] = []
        self.slugs: list[str] = []
        for key in keys:
            try:
                self.ids.append(UUID(key))
            except ValueError:
                self.slugs.append(key)

    def apply(self, query: CandidateQuery) -> None:
        if self.ids:
            query.where(In(field=PostField.ID, values=self.ids, negate=True))
        if self.slugs:
            query.where(In(field=PostField.SLUG, values=self.slugs, negate=True))


class ExcludeCategoriesFilter(PostFilter):
    """Exclude posts filed under any of the given categories."""

    def __init__(self, category_slugs: Iterable[str]) -> None:
        self.category_slugs = tuple(category_slugs)

    def apply(self, query: CandidateQuery) -> None:
        if not self.category_slugs:
            return
        query.where(
            HasRelated(
                relation=Relation.CATEGORIES,
                field=RelatedField.SLUG,
                values=self.category_slugs,
                negate=True,
            )
        )


class IncludeCategoriesFilter(PostFilter):
    """Keep only posts filed under at least one of the given categories."""

    def __init__(self, category_slugs: Iterable[str]) -> None:
        self.category_slugs = tuple(category_slugs)

    def apply(self, query: CandidateQuery) -> None:
        if not self.category_slugs:
            return
        query.where(
            HasRelated(
                relation=Relation.CATEGORIES,
                field=RelatedField.SLUG,
                values=self.category_slugs,
            )
        )


class PublishedBetweenFilter(PostFilter):
    """Keep posts published inside an inclusive date range."""

    def __init__(
        self, after: Optional[datetime] = None, before: Optional[datetime] = None
    ) -> None:
        self.after = after
        self.before = before

    def apply(self, query: CandidateQuery) -> None:
        if self.after is None and self.before is None:
            return
        query.where(
            Between(field=PostField.PUBLISHED_AT, lower=self.after, upper=self.before)
        )


class MinimumSharedTagsFilter(PostFilter):
    """Keep posts sharing at least ``minimum`` tags with the seed post."""

    def __init__(self, tag_ids: Iterable[TagId], minimum: int) -> None:
        self.tag_ids = frozenset(tag_ids)
        self.minimum = minimum

    def apply(self, query: CandidateQuery) -> None:
        # One shared tag is already implied by the overlap predicate
        if self.minimum <= 1:
            return
        query.where(SharedTagCountAtLeast(tag_ids=self.tag_ids, minimum=self.minimum))


def apply_filters(
    query: CandidateQuery, filters: Sequence[PostFilter]
) -> CandidateQuery:
    """Run every filter over the query in order.

    Args:
        query: Query to constrain
        filters: Filters to apply (empty is a no-op)

    Returns:
        The same query, with all filter constraints ANDed on
    """
    for post_filter in filters:
        post_filter.apply(query)
    return query


def build_filters(options: RelatedPostsOptions) -> list[PostFilter]:
    """Build the filter chain configured by listing options.

    The shared tag minimum depends on the seed post and is added by the
    resolver once the seed's tags are known.
    """
    filters: list[PostFilter] = []

    if options.exclude_posts:
        filters.append(ExcludePostsFilter(options.exclude_posts))
    if options.exclude_categories:
        filters.append(ExcludeCategoriesFilter(options.exclude_categories))
    if options.include_categories:
        filters.append(IncludeCategoriesFilter(options.include_categories))
    if options.published_after or options.published_before:
        filters.append(
            PublishedBetweenFilter(
                after=options.published_after, before=options.published_before
            )
        )

    return filters
