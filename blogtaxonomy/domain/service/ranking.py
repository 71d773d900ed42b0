"""Ranking strategies for related post queries."""

from typing import Iterable, Optional

from blogtaxonomy.domain.query import (
    CandidateQuery,
    FieldOrdering,
    Ordering,
    PostField,
    RandomOrdering,
    RelevanceOrdering,
)
from blogtaxonomy.domain.value import RankingKey, SortField, TagId

_FIELD_COLUMNS = {
    SortField.PUBLISHED_AT: PostField.PUBLISHED_AT,
    SortField.TITLE: PostField.TITLE,
}


def ordering_for(key: RankingKey, seed_tag_ids: Iterable[TagId]) -> Ordering:
    """Translate a ranking key into a query ordering.

    Args:
        key: Recognized ranking key
        seed_tag_ids: Tags of the seed post (used by relevance ranking)

    Returns:
        Ordering value for the candidate query
    """
    if key.field == SortField.RANDOM:
        return RandomOrdering()

    if key.field == SortField.RELEVANCE:
        return RelevanceOrdering(
            tag_ids=frozenset(seed_tag_ids), direction=key.direction
        )

    return FieldOrdering(field=_FIELD_COLUMNS[key.field], direction=key.direction)


def apply_ranking(
    query: CandidateQuery,
    key: Optional[RankingKey],
    seed_tag_ids: Iterable[TagId],
) -> CandidateQuery:
    """Apply a ranking strategy to the query.

    An unrecognized key (``None``) leaves the query unordered, so rows come
    back in whatever order the store produces.
    """
    if key is None:
        return query
    return query.order_by(ordering_for(key, seed_tag_ids))
