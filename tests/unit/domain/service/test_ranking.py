"""Unit tests for ranking strategies."""

import pytest

from blogtaxonomy.domain.query import (
    CandidateQuery,
    FieldOrdering,
    PostField,
    RandomOrdering,
    RelevanceOrdering,
)
from blogtaxonomy.domain.service import apply_ranking, ordering_for
from blogtaxonomy.domain.value import (
    ALLOWED_ORDERINGS,
    RankingKey,
    SortDirection,
    SortField,
)
from tests.conftest import make_tag


class TestRankingKeyParse:
    """Tests for RankingKey.parse."""

    @pytest.mark.parametrize("value", ALLOWED_ORDERINGS)
    def test_allowed_keys_round_trip(self, value):
        """Every allowed key should parse and print back unchanged."""
        key = RankingKey.parse(value)

        assert key is not None
        assert str(key) == value

    @pytest.mark.parametrize(
        "value",
        ["popularity desc", "published_at", "RANDOM", "title  asc", "", None],
    )
    def test_unknown_keys_parse_to_none(self, value):
        assert RankingKey.parse(value) is None

    def test_relevance_desc(self):
        key = RankingKey.parse("relevance desc")

        assert key.field == SortField.RELEVANCE
        assert key.direction == SortDirection.DESC
        assert key.descending


class TestOrderingFor:
    """Tests for ordering_for."""

    def test_field_keys_map_to_columns(self):
        ordering = ordering_for(RankingKey.parse("title desc"), [])

        assert isinstance(ordering, FieldOrdering)
        assert ordering.field == PostField.TITLE
        assert ordering.direction == SortDirection.DESC

    def test_random(self):
        assert isinstance(ordering_for(RankingKey.parse("random"), []), RandomOrdering)

    def test_relevance_carries_seed_tags(self):
        """Relevance is scored against the seed post's tags."""
        tag_ids = [make_tag("Python").id, make_tag("SQL").id]

        ordering = ordering_for(RankingKey.parse("relevance asc"), tag_ids)

        assert isinstance(ordering, RelevanceOrdering)
        assert ordering.tag_ids == frozenset(tag_ids)
        assert ordering.direction == SortDirection.ASC


class TestApplyRanking:
    """Tests for apply_ranking."""

    def test_sets_ordering(self):
        query = CandidateQuery()

        apply_ranking(query, RankingKey.parse("published_at asc"), [])

        assert query.ordering == FieldOrdering(
            field=PostField.PUBLISHED_AT, direction=SortDirection.ASC
        )

    def test_unrecognized_key_leaves_query_unordered(self):
        query = CandidateQuery()

        result = apply_ranking(query, None, [make_tag("Python").id])

        assert result is query
        assert query.ordering is None
