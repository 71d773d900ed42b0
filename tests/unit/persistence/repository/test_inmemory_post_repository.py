"""Unit tests for the in-memory post repository."""

from datetime import datetime, timezone

import pytest

from blogtaxonomy.domain.query import (
    CandidateQuery,
    Equals,
    FieldOrdering,
    PostField,
    RelevanceOrdering,
)
from blogtaxonomy.domain.repository import PostRepository
from blogtaxonomy.domain.value import SortDirection
from blogtaxonomy.persistence.repository import PostgresPostRepository
from blogtaxonomy.persistence.repository.inmemory import InMemoryPostRepository
from tests.conftest import make_post, make_tag


class TestFindCandidates:
    """Tests for find_candidates."""

    @pytest.mark.asyncio
    async def test_filters_sorts_then_limits(self):
        """Limit applies after ordering."""
        # Arrange
        repo = InMemoryPostRepository()
        for title in ("Charlie", "Alpha", "Bravo"):
            await repo.save(make_post(title))
        await repo.save(make_post("Draft", published=False))

        query = (
            CandidateQuery()
            .where(Equals(field=PostField.PUBLISHED, value=True))
            .order_by(FieldOrdering(field=PostField.TITLE))
            .take(2)
        )

        # Act
        posts = await repo.find_candidates(query)

        # Assert
        assert [post.title for post in posts] == ["Alpha", "Bravo"]

    @pytest.mark.asyncio
    async def test_relevance_scores_each_post(self):
        """Each post is scored by its own shared tag count."""
        # Arrange
        repo = InMemoryPostRepository()
        python, sql, go = make_tag("Python"), make_tag("SQL"), make_tag("Go")
        one = make_post("One", tags=[python])
        two = make_post("Two", tags=[python, sql, go])
        none = make_post("None", tags=[go])
        for post in (one, two, none):
            await repo.save(post)

        query = CandidateQuery().order_by(
            RelevanceOrdering(
                tag_ids=frozenset({python.id, sql.id}), direction=SortDirection.DESC
            )
        )

        # Act
        posts = await repo.find_candidates(query)

        # Assert
        assert [post.id for post in posts] == [two.id, one.id, none.id]

    @pytest.mark.asyncio
    async def test_null_dates_sort_last_ascending(self):
        """Posts without a publication date sort last ascending, first descending."""
        # Arrange
        repo = InMemoryPostRepository()
        dated = make_post(
            "Dated", published_at=datetime(2024, 1, 1, tzinfo=timezone.utc)
        )
        undated = make_post("Undated", published_at=None)
        await repo.save(undated)
        await repo.save(dated)

        ascending = CandidateQuery().order_by(
            FieldOrdering(field=PostField.PUBLISHED_AT, direction=SortDirection.ASC)
        )
        descending = CandidateQuery().order_by(
            FieldOrdering(field=PostField.PUBLISHED_AT, direction=SortDirection.DESC)
        )

        # Act
        asc_posts = await repo.find_candidates(ascending)
        desc_posts = await repo.find_candidates(descending)

        # Assert
        assert [post.title for post in asc_posts] == ["Dated", "Undated"]
        assert [post.title for post in desc_posts] == ["Undated", "Dated"]


    @pytest.mark.asyncio
    async def test_equal_keys_fall_back_to_id_order(self):
        """Ties are broken by ascending ID in both directions."""
        # Arrange
        repo = InMemoryPostRepository()
        twins = [make_post("Same Title") for _ in range(4)]
        for post in twins:
            await repo.save(post)

        ascending = CandidateQuery().order_by(
            FieldOrdering(field=PostField.TITLE, direction=SortDirection.ASC)
        )
        descending = CandidateQuery().order_by(
            FieldOrdering(field=PostField.TITLE, direction=SortDirection.DESC)
        )

        # Act
        asc_posts = await repo.find_candidates(ascending)
        desc_posts = await repo.find_candidates(descending)

        # Assert
        expected = sorted(post.id for post in twins)
        assert [post.id for post in asc_posts] == expected
        assert [post.id for post in desc_posts] == expected

class TestFindBy:
    """Tests for find_by_id and find_by_slug."""

    @pytest.mark.asyncio
    async def test_find_by_slug(self):
        repo = InMemoryPostRepository()
        post = make_post("Hello World")
        await repo.save(post)

        found = await repo.find_by_slug(post.slug)

        assert found == post

    @pytest.mark.asyncio
    async def test_find_by_id_missing(self):
        repo = InMemoryPostRepository()
        post = make_post("Hello World")

        assert await repo.find_by_id(post.id) is None


class TestReadOnlyContract:
    """Only the in-memory store accepts writes."""

    def test_repository_interface_has_no_save(self):
        assert "save" not in PostRepository.__abstractmethods__
        assert not hasattr(PostRepository, "save")

    def test_postgres_repository_has_no_save(self):
        assert not hasattr(PostgresPostRepository, "save")
