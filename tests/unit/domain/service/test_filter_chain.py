"""Unit tests for related post filters."""

from datetime import datetime, timezone
from uuid import uuid4

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
from blogtaxonomy.domain.service import (
    ExcludeCategoriesFilter,
    ExcludePostsFilter,
    IncludeCategoriesFilter,
    MinimumSharedTagsFilter,
    PostFilter,
    PublishedBetweenFilter,
    apply_filters,
    build_filters,
)
from blogtaxonomy.domain.value import RelatedPostsOptions
from blogtaxonomy.persistence.repository.inmemory.post import matches
from tests.conftest import make_category, make_post, make_tag


class TestExcludePostsFilter:
    """Tests for ExcludePostsFilter."""

    def test_splits_uuids_from_slugs(self):
        """UUID keys exclude by ID, everything else by slug."""
        post_id = uuid4()
        query = CandidateQuery()

        ExcludePostsFilter([str(post_id), "hello-world"]).apply(query)

        assert query.conjuncts == (
            In(field=PostField.ID, values=(post_id,), negate=True),
            In(field=PostField.SLUG, values=("hello-world",), negate=True),
        )

    def test_excludes_matching_post(self):
        """A listed post should no longer match."""
        post = make_post("Hello World")
        query = CandidateQuery()

        ExcludePostsFilter(["hello-world"]).apply(query)

        assert not all(matches(post, p) for p in query.conjuncts)


class TestCategoryFilters:
    """Tests for category inclusion and exclusion."""

    def test_exclude_categories_builds_negated_join(self):
        """Excluded categories become a negated join-exists on category slugs."""
        query = CandidateQuery()

        ExcludeCategoriesFilter(["news"]).apply(query)

        assert query.conjuncts == (
            HasRelated(
                relation=Relation.CATEGORIES,
                field=RelatedField.SLUG,
                values=("news",),
                negate=True,
            ),
        )

    def test_include_and_exclude_categories(self):
        """Posts must be in an included category and in no excluded one."""
        news, guides = make_category("News"), make_category("Guides")
        news_post = make_post("News Post", categories=[news])
        guide_post = make_post("Guide Post", categories=[guides])
        both_post = make_post("Both Post", categories=[news, guides])
        query = CandidateQuery()

        apply_filters(
            query,
            [IncludeCategoriesFilter(["guides"]), ExcludeCategoriesFilter(["news"])],
        )

        kept = [
            post
            for post in (news_post, guide_post, both_post)
            if all(matches(post, p) for p in query.conjuncts)
        ]
        assert kept == [guide_post]

    def test_empty_category_lists_add_nothing(self):
        """Filters with nothing to filter on should leave the query untouched."""
        query = CandidateQuery()

        apply_filters(query, [IncludeCategoriesFilter([]), ExcludeCategoriesFilter([])])

        assert query.conjuncts == ()


class TestPublishedBetweenFilter:
    """Tests for PublishedBetweenFilter."""

    def test_open_range_adds_nothing(self):
        query = CandidateQuery()

        PublishedBetweenFilter().apply(query)

        assert query.conjuncts == ()

    def test_bounds_are_inclusive(self):
        """Posts published exactly on a bound are kept."""
        after = datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)
        post = make_post("Boundary", published_at=after)
        query = CandidateQuery()

        PublishedBetweenFilter(after=after).apply(query)

        (predicate,) = query.conjuncts
        assert isinstance(predicate, Between)
        assert predicate.lower == after
        assert predicate.upper is None
        assert matches(post, predicate)


class TestMinimumSharedTagsFilter:
    """Tests for MinimumSharedTagsFilter."""

    def test_minimum_of_one_is_implied(self):
        """A minimum of one is already guaranteed by the overlap predicate."""
        query = CandidateQuery()

        MinimumSharedTagsFilter({make_tag("Python").id}, 1).apply(query)

        assert query.conjuncts == ()

    def test_counts_shared_tags(self):
        """Posts need at least the given number of the seed's tags."""
        python, sql, go = make_tag("Python"), make_tag("SQL"), make_tag("Go")
        one_shared = make_post("One", tags=[python, go])
        two_shared = make_post("Two", tags=[python, sql])
        query = CandidateQuery()

        MinimumSharedTagsFilter({python.id, sql.id}, 2).apply(query)

        (predicate,) = query.conjuncts
        assert isinstance(predicate, SharedTagCountAtLeast)
        assert not matches(one_shared, predicate)
        assert matches(two_shared, predicate)


class TestApplyFilters:
    """Tests for apply_filters and build_filters."""

    def test_empty_chain_is_noop(self):
        query = CandidateQuery()

        result = apply_filters(query, [])

        assert result is query
        assert query.conjuncts == ()

    def test_filters_run_in_order(self):
        """Each filter appends after the constraints of the previous one."""

        class Marker(PostFilter):
            def __init__(self, slug: str) -> None:
                self.slug = slug

            def apply(self, query: CandidateQuery) -> None:
                query.where(In(field=PostField.SLUG, values=(self.slug,)))

        query = CandidateQuery()

        apply_filters(query, [Marker("first"), Marker("second")])

        assert [p.values for p in query.conjuncts] == [("first",), ("second",)]

    def test_build_filters_from_options(self):
        """Only configured options should produce filters."""
        options = RelatedPostsOptions(
            slug="seed",
            exclude_posts="a, b",
            include_categories=["guides"],
            published_before=datetime(2025, 1, 1, tzinfo=timezone.utc),
        )

        filters = build_filters(options)

        assert [type(f) for f in filters] == [
            ExcludePostsFilter,
            IncludeCategoriesFilter,
            PublishedBetweenFilter,
        ]
        assert filters[0].slugs == ["a", "b"]

    def test_build_filters_without_options(self):
        assert build_filters(RelatedPostsOptions(slug="seed")) == []
