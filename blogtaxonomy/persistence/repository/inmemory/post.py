"""In-memory post repository for testing."""

import random
from typing import Any, Optional

from blogtaxonomy.domain.error import UnsupportedPredicateError
from blogtaxonomy.domain.model.post import Post
from blogtaxonomy.domain.query import (
    Between,
    CandidateQuery,
    Equals,
    FieldOrdering,
    HasRelated,
    In,
    Ordering,
    Predicate,
    RandomOrdering,
    RelatedField,
    Relation,
    RelevanceOrdering,
    SharedTagCountAtLeast,
)
from blogtaxonomy.domain.repository.post import PostRepository
from blogtaxonomy.domain.value import PostId, Slug, SortDirection

STORE = "in-memory store"


def _field_value(post: Post, field: Any) -> Any:
    value = getattr(post, field.value)
    # Value objects compare by their primitive
    return getattr(value, "root", value)


def _related_values(post: Post, relation: Relation, field: RelatedField) -> set:
    items = post.tags if relation == Relation.TAGS else post.categories
    if field == RelatedField.ID:
        return {item.id for item in items}
    return {item.slug.root for item in items}


def shared_tag_count(post: Post, tag_ids: frozenset) -> int:
    """Number of the post's tags found in ``tag_ids``."""
    return len(post.tag_ids & tag_ids)


def matches(post: Post, predicate: Predicate) -> bool:
    """Evaluate a predicate against a post.

    Raises:
        UnsupportedPredicateError: For unknown predicate kinds
    """
    if isinstance(predicate, Equals):
        result = _field_value(post, predicate.field) == predicate.value
        return not result if predicate.negate else result

    if isinstance(predicate, In):
        result = _field_value(post, predicate.field) in set(predicate.values)
        return not result if predicate.negate else result

    if isinstance(predicate, Between):
        value = _field_value(post, predicate.field)
        if value is None:
            return False
        if predicate.lower is not None and value < predicate.lower:
            return False
        if predicate.upper is not None and value > predicate.upper:
            return False
        return True

    if isinstance(predicate, HasRelated):
        related = _related_values(post, predicate.relation, predicate.field)
        result = bool(related & set(predicate.values))
        return not result if predicate.negate else result

    if isinstance(predicate, SharedTagCountAtLeast):
        return shared_tag_count(post, predicate.tag_ids) >= predicate.minimum

    raise UnsupportedPredicateError(type(predicate).__name__, STORE)


def sort_posts(posts: list[Post], ordering: Ordering) -> list[Post]:
    """Sort posts by an ordering, breaking ties by ascending ID like the SQL store.

    Raises:
        UnsupportedPredicateError: For unknown ordering kinds
    """
    if isinstance(ordering, RandomOrdering):
        shuffled = list(posts)
        random.shuffle(shuffled)
        return shuffled

    if isinstance(ordering, FieldOrdering):
        # NULLs sort last ascending and first descending, as in PostgreSQL
        def key(post: Post) -> tuple:
            value = _field_value(post, ordering.field)
            return (value is None, value if value is not None else 0)

    elif isinstance(ordering, RelevanceOrdering):

        def key(post: Post) -> tuple:
            return (False, shared_tag_count(post, ordering.tag_ids))

    else:
        raise UnsupportedPredicateError(type(ordering).__name__, STORE)

    # Stable sorts: the ID order survives among equal keys, even reversed
    by_id = sorted(posts, key=lambda post: post.id)
    return sorted(by_id, key=key, reverse=ordering.direction == SortDirection.DESC)


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self) -> None:
        self._posts: dict[PostId, Post] = {}

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._posts.get(post_id)

    async def find_by_slug(self, slug: Slug) -> Optional[Post]:
        """Find a post by slug."""
        for post in self._posts.values():
            if post.slug == slug:
                return post
        return None

    async def find_candidates(self, query: CandidateQuery) -> list[Post]:
        """Evaluate a candidate query over the stored posts."""
        posts = [
            post
            for post in self._posts.values()
            if all(matches(post, predicate) for predicate in query.conjuncts)
        ]

        if query.ordering is not None:
            posts = sort_posts(posts, query.ordering)

        if query.limit:
            posts = posts[: query.limit]

        return posts

    async def save(self, post: Post) -> Post:
        """Store a post, replacing any post with the same ID.

        Only this store accepts writes; it is how tests load data.
        """
        self._posts[post.id] = post
        return post
