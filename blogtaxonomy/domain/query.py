"""Store-independent query model for candidate posts.

Predicates and orderings are plain values. A ``CandidateQuery`` collects
them as an ordered conjunction; each repository implementation decides how
to evaluate them (SQL for PostgreSQL, Python for the in-memory store).
"""

from enum import Enum
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import Field

from blogtaxonomy.domain.value import SortDirection, TagId
from blogtaxonomy.domain.value.common import ValueObject


class PostField(str, Enum):
    """Post columns that predicates and orderings may reference."""

    ID = "id"
    SLUG = "slug"
    TITLE = "title"
    PUBLISHED = "published"
    PUBLISHED_AT = "published_at"


class Relation(str, Enum):
    """Many-to-many relations of a post."""

    TAGS = "tags"
    CATEGORIES = "categories"


class RelatedField(str, Enum):
    """Columns of a related entity usable in ``HasRelated``."""

    ID = "id"
    SLUG = "slug"


# ============================================================================
# PREDICATES
# ============================================================================


class Equals(ValueObject):
    """``field = value`` (or ``<>`` when negated)."""

    kind: Literal["equals"] = "equals"
    field: PostField
    value: Any
    negate: bool = False


class In(ValueObject):
    """``field IN values``. An empty value set matches nothing."""

    kind: Literal["in"] = "in"
    field: PostField
    values: tuple[Any, ...]
    negate: bool = False


class Between(ValueObject):
    """Inclusive range on a field, ``None`` leaves that side open."""

    kind: Literal["between"] = "between"
    field: PostField
    lower: Any = None
    upper: Any = None


class HasRelated(ValueObject):
    """Post has at least one related row whose ``field`` is in ``values``.

    An empty value set matches nothing; negated it matches everything.
    """

    kind: Literal["has_related"] = "has_related"
    relation: Relation
    field: RelatedField = RelatedField.ID
    values: tuple[Any, ...]
    negate: bool = False


class SharedTagCountAtLeast(ValueObject):
    """Number of the post's tags found in ``tag_ids`` is at least ``minimum``."""

    kind: Literal["shared_tag_count_at_least"] = "shared_tag_count_at_least"
    tag_ids: frozenset[TagId]
    minimum: int = Field(ge=1)


Predicate = Annotated[
    Union[Equals, In, Between, HasRelated, SharedTagCountAtLeast],
    Field(discriminator="kind"),
]


# ============================================================================
# ORDERINGS
# ============================================================================


class FieldOrdering(ValueObject):
    """Order by a post column."""

    kind: Literal["field"] = "field"
    field: PostField
    direction: SortDirection = SortDirection.ASC


class RandomOrdering(ValueObject):
    """Non-deterministic order, reshuffled on every execution."""

    kind: Literal["random"] = "random"


class RelevanceOrdering(ValueObject):
    """Order by the number of tags each post shares with ``tag_ids``.

    The score is computed per candidate row, never once for the whole set.
    """

    kind: Literal["relevance"] = "relevance"
    tag_ids: frozenset[TagId]
    direction: SortDirection = SortDirection.DESC


Ordering = Annotated[
    Union[FieldOrdering, RandomOrdering, RelevanceOrdering],
    Field(discriminator="kind"),
]


# ============================================================================
# CANDIDATE QUERY
# ============================================================================


class CandidateQuery:
    """In-flight query for related posts.

    Constraints can only be appended, so a filter can never undo what an
    earlier one added. A limit of 0 means no limit.
    """

    def __init__(self) -> None:
        self._conjuncts: list[Predicate] = []
        self._ordering: Optional[Ordering] = None
        self._limit = 0

    def where(self, predicate: Predicate) -> "CandidateQuery":
        """AND a predicate onto the query."""
        self._conjuncts.append(predicate)
        return self

    def order_by(self, ordering: Ordering) -> "CandidateQuery":
        """Set the ordering applied before the limit."""
        self._ordering = ordering
        return self

    def take(self, limit: int) -> "CandidateQuery":
        """Keep only the first ``limit`` rows (0 keeps everything).

        Raises:
            ValueError: If limit is negative
        """
        if limit < 0:
            raise ValueError("Limit must be non-negative")
        self._limit = limit
        return self

    @property
    def conjuncts(self) -> tuple[Predicate, ...]:
        return tuple(self._conjuncts)

    @property
    def ordering(self) -> Optional[Ordering]:
        return self._ordering

    @property
    def limit(self) -> int:
        return self._limit

    def __repr__(self) -> str:
        return (
            f"CandidateQuery(conjuncts={len(self._conjuncts)}, "
            f"ordering={self._ordering!r}, limit={self._limit})"
        )
