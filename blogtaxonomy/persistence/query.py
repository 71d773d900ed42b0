"""Compile candidate queries into SQLAlchemy Core statements."""

from sqlalchemy import (
    ColumnElement,
    Select,
    and_,
    asc,
    desc,
    false,
    func,
    select,
    true,
)

from blogtaxonomy.domain.error import UnsupportedPredicateError
from blogtaxonomy.domain.query import (
    Between,
    CandidateQuery,
    Equals,
    FieldOrdering,
    HasRelated,
    In,
    Ordering,
    PostField,
    Predicate,
    RandomOrdering,
    RelatedField,
    Relation,
    RelevanceOrdering,
    SharedTagCountAtLeast,
)
from blogtaxonomy.domain.value import SortDirection, TagId
from blogtaxonomy.persistence.tables import (
    categories_table,
    post_categories_table,
    post_tags_table,
    posts_table,
    tags_table,
)

STORE = "PostgreSQL"

_COLUMNS = {
    PostField.ID: posts_table.c.id,
    PostField.SLUG: posts_table.c.slug,
    PostField.TITLE: posts_table.c.title,
    PostField.PUBLISHED: posts_table.c.published,
    PostField.PUBLISHED_AT: posts_table.c.published_at,
}

# relation -> (association table, association FK to related row, related table)
_RELATIONS = {
    Relation.TAGS: (post_tags_table, post_tags_table.c.tag_id, tags_table),
    Relation.CATEGORIES: (
        post_categories_table,
        post_categories_table.c.category_id,
        categories_table,
    ),
}


def shared_tag_count(tag_ids: frozenset[TagId]) -> ColumnElement[int]:
    """Correlated count of a post's association rows pointing at ``tag_ids``.

    Evaluated once per outer ``posts`` row.
    """
    return (
        select(func.count())
        .select_from(post_tags_table)
        .where(
            post_tags_table.c.post_id == posts_table.c.id,
            post_tags_table.c.tag_id.in_(sorted(tag_ids, key=str)),
        )
        .correlate(posts_table)
        .scalar_subquery()
    )


def _has_related(predicate: HasRelated) -> ColumnElement[bool]:
    if not predicate.values:
        return true() if predicate.negate else false()

    association, related_fk, related = _RELATIONS[predicate.relation]
    stmt = select(1).select_from(association)

    if predicate.field == RelatedField.ID:
        match = related_fk.in_(predicate.values)
    else:
        stmt = stmt.join(related, related_fk == related.c.id)
        match = related.c.slug.in_(predicate.values)

    exists = (
        stmt.where(association.c.post_id == posts_table.c.id, match)
        .correlate(posts_table)
        .exists()
    )
    return ~exists if predicate.negate else exists


def compile_predicate(predicate: Predicate) -> ColumnElement[bool]:
    """Translate a predicate into a SQL boolean expression.

    Raises:
        UnsupportedPredicateError: For unknown predicate kinds
    """
    if isinstance(predicate, Equals):
        column = _COLUMNS[predicate.field]
        if predicate.negate:
            return column != predicate.value
        return column == predicate.value

    if isinstance(predicate, In):
        if not predicate.values:
            return true() if predicate.negate else false()
        column = _COLUMNS[predicate.field]
        if predicate.negate:
            return column.not_in(predicate.values)
        return column.in_(predicate.values)

    if isinstance(predicate, Between):
        column = _COLUMNS[predicate.field]
        bounds = []
        if predicate.lower is not None:
            bounds.append(column >= predicate.lower)
        if predicate.upper is not None:
            bounds.append(column <= predicate.upper)
        return and_(*bounds) if bounds else true()

    if isinstance(predicate, HasRelated):
        return _has_related(predicate)

    if isinstance(predicate, SharedTagCountAtLeast):
        return shared_tag_count(predicate.tag_ids) >= predicate.minimum

    raise UnsupportedPredicateError(type(predicate).__name__, STORE)


def compile_ordering(ordering: Ordering) -> list[ColumnElement]:
    """Translate an ordering into ORDER BY clauses.

    Deterministic orderings break ties on the post ID so that a limited
    result is always a prefix of the unlimited one.

    Raises:
        UnsupportedPredicateError: For unknown ordering kinds
    """
    if isinstance(ordering, RandomOrdering):
        return [func.random()]

    if isinstance(ordering, FieldOrdering):
        key = _COLUMNS[ordering.field]
    elif isinstance(ordering, RelevanceOrdering):
        key = shared_tag_count(ordering.tag_ids)
    else:
        raise UnsupportedPredicateError(type(ordering).__name__, STORE)

    direction = desc if ordering.direction == SortDirection.DESC else asc
    return [direction(key), asc(posts_table.c.id)]


def build_candidate_statement(query: CandidateQuery) -> Select:
    """Build the SELECT for a candidate query.

    Args:
        query: Candidate query

    Returns:
        Statement selecting matching ``posts`` rows
    """
    stmt = select(posts_table).where(
        *[compile_predicate(predicate) for predicate in query.conjuncts]
    )

    if query.ordering is not None:
        stmt = stmt.order_by(*compile_ordering(query.ordering))

    if query.limit:
        stmt = stmt.limit(query.limit)

    return stmt
