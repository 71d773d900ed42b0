"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict, Sequence
from uuid import UUID

from blogtaxonomy.domain.model import Category, Post, Tag
from blogtaxonomy.domain.value import CategoryId, PostId, Slug, TagId, TagName


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_tag(row: Dict[str, Any]) -> Tag:
    """Convert database row to Tag domain model.

    Args:
        row: Database row as dict

    Returns:
        Tag domain model
    """
    return Tag(
        id=TagId(_uuid(row["id"])),
        name=TagName(row["name"]),
        slug=Slug(row["slug"]),
    )


def row_to_category(row: Dict[str, Any]) -> Category:
    """Convert database row to Category domain model.

    Args:
        row: Database row as dict

    Returns:
        Category domain model
    """
    return Category(
        id=CategoryId(_uuid(row["id"])),
        name=row["name"],
        slug=Slug(row["slug"]),
    )


def row_to_post(
    row: Dict[str, Any],
    tags: Sequence[Tag] = (),
    categories: Sequence[Category] = (),
) -> Post:
    """Convert database row to Post domain model.

    Args:
        row: Database row as dict
        tags: Tags attached to the post
        categories: Categories the post is filed under

    Returns:
        Post domain model
    """
    return Post(
        id=PostId(_uuid(row["id"])),
        slug=Slug(row["slug"]),
        title=row["title"],
        published=row["published"],
        published_at=row.get("published_at"),
        tags=list(tags),
        categories=list(categories),
    )
