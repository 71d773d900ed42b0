"""Test configuration and fixtures."""

import re
from datetime import datetime, timezone
from typing import Iterable, Optional
from uuid import uuid4

import logfire

from blogtaxonomy.domain.model import Category, Post, Tag
from blogtaxonomy.domain.value import CategoryId, PostId, Slug, TagId, TagName

# Keep spans and logs local during tests
logfire.configure(send_to_logfire=False, console=False)

# Comfortably in the past, so posts count as published
PUBLISHED_AT = datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


def make_slug(text: str) -> Slug:
    """Helper function to generate slugs for test entities.

    Args:
        text: Title or name to generate slug from

    Returns:
        Valid Slug value object
    """
    # Convert to lowercase and replace non-alphanumeric with hyphens
    slug_str = re.sub(r"[^a-z0-9]+", "-", text.lower())
    slug_str = slug_str.strip("-")[:100]
    return Slug(slug_str or "test-post")


def make_tag(name: str) -> Tag:
    """Build a tag whose slug is derived from its name."""
    return Tag(id=TagId(uuid4()), name=TagName(name), slug=make_slug(name))


def make_category(name: str) -> Category:
    """Build a category whose slug is derived from its name."""
    return Category(id=CategoryId(uuid4()), name=name, slug=make_slug(name))


def make_post(
    title: str,
    tags: Iterable[Tag] = (),
    categories: Iterable[Category] = (),
    published: bool = True,
    published_at: Optional[datetime] = PUBLISHED_AT,
) -> Post:
    """Build a post; published in the past unless told otherwise.

    Args:
        title: Post title, also used for the slug
        tags: Tags attached to the post
        categories: Categories the post is filed under
        published: Published flag
        published_at: Publication timestamp (timezone-aware)

    Returns:
        Post entity, not yet saved
    """
    return Post(
        id=PostId(uuid4()),
        slug=make_slug(title),
        title=title,
        published=published,
        published_at=published_at,
        tags=list(tags),
        categories=list(categories),
    )
