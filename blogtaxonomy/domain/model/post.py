"""Post aggregate root."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from blogtaxonomy.domain.model.category import Category
from blogtaxonomy.domain.model.common import DomainModel
from blogtaxonomy.domain.model.tag import Tag
from blogtaxonomy.domain.value import PostId, Slug, TagId


class Post(DomainModel):
    """Blog post with its taxonomy.

    A post counts as published only when the ``published`` flag is set and
    its ``published_at`` timestamp has been reached; a future timestamp
    means the post is scheduled.
    """

    id: PostId
    slug: Slug
    title: str = Field(min_length=1, max_length=255)
    published: bool = False
    published_at: Optional[datetime] = None
    tags: list[Tag] = Field(default_factory=list)
    categories: list[Category] = Field(default_factory=list)
    url: Optional[str] = None  # Assigned after resolution

    @property
    def tag_ids(self) -> frozenset[TagId]:
        return frozenset(tag.id for tag in self.tags)
