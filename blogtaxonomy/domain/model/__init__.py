"""Domain model entities for blog taxonomy."""

from blogtaxonomy.domain.model.category import Category
from blogtaxonomy.domain.model.post import Post
from blogtaxonomy.domain.model.tag import Tag

__all__ = [
    "Post",
    "Tag",
    "Category",
]
