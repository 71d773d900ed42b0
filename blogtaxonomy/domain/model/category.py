"""Category entity."""

from typing import Optional

from pydantic import Field

from blogtaxonomy.domain.model.common import DomainModel
from blogtaxonomy.domain.value import CategoryId, Slug


class Category(DomainModel):
    """Blog category.

    Categories are owned by the host blog; here they are only read to
    filter related posts and to receive a render URL.
    """

    id: CategoryId
    name: str = Field(min_length=1, max_length=255)
    slug: Slug
    url: Optional[str] = None  # Assigned after resolution
