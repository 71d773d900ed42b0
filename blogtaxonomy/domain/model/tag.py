"""Tag entity for labelling posts."""

from blogtaxonomy.domain.model.common import DomainModel
from blogtaxonomy.domain.value import Slug, TagId, TagName


class Tag(DomainModel):
    """Tag entity.

    Tags are attached to posts through the ``post_tags`` association
    table. Two posts sharing a tag are considered related.
    """

    id: TagId
    name: TagName
    slug: Slug
