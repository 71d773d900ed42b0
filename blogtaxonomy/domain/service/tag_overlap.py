"""Tag overlap finder."""

from typing import Iterable, Union

import logfire

from blogtaxonomy.domain.model.post import Post
from blogtaxonomy.domain.query import HasRelated, Predicate, Relation, RelatedField
from blogtaxonomy.domain.repository import PostRepository
from blogtaxonomy.domain.value import PostId, TagId

from .base import Service


class TagOverlapFinder(Service):
    """Finds the tags of a post and matches posts sharing any of them."""

    span_name = "tag_overlap_finder"

    def __init__(self, post_repository: PostRepository) -> None:
        """Initialize tag overlap finder.

        Args:
            post_repository: Post repository
        """
        self.post_repository = post_repository

    async def tags_of(self, post: Union[Post, PostId]) -> frozenset[TagId]:
        """Get the tag IDs attached to a post.

        A missing post and an untagged post both yield an empty set: there is
        nothing to overlap with, which is a normal outcome. A post that is
        already loaded is read as-is, without another fetch.

        Args:
            post: Loaded post, or the ID of one to fetch

        Returns:
            Tag IDs of the post (empty if none or if the post doesn't exist)
        """
        post_id = post.id if isinstance(post, Post) else post
        with self.span("tags_of", post_id=str(post_id)):
            if not isinstance(post, Post):
                post = await self.post_repository.find_by_id(post_id)

            if post is None:
                logfire.info("No overlap possible, post missing", post_id=str(post_id))
                return frozenset()

            tag_ids = post.tag_ids
            if not tag_ids:
                logfire.info("No overlap possible, post untagged", post_id=str(post_id))

            return tag_ids

    @staticmethod
    def overlap_predicate(tag_ids: Iterable[TagId]) -> Predicate:
        """Build a predicate matching posts with at least one of the given tags.

        An empty tag set yields a predicate that matches no post.

        Args:
            tag_ids: Tag IDs to overlap with

        Returns:
            Join-exists predicate over the post_tags association
        """
        return HasRelated(
            relation=Relation.TAGS,
            field=RelatedField.ID,
            values=tuple(sorted(set(tag_ids), key=str)),
        )
