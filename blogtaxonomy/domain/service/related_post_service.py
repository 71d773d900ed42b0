"""Related post resolution."""

from datetime import datetime, timezone
from typing import Callable, Optional, Sequence
from uuid import UUID

import logfire
from pydantic import ValidationError

from blogtaxonomy.domain.model.post import Post
from blogtaxonomy.domain.query import Between, CandidateQuery, Equals, PostField
from blogtaxonomy.domain.repository import PostRepository
from blogtaxonomy.domain.service.filter_chain import (
    MinimumSharedTagsFilter,
    PostFilter,
    apply_filters,
    build_filters,
)
from blogtaxonomy.domain.service.ranking import apply_ranking
from blogtaxonomy.domain.service.tag_overlap import TagOverlapFinder
from blogtaxonomy.domain.value import PostId, RankingKey, RelatedPostsOptions, Slug

from .base import Service


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class RelatedPostService(Service):
    """Resolves the posts related to a seed post through shared tags.

    Resolution is a read-only, sequential chain of store calls: seed lookup,
    tag lookup, then one candidate query. Store failures propagate as-is.
    """

    span_name = "related_post_service"

    def __init__(
        self,
        post_repository: PostRepository,
        tag_overlap_finder: TagOverlapFinder,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        """Initialize related post service.

        Args:
            post_repository: Post repository
            tag_overlap_finder: Finder for the seed post's tags
            clock: Source of the current time for the "published" check
        """
        self.post_repository = post_repository
        self.tag_overlap_finder = tag_overlap_finder
        self.clock = clock

    async def find_seed(self, key: str) -> Optional[Post]:
        """Look up the seed post by UUID, then by exact slug.

        Args:
            key: Post UUID or slug

        Returns:
            The post if found, None otherwise
        """
        try:
            post_id = PostId(UUID(key))
        except ValueError:
            pass
        else:
            post = await self.post_repository.find_by_id(post_id)
            if post is not None:
                return post
            # 32 hex characters also make a valid slug

        try:
            slug = Slug(key)
        except ValidationError:
            # Not a well-formed slug, so no post can carry it
            return None

        return await self.post_repository.find_by_slug(slug)

    async def resolve(
        self,
        options: RelatedPostsOptions,
        filters: Optional[Sequence[PostFilter]] = None,
    ) -> list[Post]:
        """Find published posts sharing at least one tag with the seed post.

        Args:
            options: Seed key, limit, ordering and filter settings
            filters: Extra filters run after the ones built from options

        Returns:
            Related posts in ranked order; empty if the seed doesn't exist
            or has no tags
        """
        with self.span(
            "resolve",
            seed=options.slug,
            order_by=options.order_by,
            limit=options.limit,
        ):
            seed = await self.find_seed(options.slug)
            if seed is None:
                logfire.info("Seed post not found", seed=options.slug)
                return []

            tag_ids = await self.tag_overlap_finder.tags_of(seed)
            if not tag_ids:
                return []

            query = (
                CandidateQuery()
                .where(Equals(field=PostField.PUBLISHED, value=True))
                .where(Between(field=PostField.PUBLISHED_AT, upper=self.clock()))
                .where(Equals(field=PostField.ID, value=seed.id, negate=True))
                .where(self.tag_overlap_finder.overlap_predicate(tag_ids))
            )

            chain = build_filters(options)
            chain.append(MinimumSharedTagsFilter(tag_ids, options.min_shared_tags))
            chain.extend(filters or ())
            apply_filters(query, chain)

            key = RankingKey.parse(options.order_by)
            if key is None:
                logfire.warn(
                    "Unrecognized ordering, leaving results unordered",
                    order_by=options.order_by,
                )
            apply_ranking(query, key, tag_ids)

            query.take(options.limit)

            posts = await self.post_repository.find_candidates(query)
            logfire.info(
                "Related posts resolved",
                seed_id=str(seed.id),
                shared_tags=len(tag_ids),
                count=len(posts),
            )
            return posts
