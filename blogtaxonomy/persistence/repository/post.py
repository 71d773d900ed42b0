"""PostgreSQL implementation of Post repository."""

from collections import defaultdict
from typing import Any, List, Optional
from uuid import UUID

import logfire
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from blogtaxonomy.domain.model import Category, Post, Tag
from blogtaxonomy.domain.query import CandidateQuery
from blogtaxonomy.domain.repository import PostRepository
from blogtaxonomy.domain.value import PostId, Slug
from blogtaxonomy.persistence.mappers import (
    row_to_category,
    row_to_post,
    row_to_tag,
)
from blogtaxonomy.persistence.query import build_candidate_statement
from blogtaxonomy.persistence.tables import (
    categories_table,
    post_categories_table,
    post_tags_table,
    posts_table,
    tags_table,
)


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _fetch_tags_for_posts(
        self, post_ids: list[UUID]
    ) -> dict[UUID, list[Tag]]:
        """Fetch tags for multiple posts in a single query.

        Args:
            post_ids: List of post IDs

        Returns:
            Dict mapping post_id -> list of tags
        """
        if not post_ids:
            return {}

        stmt = (
            select(post_tags_table.c.post_id, tags_table)
            .select_from(post_tags_table)
            .join(tags_table, post_tags_table.c.tag_id == tags_table.c.id)
            .where(post_tags_table.c.post_id.in_(post_ids))
            .order_by(tags_table.c.name)
        )
        result = await self.session.execute(stmt)

        post_tag_map: dict[UUID, list[Tag]] = defaultdict(list)
        for row in result.fetchall():
            post_tag_map[row.post_id].append(row_to_tag(row._asdict()))

        return post_tag_map

    async def _fetch_categories_for_posts(
        self, post_ids: list[UUID]
    ) -> dict[UUID, list[Category]]:
        """Fetch categories for multiple posts in a single query.

        Args:
            post_ids: List of post IDs

        Returns:
            Dict mapping post_id -> list of categories
        """
        if not post_ids:
            return {}

        stmt = (
            select(post_categories_table.c.post_id, categories_table)
            .select_from(post_categories_table)
            .join(
                categories_table,
                post_categories_table.c.category_id == categories_table.c.id,
            )
            .where(post_categories_table.c.post_id.in_(post_ids))
            .order_by(categories_table.c.name)
        )
        result = await self.session.execute(stmt)

        post_category_map: dict[UUID, list[Category]] = defaultdict(list)
        for row in result.fetchall():
            post_category_map[row.post_id].append(row_to_category(row._asdict()))

        return post_category_map

    async def _hydrate(self, rows: list[Any]) -> List[Post]:
        """Build posts from rows, attaching tags and categories."""
        if not rows:
            return []

        post_ids = [row.id for row in rows]
        tag_map = await self._fetch_tags_for_posts(post_ids)
        category_map = await self._fetch_categories_for_posts(post_ids)

        return [
            row_to_post(
                row._asdict(),
                tags=tag_map.get(row.id, []),
                categories=category_map.get(row.id, []),
            )
            for row in rows
        ]

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        with logfire.span("post_repository.find_by_id", post_id=str(post_id)):
            stmt = select(posts_table).where(posts_table.c.id == post_id)
            result = await self.session.execute(stmt)
            row = result.fetchone()

            if not row:
                logfire.warn("Post not found", post_id=str(post_id))
                return None

            posts = await self._hydrate([row])
            return posts[0]

    async def find_by_slug(self, slug: Slug) -> Optional[Post]:
        """Find a post by slug."""
        with logfire.span("post_repository.find_by_slug", slug=str(slug)):
            stmt = select(posts_table).where(posts_table.c.slug == slug.root)
            result = await self.session.execute(stmt)
            row = result.fetchone()

            if not row:
                logfire.warn("Post not found by slug", slug=str(slug))
                return None

            posts = await self._hydrate([row])
            return posts[0]

    async def find_candidates(self, query: CandidateQuery) -> List[Post]:
        """Execute a candidate query."""
        with logfire.span(
            "post_repository.find_candidates",
            conjuncts=len(query.conjuncts),
            ordering=query.ordering.kind if query.ordering else None,
            limit=query.limit,
        ):
            stmt = build_candidate_statement(query)
            result = await self.session.execute(stmt)
            rows = result.fetchall()

            if not rows:
                logfire.info("No candidate posts found")
                return []

            posts = await self._hydrate(rows)
            logfire.info("Found candidate posts", count=len(posts))
            return posts
