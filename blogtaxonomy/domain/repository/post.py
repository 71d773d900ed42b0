"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from blogtaxonomy.domain.model.post import Post
from blogtaxonomy.domain.query import CandidateQuery
from blogtaxonomy.domain.value import PostId, Slug


class PostRepository(ABC):
    """Read access to blog posts.

    Posts are owned by the host blog. Every finder returns posts with their
    tags and categories attached.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_slug(self, slug: Slug) -> Optional[Post]:
        """Find a post by exact slug match.

        Args:
            slug: The post slug

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_candidates(self, query: CandidateQuery) -> List[Post]:
        """Materialize a candidate query.

        All conjuncts are ANDed, the ordering is applied before the limit,
        and a limit of 0 returns every matching post.

        Args:
            query: The candidate query to execute

        Returns:
            Matching posts in query order
        """
        pass
