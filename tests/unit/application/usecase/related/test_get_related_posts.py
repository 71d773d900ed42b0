"""Unit tests for GetRelatedPostsUseCase."""

import pytest

from blogtaxonomy.application.usecase.related import (
    GetRelatedPostsRequest,
    GetRelatedPostsUseCase,
    ListOrderOptionsUseCase,
)
from blogtaxonomy.config import Settings
from blogtaxonomy.domain.repository import PostRepository
from blogtaxonomy.domain.value import ALLOWED_ORDERINGS
from tests.conftest import make_category, make_post, make_tag
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def seed_posts(post_repo: PostRepository):
    """Store a seed post and one related post filed under a category."""
    python = make_tag("Python")
    guides = make_category("Guides")
    seed = make_post("Seed Post", tags=[python])
    related = make_post("Related Post", tags=[python], categories=[guides])
    await post_repo.save(seed)
    await post_repo.save(related)
    return seed, related


class TestGetRelatedPosts:
    """Tests for get related posts use case."""

    @pytest.mark.asyncio
    async def test_assigns_post_urls(self, unit_env):
        """Resolved posts should carry the URL of the post page."""
        # Arrange
        use_case = await unit_env.get(GetRelatedPostsUseCase)
        settings = await unit_env.get(Settings)
        _, related = await seed_posts(await unit_env.get(PostRepository))

        # Act
        response = await use_case.execute(GetRelatedPostsRequest(slug="seed-post"))

        # Assert
        assert len(response.posts) == 1
        item = response.posts[0]
        assert item.post_id == str(related.id)
        assert item.slug == "related-post"
        assert item.tag_names == ["Python"]
        assert item.url == f"{settings.base_url}/blog/post/related-post"
        assert item.categories[0].url is None

    @pytest.mark.asyncio
    async def test_assigns_category_urls_when_page_given(self, unit_env):
        """Categories get URLs only when a category page is configured."""
        # Arrange
        use_case = await unit_env.get(GetRelatedPostsUseCase)
        settings = await unit_env.get(Settings)
        await seed_posts(await unit_env.get(PostRepository))

        # Act
        response = await use_case.execute(
            GetRelatedPostsRequest(slug="seed-post", category_page="blog/category")
        )

        # Assert
        category = response.posts[0].categories[0]
        assert category.slug == "guides"
        assert category.url == f"{settings.base_url}/blog/category/guides"

    @pytest.mark.asyncio
    async def test_unknown_post_page_leaves_url_empty(self, unit_env):
        """An unconfigured page yields no URL instead of failing."""
        # Arrange
        use_case = await unit_env.get(GetRelatedPostsUseCase)
        await seed_posts(await unit_env.get(PostRepository))

        # Act
        response = await use_case.execute(
            GetRelatedPostsRequest(slug="seed-post", post_page="news/article")
        )

        # Assert
        assert response.posts[0].url is None

    @pytest.mark.asyncio
    async def test_unknown_seed_returns_empty_response(self, unit_env):
        use_case = await unit_env.get(GetRelatedPostsUseCase)

        response = await use_case.execute(GetRelatedPostsRequest(slug="missing"))

        assert response.posts == []


class TestListOrderOptions:
    """Tests for list order options use case."""

    @pytest.mark.asyncio
    async def test_lists_allowed_orderings(self, unit_env):
        use_case = await unit_env.get(ListOrderOptionsUseCase)

        response = await use_case.execute()

        assert response.options == list(ALLOWED_ORDERINGS)
        assert response.default in ALLOWED_ORDERINGS
