"""Render URL assignment for resolved posts."""

from abc import ABC, abstractmethod
from typing import Mapping, Optional, Sequence

from blogtaxonomy.domain.model.category import Category
from blogtaxonomy.domain.model.post import Post

from .base import Service


class UrlGenerator(ABC):
    """Builds the URL of a CMS page for a set of route parameters."""

    @abstractmethod
    def page_url(self, page: str, params: Mapping[str, str]) -> Optional[str]:
        """Build a page URL.

        Args:
            page: Page name, e.g. 'blog/post'
            params: Route parameters, e.g. {'slug': 'hello-world'}

        Returns:
            The URL, or None if the page is unknown
        """
        pass


class UrlService(Service):
    """Attaches render URLs to posts and their categories."""

    span_name = "url_service"

    def __init__(self, url_generator: UrlGenerator) -> None:
        """Initialize URL service.

        Args:
            url_generator: Page URL generator
        """
        self.url_generator = url_generator

    def assign_urls(
        self,
        posts: Sequence[Post],
        post_page: Optional[str],
        category_page: Optional[str] = None,
    ) -> list[Post]:
        """Return copies of the posts with ``url`` set.

        Category URLs are only set when a category page is given. Without a
        post page the posts are returned untouched.

        Args:
            posts: Resolved posts
            post_page: Page rendering a single post
            category_page: Page rendering a category listing

        Returns:
            Posts with URLs assigned, in the same order
        """
        if not post_page or not posts:
            return list(posts)

        with self.span(
            "assign_urls",
            count=len(posts),
            post_page=post_page,
            category_page=category_page,
        ):
            return [self._with_urls(post, post_page, category_page) for post in posts]

    def _with_urls(
        self, post: Post, post_page: str, category_page: Optional[str]
    ) -> Post:
        url = self.url_generator.page_url(post_page, {"slug": post.slug.root})
        if not (category_page and post.categories):
            return post.evolve(url=url)

        return post.evolve(
            url=url,
            categories=[
                self._category_with_url(category, category_page)
                for category in post.categories
            ],
        )

    def _category_with_url(self, category: Category, category_page: str) -> Category:
        url = self.url_generator.page_url(category_page, {"slug": category.slug.root})
        return category.evolve(url=url)
