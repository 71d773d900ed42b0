"""Unit tests for PageUrlGenerator."""

import pytest

from blogtaxonomy.adapter.error import PagePatternError
from blogtaxonomy.adapter.url import PageUrlGenerator

BASE_URL = "https://blog.example.com"


@pytest.fixture
def generator():
    return PageUrlGenerator(
        base_url=BASE_URL + "/",
        pages={
            "blog/post": "/blog/post/:slug",
            "blog/category": "/blog/category/:slug?",
            "blog/archive": "/blog/:year?2024/:month?",
            "blog/by-id": "/blog/:id|^[0-9]+$",
            "broken": "/blog/:?",
        },
    )


class TestPageUrl:
    """Tests for page_url."""

    def test_required_parameter(self, generator):
        url = generator.page_url("blog/post", {"slug": "hello-world"})

        assert url == "https://blog.example.com/blog/post/hello-world"

    def test_missing_required_parameter_gives_no_url(self, generator):
        assert generator.page_url("blog/post", {}) is None

    def test_missing_optional_parameter_is_dropped(self, generator):
        url = generator.page_url("blog/category", {})

        assert url == "https://blog.example.com/blog/category"

    def test_optional_default_is_used(self, generator):
        url = generator.page_url("blog/archive", {"month": "05"})

        assert url == "https://blog.example.com/blog/2024/05"

    def test_constraint_is_ignored(self, generator):
        url = generator.page_url("blog/by-id", {"id": "42"})

        assert url == "https://blog.example.com/blog/42"

    def test_values_are_escaped(self, generator):
        url = generator.page_url("blog/post", {"slug": "a/b c"})

        assert url == "https://blog.example.com/blog/post/a%2Fb%20c"

    def test_unknown_page_gives_no_url(self, generator):
        assert generator.page_url("blog/missing", {"slug": "x"}) is None

    def test_malformed_pattern_raises(self, generator):
        with pytest.raises(PagePatternError, match="empty parameter"):
            generator.page_url("broken", {})
