"""Page URL generation from CMS-style URL patterns.

Patterns use the host CMS syntax: ``/blog/post/:slug`` declares a required
``slug`` parameter, ``:slug?`` an optional one, ``:slug?latest`` an optional
one with a default, and ``:id|^[0-9]+$`` a parameter with a constraint
(constraints are ignored when building URLs).
"""

from typing import Mapping, Optional
from urllib.parse import quote

import logfire

from blogtaxonomy.adapter.error import PagePatternError
from blogtaxonomy.domain.service.url_service import UrlGenerator


class PageUrlGenerator(UrlGenerator):
    """Builds absolute page URLs from configured patterns."""

    def __init__(self, base_url: str, pages: Mapping[str, str]) -> None:
        """Initialize generator.

        Args:
            base_url: Scheme and host prefixed to every URL
            pages: Page name -> URL pattern
        """
        self.base_url = base_url.rstrip("/")
        self.pages = dict(pages)

    def page_url(self, page: str, params: Mapping[str, str]) -> Optional[str]:
        """Build the URL of a page."""
        pattern = self.pages.get(page)
        if pattern is None:
            logfire.warn("Unknown page, no URL assigned", page=page)
            return None

        segments: list[str] = []
        for segment in pattern.strip("/").split("/"):
            if not segment.startswith(":"):
                if segment:
                    segments.append(segment)
                continue

            name, optional, default = self._parse_parameter(page, pattern, segment)
            value = params.get(name) or default
            if value:
                segments.append(quote(str(value), safe=""))
            elif optional:
                # Optional parameters can only trail the pattern
                break
            else:
                logfire.warn(
                    "Missing URL parameter, no URL assigned", page=page, parameter=name
                )
                return None

        return f"{self.base_url}/{'/'.join(segments)}"

    @staticmethod
    def _parse_parameter(
        page: str, pattern: str, segment: str
    ) -> tuple[str, bool, Optional[str]]:
        """Split ``:name?default|constraint`` into its parts."""
        declaration = segment[1:].split("|", 1)[0]
        name, optional, default = declaration.partition("?")
        if not name:
            raise PagePatternError(page, pattern, f"empty parameter in {segment!r}")
        return name, bool(optional), default or None
