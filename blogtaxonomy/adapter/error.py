"""Adapter layer errors."""


class AdapterError(Exception):
    """Base adapter error."""

    pass


class PagePatternError(AdapterError):
    """A configured page URL pattern cannot be parsed."""

    def __init__(self, page: str, pattern: str, reason: str):
        self.page = page
        self.pattern = pattern
        super().__init__(
            f"Invalid URL pattern for page {page!r} ({pattern!r}): {reason}"
        )
