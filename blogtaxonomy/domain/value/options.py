"""Options accepted by the related posts resolver."""

import re
from datetime import datetime, timezone
from typing import Any, Optional

from pydantic import Field, field_validator

from blogtaxonomy.domain.value.common import ValueObject


class RelatedPostsOptions(ValueObject):
    """Typed configuration for a related posts listing.

    Mirrors the component properties a page editor can set. Unknown
    ``order_by`` values are kept as-is and simply produce no ordering.
    """

    slug: str = Field(min_length=1)  # Seed post slug or UUID
    limit: int = Field(default=0, ge=0)  # 0 means no limit
    order_by: str = "published_at asc"
    post_page: str = "blog/post"
    category_page: Optional[str] = None

    # Filters
    exclude_posts: list[str] = Field(default_factory=list)  # slugs or UUIDs
    exclude_categories: list[str] = Field(default_factory=list)  # category slugs
    include_categories: list[str] = Field(default_factory=list)  # category slugs
    published_after: Optional[datetime] = None
    published_before: Optional[datetime] = None
    min_shared_tags: int = Field(default=1, ge=1)

    @field_validator("limit", mode="before")
    @classmethod
    def coerce_limit(cls, v: Any) -> int:
        """Normalize malformed limits to 0 (no limit).

        Only digit strings and non-negative integers are honored, matching
        the ``^[0-9]+$`` rule editors are held to.
        """
        if isinstance(v, bool):
            return 0
        if isinstance(v, int):
            return v if v >= 0 else 0
        if isinstance(v, str) and re.fullmatch(r"[0-9]+", v.strip()):
            return int(v.strip())
        return 0

    @field_validator("published_after", "published_before")
    @classmethod
    def assume_utc(cls, v: Optional[datetime]) -> Optional[datetime]:
        """Read dates given without a timezone as UTC."""
        if v is not None and v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v

    @field_validator(
        "exclude_posts", "exclude_categories", "include_categories", mode="before"
    )
    @classmethod
    def split_csv(cls, v: Any) -> Any:
        """Accept comma separated strings as well as lists."""
        if isinstance(v, str):
            return [item.strip() for item in v.split(",") if item.strip()]
        return v
