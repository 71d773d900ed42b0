"""Domain value objects for blog taxonomy.

Value objects are immutable and defined by their values, not identity.
"""

import re

from pydantic import field_validator

from blogtaxonomy.domain.value.common import TextValue


class Slug(TextValue):
    """URL-safe slug for posts, tags and categories.

    Must be lowercase, alphanumeric with hyphens, 1-255 characters.
    Examples: 'first-steps', 'release-notes-2024'
    """

    @field_validator("root")
    @classmethod
    def validate_slug_format(cls, v: str) -> str:
        """Validate slug format."""
        if not re.match(r"^[a-z0-9]+(?:-[a-z0-9]+)*$", v):
            raise ValueError(
                "Slug must be lowercase alphanumeric with hyphens, "
                "no leading/trailing hyphens or consecutive hyphens"
            )
        if len(v) > 255:
            raise ValueError("Slug must be 1-255 characters")
        return v


class TagName(TextValue):
    """Human-readable tag label.

    Free text, trimmed, 1-255 characters. Examples: 'Python', 'Winter CMS'
    """

    @field_validator("root")
    @classmethod
    def validate_tag_name(cls, v: str) -> str:
        """Validate tag name is not blank."""
        v = v.strip()
        if len(v) < 1 or len(v) > 255:
            raise ValueError("Tag name must be 1-255 characters")
        return v
