"""Ranking keys for related post listings.

A ranking key is written as ``"<field> <direction>"`` (``"random"`` takes no
direction). The set of accepted keys is closed; anything else parses to
``None`` and leaves the listing unordered.
"""

from enum import Enum
from typing import Optional

from blogtaxonomy.domain.value.common import ValueObject


class SortField(str, Enum):
    """Field a related post listing can be ranked by."""

    PUBLISHED_AT = "published_at"
    TITLE = "title"
    RANDOM = "random"
    RELEVANCE = "relevance"  # Number of tags shared with the seed post


class SortDirection(str, Enum):
    """Sort direction."""

    ASC = "asc"
    DESC = "desc"


# Exposed verbatim to configuration surfaces
ALLOWED_ORDERINGS: tuple[str, ...] = (
    "published_at asc",
    "published_at desc",
    "title asc",
    "title desc",
    "random",
    "relevance asc",
    "relevance desc",
)


class RankingKey(ValueObject):
    """A recognized ranking strategy."""

    field: SortField
    direction: SortDirection = SortDirection.ASC

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["RankingKey"]:
        """Parse a ranking key from its textual form.

        Args:
            value: Text such as ``"relevance desc"`` or ``"random"``

        Returns:
            The ranking key, or None if the text is not an allowed ordering
        """
        if value is None or value not in ALLOWED_ORDERINGS:
            return None

        if value == SortField.RANDOM.value:
            return cls(field=SortField.RANDOM)

        field, direction = value.split(" ")
        return cls(field=SortField(field), direction=SortDirection(direction))

    @property
    def descending(self) -> bool:
        return self.direction == SortDirection.DESC

    def __str__(self) -> str:
        if self.field == SortField.RANDOM:
            return self.field.value
        return f"{self.field.value} {self.direction.value}"
