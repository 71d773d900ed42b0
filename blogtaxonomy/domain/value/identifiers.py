"""Strongly typed identifiers for blog taxonomy entities.

Using NewType for strong typing prevents mixing up post, tag and category
IDs, which all share the same UUID representation.
"""

from typing import NewType
from uuid import UUID

PostId = NewType("PostId", UUID)
TagId = NewType("TagId", UUID)
CategoryId = NewType("CategoryId", UUID)
