"""Repository interfaces for blog taxonomy.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from blogtaxonomy.domain.repository.post import PostRepository

__all__ = [
    "PostRepository",
]
