"""PostgreSQL repository implementations."""

from blogtaxonomy.persistence.repository.post import PostgresPostRepository

__all__ = [
    "PostgresPostRepository",
]
