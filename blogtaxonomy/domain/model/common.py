"""Base model for domain entities."""

from typing import Any, Self

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Immutable entity read from the host blog.

    Entities are never mutated in place; derived values such as render URLs
    are attached to a copy with :meth:`evolve`.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    def evolve(self, **changes: Any) -> Self:
        """Return a copy with the given fields replaced.

        Raises:
            ValueError: If a change names a field the model doesn't have
        """
        unknown = set(changes) - set(type(self).model_fields)
        if unknown:
            raise ValueError(f"Unknown fields for {type(self).__name__}: {unknown}")
        return self.model_copy(update=changes)
