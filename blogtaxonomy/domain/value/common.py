"""Base classes for value objects."""

from pydantic import BaseModel, ConfigDict, RootModel


class ValueObject(BaseModel):
    """Immutable value compared field by field.

    Unknown fields are rejected so that a misspelled option or predicate
    argument fails loudly instead of being silently dropped.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        arbitrary_types_allowed=True,
    )


class TextValue(RootModel[str]):
    """Validated string such as a slug or a tag name.

    The text lives in ``.root``; ``model_dump()`` and ``str()`` both give
    the bare string back.
    """

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return self.root
