"""Use case base class."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

RequestT = TypeVar("RequestT")
ResponseT = TypeVar("ResponseT")


class BaseUseCase(ABC, Generic[RequestT, ResponseT]):
    """One application operation, invoked by the interface layer.

    Use cases orchestrate domain services and map domain models to
    response models; they hold no state between calls.
    """

    @abstractmethod
    async def execute(self, request: RequestT) -> ResponseT:
        pass
