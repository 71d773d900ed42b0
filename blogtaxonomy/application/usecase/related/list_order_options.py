"""List ordering options use case."""

from pydantic import BaseModel

from blogtaxonomy.application.usecase.base import BaseUseCase
from blogtaxonomy.domain.value import ALLOWED_ORDERINGS


class ListOrderOptionsResponse(BaseModel):
    """Ordering vocabulary accepted by ``order_by``."""

    options: list[str]
    default: str


class ListOrderOptionsUseCase(BaseUseCase[None, ListOrderOptionsResponse]):
    """Use case exposing the allowed ordering keys to configuration surfaces."""

    def __init__(self, default_order_by: str) -> None:
        self.default_order_by = default_order_by

    async def execute(self, request: None = None) -> ListOrderOptionsResponse:
        return ListOrderOptionsResponse(
            options=list(ALLOWED_ORDERINGS), default=self.default_order_by
        )
