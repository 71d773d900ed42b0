"""Base class for domain services."""

from typing import Any, ClassVar

import logfire


class Service:
    """Base class for domain services.

    Subclasses set ``span_name`` and open spans through :meth:`span`, which
    names them ``<span_name>.<operation>``.
    """

    span_name: ClassVar[str] = "service"

    def span(self, operation: str, **attributes: Any) -> logfire.LogfireSpan:
        return logfire.span(f"{self.span_name}.{operation}", **attributes)
