"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class UnsupportedPredicateError(DomainError):
    """Raised when a data store is handed a predicate or ordering it cannot evaluate."""

    def __init__(self, kind: str, store: str):
        self.kind = kind
        self.store = store
        super().__init__(f"{store} cannot evaluate {kind}")
