"""Test container builder with selective unmocking."""

from typing import Optional

from dishka import AsyncContainer, Provider, make_async_container

from blogtaxonomy.config import Settings
from blogtaxonomy.util.di import PROVIDERS, Component, get_provider


def build_test_container(
    unmock: Optional[set[Component]] = None,
    *extra: Provider,
    settings: Optional[Settings] = None,
) -> AsyncContainer:
    """Build test container with selective unmocking.

    Args:
        unmock: Components to use production implementations for.
                All others use mocks if available.
        extra: Additional providers, e.g. FastapiProvider for route tests
        settings: Settings placed in the container context

    Returns:
        Configured test container

    Raises:
        ValueError: If unknown components are requested

    Examples:
        # Unit tests - all mocks
        container = build_test_container()

        # Integration tests - real persistence, assumes postgres running
        container = build_test_container(unmock={"persistence"})
    """
    unmock = unmock or set()
    _validate_unmock(unmock)

    providers = []
    for base in PROVIDERS:
        use_mock = base.is_swappable() and base.__mock_component__ not in unmock
        providers.append(get_provider(base, use_mock=use_mock)())

    return make_async_container(
        *providers,
        *extra,
        context={Settings: settings or Settings(environment="test")},
    )


def _validate_unmock(unmock: set[Component]) -> None:
    """Reject component names no swappable provider declares.

    Raises:
        ValueError: If unknown components are requested
    """
    known = {
        base.__mock_component__
        for base in PROVIDERS
        if base.is_swappable() and base.__mock_component__
    }

    unknown = unmock - known
    if unknown:
        raise ValueError(f"Unknown components: {unknown}")
