"""Container assembly and FastAPI wiring."""

from typing import Optional

import logfire
from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from blogtaxonomy.config import Settings
from blogtaxonomy.util.di import PROVIDERS, get_provider


def create_container(settings: Optional[Settings] = None) -> AsyncContainer:
    """Assemble the production container.

    Args:
        settings: Loaded settings; read from the environment when omitted

    Returns:
        Container whose APP scope holds ``settings``
    """
    settings = settings or Settings()
    providers = [get_provider(base, use_mock=False)() for base in PROVIDERS]

    logfire.info(
        "Building DI container",
        environment=settings.environment,
        providers=[type(p).__name__ for p in providers],
    )
    return make_async_container(
        *providers, FastapiProvider(), context={Settings: settings}
    )


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach the container to the app so routes can use ``FromDishka``."""
    setup_dishka(container, app)
