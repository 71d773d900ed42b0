"""FastAPI application."""

from typing import Optional

from dishka import AsyncContainer
from fastapi import FastAPI

from blogtaxonomy.interface.api.routes import health, related_posts
from blogtaxonomy.util.di.container import create_container, setup_di
from blogtaxonomy.util.observability import instrument_fastapi


def create_app(
    container: Optional[AsyncContainer] = None, instrument: bool = True
) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container (production container when omitted)
        instrument: Whether to instrument the app with Logfire
    """
    app_instance = FastAPI(
        title="Blog Taxonomy API",
        description="Related posts for blog posts, resolved through shared tags",
        version="0.1.0",
    )

    if instrument:
        instrument_fastapi(app_instance)

    setup_di(app_instance, container or create_container())

    app_instance.include_router(health.router)
    app_instance.include_router(related_posts.router)

    return app_instance
