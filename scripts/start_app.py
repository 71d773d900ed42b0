#!/usr/bin/env python3
"""Run the related posts API under uvicorn.

Settings are loaded once here and shared by logging, Logfire and the DI
container, so the served app sees exactly the configuration logged at startup.
"""

import sys

import logfire
import uvicorn

from blogtaxonomy.config import Settings
from blogtaxonomy.interface.api.app import create_app
from blogtaxonomy.util.di.container import create_container
from blogtaxonomy.util.logging import setup_logging
from blogtaxonomy.util.observability import configure_logfire


def main() -> int:
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    with logfire.span("startup", environment=settings.environment):
        try:
            app = create_app(create_container(settings))
        except Exception:
            logfire.exception("Application startup failed")
            raise

    logfire.info("Serving related posts API", port=settings.port)
    uvicorn.run(
        app,
        host="0.0.0.0",
        port=settings.port,
        log_level="debug" if settings.debug else "info",
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
