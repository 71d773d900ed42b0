"""Stdlib logging setup.

Our own code logs through Logfire directly. Libraries such as uvicorn,
SQLAlchemy and asyncpg use stdlib ``logging``; their records are forwarded
to Logfire so both end up in the same trace view.
"""

import logging

import logfire

from blogtaxonomy.config import Settings

# Library loggers and their level outside debug mode
_QUIET_LOGGERS = {
    "asyncio": logging.WARNING,
    "sqlalchemy.engine": logging.WARNING,
    "uvicorn.access": logging.WARNING,
}


def setup_logging(settings: Settings) -> None:
    """Route stdlib logging into Logfire.

    Args:
        settings: Application settings (``debug`` raises every level to DEBUG)
    """
    level = logging.DEBUG if settings.debug else logging.INFO

    logging.basicConfig(
        level=level,
        handlers=[logfire.LogfireLoggingHandler()],
        force=True,
    )

    for name, quiet_level in _QUIET_LOGGERS.items():
        logging.getLogger(name).setLevel(level if settings.debug else quiet_level)

    logging.getLogger(__name__).debug(
        "Logging configured for %s at %s",
        settings.environment,
        logging.getLevelName(level),
    )
