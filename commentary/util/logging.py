"""Stdlib logging setup for scripts and library consumers.

Domain code reports through logfire; this only configures plain log
records (alembic, sqlalchemy, asyncpg) emitted next to it.
"""

import logging
import sys

from commentary.config import Settings

ENVIRONMENT_LEVELS = {
    "test": logging.WARNING,
    "development": logging.INFO,
    "staging": logging.INFO,
    "production": logging.WARNING,
}

# Noisy third-party loggers, capped regardless of environment
QUIET_LOGGERS = ("sqlalchemy.engine", "sqlalchemy.pool", "asyncpg")


def setup_logging(settings: Settings) -> None:
    """Configure root logging from settings.

    debug=True forces DEBUG for the commentary package only.

    Args:
        settings: Application settings
    """
    level = ENVIRONMENT_LEVELS.get(settings.environment, logging.INFO)

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    package_level = logging.DEBUG if settings.debug else level
    logging.getLogger("commentary").setLevel(package_level)

    logging.getLogger(__name__).info(
        "Logging configured: environment=%s, level=%s",
        settings.environment,
        logging.getLevelName(package_level),
    )
