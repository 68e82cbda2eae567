"""Stdlib logging setup for scripts and workers."""

import logging
import sys

from algonote.config import Settings

_LEVELS = {"production": logging.WARNING}


def _level_for(settings: Settings) -> int:
    if settings.debug:
        return logging.DEBUG
    return _LEVELS.get(settings.environment, logging.INFO)


def setup_logging(settings: Settings) -> None:
    """Route records to stdout at a level derived from the environment.

    ``debug`` wins over everything, production only reports warnings, any
    other environment logs at INFO. Migrations keep their INFO progress
    lines and the connection pool is held at WARNING because engine echo
    already covers SQL in debug mode.
    """
    level = _level_for(settings)

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )

    logging.getLogger("sqlalchemy.pool").setLevel(logging.WARNING)
    logging.getLogger("alembic").setLevel(logging.INFO)
    logging.getLogger("algonote").setLevel(level)

    logging.getLogger(__name__).info(
        "Logging configured: environment=%s, level=%s",
        settings.environment,
        logging.getLevelName(level),
    )
