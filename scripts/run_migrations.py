#!/usr/bin/env python3
"""Upgrade the algonote schema to the latest alembic revision."""

import sys

import logfire
from alembic import command
from alembic.config import Config
from alembic.script import ScriptDirectory

from algonote.config import Settings
from algonote.util.logging import setup_logging
from algonote.util.observability import configure_logfire


def main() -> int:
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    alembic_cfg = Config("alembic.ini")
    head = ScriptDirectory.from_config(alembic_cfg).get_current_head()

    with logfire.span(
        "migrations.upgrade", environment=settings.environment, target=head
    ):
        try:
            command.upgrade(alembic_cfg, "head")
        except Exception as e:
            logfire.error(
                "Schema upgrade failed",
                target=head,
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # Fail the deploy rather than serve against a stale schema
            raise

    logfire.info("Schema at head", revision=head)
    return 0


if __name__ == "__main__":
    sys.exit(main())
