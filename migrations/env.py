"""Alembic environment for algonote.

The database URL comes from Settings (DATABASE__URL), never from alembic.ini.
"""

import asyncio

from alembic import context
from sqlalchemy.engine import Connection

from algonote.config import Settings
from algonote.persistence.database import create_engine
from algonote.persistence.tables import metadata

config = context.config
target_metadata = metadata
settings = Settings()


def run_migrations_offline() -> None:
    """Emit SQL without a database connection."""
    context.configure(
        url=settings.database_url,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )

    with context.begin_transaction():
        context.run_migrations()


def do_run_migrations(connection: Connection) -> None:
    context.configure(connection=connection, target_metadata=target_metadata)

    with context.begin_transaction():
        context.run_migrations()


async def run_migrations_online() -> None:
    """Run migrations over the application's async engine."""
    engine = create_engine(settings)

    async with engine.connect() as connection:
        await connection.run_sync(do_run_migrations)

    await engine.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    asyncio.run(run_migrations_online())
