"""
alembic.env

Alembic migration environment configuration.

Responsibilities:
- Provide metadata discovery for autogeneration.
- Configure offline/online migration execution against the configured store.

Notes:
- This module is executed by Alembic, not imported by the service runtime.
- Connection settings come from the same `ORA_*` environment as the service.
"""

from __future__ import annotations

import asyncio
from logging.config import fileConfig

from alembic import context
from sqlalchemy import Connection

from ora_customers.db import models  # noqa: F401  # ensure models are registered on Base.metadata
from ora_customers.db.base import Base
from ora_customers.db.session import ORACLE_URL, create_engine
from ora_customers.settings import load_settings

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata

# schema_version belongs to the in-process migrations, not to Alembic.
MANAGED_TABLES = frozenset({"customers"})


def include_object(obj, name, type_, reflected, compare_to) -> bool:
    if type_ == "table":
        return name in MANAGED_TABLES
    return True


def run_migrations_offline() -> None:
    # Offline: emit Oracle DDL without a DB connection.
    context.configure(
        url=ORACLE_URL,
        target_metadata=target_metadata,
        include_object=include_object,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )
    with context.begin_transaction():
        context.run_migrations()


def _run_sync(connection: Connection) -> None:
    context.configure(
        connection=connection,
        target_metadata=target_metadata,
        include_object=include_object,
    )
    with context.begin_transaction():
        context.run_migrations()


async def run_migrations_online() -> None:
    engine = create_engine(load_settings())
    try:
        async with engine.connect() as connection:
            await connection.run_sync(_run_sync)
    finally:
        await engine.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    asyncio.run(run_migrations_online())


# --- Module Notes -----------------------------------------------------------
# Keep revisions aligned with `ora_customers.db.migrations.MIGRATIONS`.
