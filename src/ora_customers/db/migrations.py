"""
ora_customers.db.migrations

Versioned, in-process schema migrations.

Responsibilities:
- Register ordered migration steps, each idempotent ("create if absent").
- Apply the steps newer than the version recorded in `schema_version`.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from sqlalchemy import Connection, func, insert, select
from sqlalchemy.ext.asyncio import AsyncEngine

from ora_customers.db.schema import customers, schema_version, utcnow
from ora_customers.observability.logging import get_logger

log = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Migration:
    version: int
    description: str
    apply: Callable[[Connection], None]


def _create_customers(conn: Connection) -> None:
    customers.create(conn, checkfirst=True)


MIGRATIONS: tuple[Migration, ...] = (
    Migration(1, "create customers table", _create_customers),
)

LATEST_VERSION = MIGRATIONS[-1].version


def current_version(conn: Connection) -> int:
    return conn.execute(select(func.max(schema_version.c.version))).scalar() or 0


def upgrade(conn: Connection, migrations: tuple[Migration, ...] = MIGRATIONS) -> int:
    schema_version.create(conn, checkfirst=True)
    version = current_version(conn)
    for m in migrations:
        if m.version <= version:
            continue
        log.info("migration_apply", version=m.version, description=m.description)
        m.apply(conn)
        conn.execute(
            insert(schema_version).values(
                version=m.version, description=m.description, applied_at=utcnow()
            )
        )
        version = m.version
    return version


async def ensure_schema(engine: AsyncEngine) -> int:
    """
    Bring the schema up to date and return the resulting version.
    Safe to call on every startup.
    """

    async with engine.begin() as conn:
        return await conn.run_sync(upgrade)


# --- Module Notes -----------------------------------------------------------
# Add new steps to MIGRATIONS with increasing versions; never edit an applied one.
# The Alembic environment under alembic/ mirrors these steps for out-of-band use.
