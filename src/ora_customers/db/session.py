"""
ora_customers.db.session

Async SQLAlchemy engine + session factory helpers.

Responsibilities:
- Build the python-oracledb connection descriptor from settings.
- Create the async engine and the async sessionmaker.
- Verify connectivity with a ping.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from sqlalchemy import literal_column, select
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from ora_customers.settings import Settings

# Credentials travel in connect_args, not in the URL.
ORACLE_URL = "oracle+oracledb://@"


def build_connect_args(settings: Settings) -> dict[str, Any]:
    """
    Connect arguments for python-oracledb.

    `lib_dir` points at an Oracle Instant Client; its `network/admin` directory
    holds the `tnsnames.ora` used to resolve connect-string aliases.
    """

    if settings.database_url:
        return {}
    args: dict[str, Any] = {
        "user": settings.user,
        "password": settings.password,
        "dsn": settings.connect_string,
    }
    if settings.lib_dir:
        args["config_dir"] = str(Path(settings.lib_dir) / "network" / "admin")
    return args


def create_engine(settings: Settings) -> AsyncEngine:
    # pool_pre_ping helps detect stale connections in long-lived processes.
    return create_async_engine(
        settings.database_url or ORACLE_URL,
        connect_args=build_connect_args(settings),
        pool_pre_ping=True,
    )


def create_sessionmaker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    # expire_on_commit=False avoids surprising lazy loads after commits.
    return async_sessionmaker(
        bind=engine,
        expire_on_commit=False,
        autoflush=False,
    )


async def ping(engine: AsyncEngine) -> None:
    # Renders as SELECT 1 FROM DUAL on Oracle. Driver errors propagate.
    async with engine.connect() as conn:
        await conn.execute(select(literal_column("1")))


# --- Module Notes -----------------------------------------------------------
# The API layer reaches the sessionmaker through `Gateway` (see `api.deps`).
