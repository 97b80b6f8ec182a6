"""
ora_customers.db.gateway

Persistence gateway (the connection-owning context object).

Responsibilities:
- Open the engine and verify connectivity.
- Ensure the schema exists.
- Hand out sessions to handlers and front-ends.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from ora_customers.db.migrations import ensure_schema
from ora_customers.db.session import create_engine, create_sessionmaker, ping
from ora_customers.settings import Settings


class Gateway:
    """
    Owns the engine and session factory. One instance per process, passed to
    handlers via `app.state` rather than held in a module global.
    """

    def __init__(self, engine: AsyncEngine) -> None:
        self.engine = engine
        self.sessionmaker = create_sessionmaker(engine)

    @classmethod
    async def connect(cls, settings: Settings) -> Gateway:
        engine = create_engine(settings)
        try:
            await ping(engine)
        except BaseException:
            await engine.dispose()
            raise
        return cls(engine)

    async def ping(self) -> None:
        await ping(self.engine)

    async def ensure_schema(self) -> int:
        return await ensure_schema(self.engine)

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        async with self.sessionmaker() as session:
            yield session

    async def dispose(self) -> None:
        await self.engine.dispose()
