"""
ora_customers.api.deps

FastAPI dependency wiring for the API layer.

Responsibilities:
- Provide dependency functions for settings, the gateway and DB sessions.
- Encapsulate app.state access patterns.
"""

from __future__ import annotations

from collections.abc import AsyncIterator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from ora_customers.db.gateway import Gateway
from ora_customers.settings import Settings


def settings_dep(request: Request) -> Settings:
    return request.app.state.settings  # type: ignore[attr-defined]


def gateway_dep(request: Request) -> Gateway:
    # The gateway is attached in `ora_customers.api.app.create_app`.
    return request.app.state.gateway  # type: ignore[attr-defined]


async def db_session(gateway: Gateway = Depends(gateway_dep)) -> AsyncIterator[AsyncSession]:
    # Request-scoped DB session. Commit/rollback is explicit in the handlers.
    async with gateway.session() as session:
        yield session
