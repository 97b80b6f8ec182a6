"""
tests.conftest

Shared fixtures: a file-backed SQLite store standing in for Oracle.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from pathlib import Path

import httpx
import pytest
import pytest_asyncio

from ora_customers.api.app import create_app
from ora_customers.db.gateway import Gateway
from ora_customers.settings import Settings

ORA_VARS = (
    "ORA_USER",
    "ORA_PASSWORD",
    "ORA_CONNECT_STRING",
    "ORA_LIB_DIR",
    "ORA_DATABASE_URL",
    "ORA_STATIC_DIR",
    "ORA_LOG_LEVEL",
)


def sqlite_url(path: Path) -> str:
    return f"sqlite+aiosqlite:///{path}"


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for var in ORA_VARS:
        monkeypatch.delenv(var, raising=False)
    return monkeypatch


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    web = tmp_path / "web"
    web.mkdir()
    (web / "index.html").write_text("<html><body>customers</body></html>")
    return Settings(
        user="scott",
        password="tiger",
        connect_string="localhost:1521/FREEPDB1",
        database_url=sqlite_url(tmp_path / "customers.db"),
        static_dir=str(web),
    )


@pytest_asyncio.fixture
async def gateway(settings: Settings) -> AsyncIterator[Gateway]:
    gw = await Gateway.connect(settings)
    await gw.ensure_schema()
    try:
        yield gw
    finally:
        await gw.dispose()


@pytest_asyncio.fixture
async def client(settings: Settings, gateway: Gateway) -> AsyncIterator[httpx.AsyncClient]:
    app = create_app(settings=settings, gateway=gateway)
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
