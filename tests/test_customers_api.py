"""
tests.test_customers_api

HTTP behavior of /api/customers.
"""

from __future__ import annotations

from pathlib import Path

import httpx
import pytest
from sqlalchemy import func, select

from ora_customers.api.app import create_app
from ora_customers.db.gateway import Gateway
from ora_customers.db.models import Customer
from ora_customers.db.repositories.customers import CustomerRepo
from ora_customers.db.schema import customers
from ora_customers.settings import Settings


async def _count(gateway: Gateway, email: str | None = None) -> int:
    stmt = select(func.count()).select_from(Customer)
    if email is not None:
        stmt = stmt.where(Customer.email == email)
    async with gateway.session() as session:
        return (await session.execute(stmt)).scalar_one()


@pytest.mark.asyncio
async def test_list_empty(client: httpx.AsyncClient) -> None:
    r = await client.get("/api/customers")
    assert r.status_code == 200
    assert r.json() == []


@pytest.mark.asyncio
async def test_create_returns_populated_customer(client: httpx.AsyncClient) -> None:
    r = await client.post("/api/customers", json={"name": "Ada", "email": "ada@example.com"})
    assert r.status_code == 201
    body = r.json()
    assert body["id"] > 0
    assert body["name"] == "Ada"
    assert body["email"] == "ada@example.com"
    assert body["createdAt"]
    assert body["updatedAt"]
    assert set(body) == {"id", "name", "email", "createdAt", "updatedAt"}


@pytest.mark.asyncio
async def test_create_trims_whitespace(client: httpx.AsyncClient) -> None:
    r = await client.post(
        "/api/customers", json={"name": "  Grace  ", "email": " grace@example.com\n"}
    )
    assert r.status_code == 201
    assert r.json()["name"] == "Grace"
    assert r.json()["email"] == "grace@example.com"


@pytest.mark.asyncio
async def test_duplicate_email_rejected(client: httpx.AsyncClient, gateway: Gateway) -> None:
    first = await client.post("/api/customers", json={"name": "One", "email": "dup@x.com"})
    assert first.status_code == 201

    second = await client.post("/api/customers", json={"name": "Two", "email": "dup@x.com"})
    assert second.status_code == 400
    assert second.json()["error"]

    assert await _count(gateway, "dup@x.com") == 1

    # The failed write must not poison later requests.
    third = await client.post("/api/customers", json={"name": "Three", "email": "ok@x.com"})
    assert third.status_code == 201


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "payload",
    [
        {"name": "  ", "email": "a@b.com"},
        {"name": "Ada", "email": ""},
        {"name": "Ada"},
        {"email": "a@b.com"},
        {"name": "x" * 101, "email": "a@b.com"},
    ],
)
async def test_invalid_body_rejected(
    client: httpx.AsyncClient, gateway: Gateway, payload: dict[str, str]
) -> None:
    r = await client.post("/api/customers", json=payload)
    assert r.status_code == 400
    assert isinstance(r.json()["error"], str)
    assert await _count(gateway) == 0


@pytest.mark.asyncio
async def test_malformed_json_rejected(client: httpx.AsyncClient) -> None:
    r = await client.post(
        "/api/customers",
        content='{"name":',
        headers={"Content-Type": "application/json"},
    )
    assert r.status_code == 400
    assert r.json() == {"error": "invalid JSON body"}


@pytest.mark.asyncio
async def test_list_is_ordered_by_id(client: httpx.AsyncClient) -> None:
    await client.post("/api/customers", json={"name": "A", "email": "a@x.com"})
    await client.post("/api/customers", json={"name": "B", "email": "b@x.com"})

    r = await client.get("/api/customers")
    assert r.status_code == 200
    body = r.json()
    assert [c["email"] for c in body] == ["a@x.com", "b@x.com"]
    assert body[0]["id"] < body[1]["id"]


@pytest.mark.asyncio
async def test_other_methods_not_allowed(client: httpx.AsyncClient) -> None:
    for method in ("PUT", "DELETE", "PATCH"):
        r = await client.request(method, "/api/customers")
        assert r.status_code == 405
        assert "error" in r.json()


@pytest.mark.asyncio
async def test_list_store_failure_is_500(client: httpx.AsyncClient, gateway: Gateway) -> None:
    async with gateway.engine.begin() as conn:
        await conn.run_sync(customers.drop)

    r = await client.get("/api/customers")
    assert r.status_code == 500
    assert r.json()["error"]

    # Liveness does not depend on the store.
    r = await client.get("/healthz")
    assert r.status_code == 200


@pytest.mark.asyncio
async def test_timestamps_carry_utc_offset(client: httpx.AsyncClient) -> None:
    r = await client.post("/api/customers", json={"name": "Tz", "email": "tz@example.com"})
    body = r.json()
    assert body["createdAt"].endswith("Z")
    assert body["updatedAt"].endswith("Z")

    listed = (await client.get("/api/customers")).json()
    assert listed[0]["createdAt"].endswith("Z")


@pytest.mark.asyncio
async def test_unexpected_error_is_json_500(
    settings: Settings, gateway: Gateway, monkeypatch: pytest.MonkeyPatch
) -> None:
    async def _broken(self: CustomerRepo) -> list[Customer]:
        raise RuntimeError("not a store error")

    monkeypatch.setattr(CustomerRepo, "list_all", _broken)
    app = create_app(settings=settings, gateway=gateway)
    # The server-error handler responds and then re-raises for the server to log.
    transport = httpx.ASGITransport(app=app, raise_app_exceptions=False)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        r = await c.get("/api/customers")

    assert r.status_code == 500
    assert r.headers["content-type"].startswith("application/json")
    assert r.json() == {"error": "internal server error"}


@pytest.mark.asyncio
async def test_markup_in_names_is_stored_verbatim(client: httpx.AsyncClient) -> None:
    name = "<img src=x onerror=alert(1)>"
    r = await client.post("/api/customers", json={"name": name, "email": "x@x.com"})
    assert r.status_code == 201
    assert (await client.get("/api/customers")).json()[0]["name"] == name


def test_web_page_renders_customers_as_text() -> None:
    page = (Path(__file__).resolve().parents[1] / "web" / "index.html").read_text()
    assert "innerHTML" not in page
    assert "li.textContent" in page
