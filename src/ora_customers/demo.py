"""
ora_customers.demo

One-shot CRUD demonstration via `python -m ora_customers.demo`.

Responsibilities:
- Run the shared startup sequence.
- Create, fetch, update and list customers through the same repository the
  HTTP handlers use, logging each step, then exit.
"""

from __future__ import annotations

import asyncio
import uuid

from sqlalchemy.exc import SQLAlchemyError

from ora_customers.db.gateway import Gateway
from ora_customers.db.models import Customer
from ora_customers.db.repositories.customers import CustomerRepo
from ora_customers.observability.logging import configure_logging, get_logger
from ora_customers.settings import DEFAULT_SERVICE_NAME
from ora_customers.startup import bootstrap

log = get_logger(__name__)


async def run_demo(gateway: Gateway, *, email: str | None = None) -> Customer:
    # A fresh address per run keeps the demo repeatable against the unique index.
    email = email or f"demo+{uuid.uuid4().hex[:8]}@example.com"

    async with gateway.session() as session:
        repo = CustomerRepo(session)

        created = await repo.create(name="Demo Customer", email=email)
        await session.commit()
        log.info("demo_created", customer_id=created.id, email=created.email)

        fetched = await repo.get(created.id)
        if fetched is None:
            raise LookupError(f"customer {created.id} not found after insert")
        log.info("demo_fetched", customer_id=fetched.id, name=fetched.name)

        updated = await repo.update(created.id, name="Demo Customer (updated)")
        if updated is None:
            raise LookupError(f"customer {created.id} disappeared before update")
        await session.commit()
        log.info(
            "demo_updated",
            customer_id=updated.id,
            name=updated.name,
            updated_at=updated.updated_at.isoformat(),
        )

        everyone = await repo.list_all()
        log.info("demo_listed", count=len(everyone), emails=[c.email for c in everyone])

    return updated


async def run() -> int:
    result = await bootstrap()
    if not result.ok:
        return result.exit_code
    gateway = result.gateway
    assert gateway is not None
    try:
        await run_demo(gateway)
    except (SQLAlchemyError, LookupError) as exc:
        log.error("demo_failed", error=str(exc))
        return 1
    finally:
        await gateway.dispose()
    return 0


def main() -> None:
    configure_logging(service_name=DEFAULT_SERVICE_NAME)
    raise SystemExit(asyncio.run(run()))


if __name__ == "__main__":
    main()
