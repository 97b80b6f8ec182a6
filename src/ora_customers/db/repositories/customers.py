"""
ora_customers.db.repositories.customers

Repository for `Customer` entities.

Responsibilities:
- List, create, fetch and update customers.
- Leave uniqueness and non-null enforcement to the store.
"""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ora_customers.db.models import Customer


class CustomerRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def list_all(self) -> list[Customer]:
        stmt = select(Customer).order_by(Customer.id)
        return list((await self._session.execute(stmt)).scalars().all())

    async def create(self, *, name: str, email: str) -> Customer:
        # Flush so the store assigns id/timestamps (and rejects duplicates) now.
        customer = Customer(name=name, email=email)
        self._session.add(customer)
        await self._session.flush()
        return customer

    async def get(self, customer_id: int) -> Customer | None:
        return await self._session.get(Customer, customer_id)

    async def update(
        self,
        customer_id: int,
        *,
        name: str | None = None,
        email: str | None = None,
    ) -> Customer | None:
        customer = await self._session.get(Customer, customer_id)
        if customer is None:
            return None
        if name is not None:
            customer.name = name
        if email is not None:
            customer.email = email
        # updated_at is refreshed by the column's onupdate on flush.
        await self._session.flush()
        return customer
