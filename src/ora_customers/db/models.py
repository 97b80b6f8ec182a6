"""
ora_customers.db.models

ORM entities.

Responsibilities:
- Map the `Customer` entity onto the `customers` table from `db.schema`.
"""

from __future__ import annotations

from ora_customers.db.base import Base
from ora_customers.db.schema import customers


class Customer(Base):
    # Columns: id, name, email, created_at, updated_at (see db.schema).
    __table__ = customers

    def __repr__(self) -> str:
        return f"Customer(id={self.id!r}, email={self.email!r})"
