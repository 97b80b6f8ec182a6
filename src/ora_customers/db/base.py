"""
ora_customers.db.base

SQLAlchemy declarative base.

Responsibilities:
- Provide a shared DeclarativeBase bound to the explicit schema metadata.
"""

from __future__ import annotations

from sqlalchemy.orm import DeclarativeBase

from ora_customers.db.schema import metadata


class Base(DeclarativeBase):
    metadata = metadata
