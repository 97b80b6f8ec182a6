"""
ora_customers.db.schema

Explicit table definitions.

Responsibilities:
- Own the column definitions for every table this service creates.
- Keep them independent of the ORM entity so they can be inspected and tested
  on their own.
"""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import (
    Column,
    DateTime,
    Identity,
    Integer,
    MetaData,
    String,
    Table,
    UniqueConstraint,
)

NAME_MAX_LENGTH = 100
EMAIL_MAX_LENGTH = 200


def utcnow() -> datetime:
    # Naive UTC; Oracle TIMESTAMP and SQLite both store it as-is.
    return datetime.now(timezone.utc).replace(tzinfo=None)


metadata = MetaData()

# Lowercase names are case-insensitive in SQLAlchemy; Oracle stores them as
# CUSTOMERS / SCHEMA_VERSION.
customers = Table(
    "customers",
    metadata,
    Column("id", Integer, Identity(), primary_key=True),
    Column("name", String(NAME_MAX_LENGTH), nullable=False),
    Column("email", String(EMAIL_MAX_LENGTH), nullable=False),
    Column("created_at", DateTime, nullable=False, default=utcnow),
    Column("updated_at", DateTime, nullable=False, default=utcnow, onupdate=utcnow),
    UniqueConstraint("email", name="uq_customers_email"),
)

schema_version = Table(
    "schema_version",
    metadata,
    Column("version", Integer, primary_key=True, autoincrement=False),
    Column("description", String(200), nullable=False),
    Column("applied_at", DateTime, nullable=False),
)
