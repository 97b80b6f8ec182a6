"""
ora_customers.db

Persistence package (SQLAlchemy async, Oracle via python-oracledb).

Responsibilities:
- Provide the table definitions, ORM entity, migrations, engine/session setup,
  the gateway context object and repositories.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Nothing outside this package issues SQL; handlers and front-ends go through
# `Gateway` and `CustomerRepo`.
