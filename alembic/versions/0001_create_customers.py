"""create customers table

Revision ID: 0001_create_customers
Revises:
"""

import sqlalchemy as sa

from alembic import op

revision = "0001_create_customers"
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    # The service creates this table itself on startup (ora_customers.db.migrations).
    if not op.get_context().as_sql and sa.inspect(op.get_bind()).has_table("customers"):
        return
    op.create_table(
        "customers",
        sa.Column("id", sa.Integer, sa.Identity(), primary_key=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("email", sa.String(200), nullable=False),
        sa.Column("created_at", sa.DateTime, nullable=False),
        sa.Column("updated_at", sa.DateTime, nullable=False),
        sa.UniqueConstraint("email", name="uq_customers_email"),
    )


def downgrade():
    op.drop_table("customers")
