"""create clients, invoices, quotes, payment methods/statuses and payments

Revision ID: 3f9a1c7e2b40
Revises:
Create Date: 2026-10-18 10:00:00.000000

"""
from __future__ import annotations

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import UUID


# revision identifiers, used by Alembic.
revision = "3f9a1c7e2b40"
down_revision = None
branch_labels = None
depends_on = None


def _created(nullable: bool = True) -> sa.Column:
    return sa.Column(
        "created",
        sa.DateTime(timezone=True),
        server_default=sa.text("CURRENT_TIMESTAMP"),
        nullable=nullable,
    )


def upgrade() -> None:
    op.create_table(
        "clients",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("name", sa.String(125), nullable=False),
        sa.Column("currency", sa.String(3), nullable=True),
        _created(),
    )

    op.create_table(
        "invoices",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("client_id", UUID(as_uuid=True), sa.ForeignKey("clients.id"), nullable=False),
        sa.Column("status", sa.String(25), nullable=True),
        sa.Column("total", sa.Numeric(12, 2), nullable=False, server_default="0"),
        sa.Column("balance", sa.Numeric(12, 2), nullable=False, server_default="0"),
        sa.Column("due", sa.DateTime(timezone=True), nullable=True),
        _created(),
    )
    op.create_index("ix_invoices_client_id", "invoices", ["client_id"])

    op.create_table(
        "quotes",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("client_id", UUID(as_uuid=True), sa.ForeignKey("clients.id"), nullable=False),
        sa.Column("status", sa.String(25), nullable=True),
        sa.Column("total", sa.Numeric(12, 2), nullable=False, server_default="0"),
        sa.Column("terms", sa.Text(), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        _created(),
    )
    op.create_index("ix_quotes_client_id", "quotes", ["client_id"])

    op.create_table(
        "payment_methods",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("name", sa.String(125), nullable=False),
        sa.Column("payment_method", sa.String(125), nullable=False, unique=True),
    )

    op.create_table(
        "payment_statuses",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("name", sa.String(125), nullable=False, unique=True),
        sa.Column("label", sa.String(125), nullable=True),
    )

    op.create_table(
        "payments",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("invoice_id", UUID(as_uuid=True), sa.ForeignKey("invoices.id"), nullable=False),
        sa.Column("client_id", UUID(as_uuid=True), sa.ForeignKey("clients.id"), nullable=False),
        sa.Column("method_id", UUID(as_uuid=True), sa.ForeignKey("payment_methods.id"), nullable=False),
        sa.Column("status_id", UUID(as_uuid=True), sa.ForeignKey("payment_statuses.id"), nullable=False),
        sa.Column("amount", sa.Numeric(12, 2), nullable=False, server_default="0"),
        sa.Column("currency", sa.String(3), nullable=True),
        sa.Column("message", sa.Text(), nullable=True),
        sa.Column("completed", sa.DateTime(timezone=True), nullable=True),
        _created(nullable=False),
    )
    op.create_index("ix_payments_invoice_id", "payments", ["invoice_id"])
    op.create_index("ix_payments_client_id", "payments", ["client_id"])
    op.create_index("ix_payments_created", "payments", ["created"])


def downgrade() -> None:
    op.drop_index("ix_payments_created", table_name="payments")
    op.drop_index("ix_payments_client_id", table_name="payments")
    op.drop_index("ix_payments_invoice_id", table_name="payments")
    op.drop_table("payments")
    op.drop_table("payment_statuses")
    op.drop_table("payment_methods")
    op.drop_index("ix_quotes_client_id", table_name="quotes")
    op.drop_table("quotes")
    op.drop_index("ix_invoices_client_id", table_name="invoices")
    op.drop_table("invoices")
    op.drop_table("clients")
