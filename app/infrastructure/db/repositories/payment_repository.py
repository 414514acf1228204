# app/infrastructure/db/repositories/payment_repository.py
"""Repository for payment listings and the chart feed."""

from __future__ import annotations

import logging
import uuid
from datetime import datetime

from sqlalchemy import Select, and_, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.config.settings import settings
from app.domain.models.payment import (
    PaymentFilter,
    PaymentOrderField,
    PaymentRow,
    SortDirection,
)
from app.infrastructure.db.models import Client, Invoice, Payment, PaymentMethod, PaymentStatus

logger = logging.getLogger("payment_repository")

_ORDER_COLUMNS = {
    PaymentOrderField.CREATED: Payment.created,
    PaymentOrderField.AMOUNT: Payment.amount,
    PaymentOrderField.COMPLETED: Payment.completed,
    PaymentOrderField.ID: Payment.id,
}


class InvalidPaymentQuery(ValueError):
    """Raised when ordering, sort direction or limit arguments are not accepted."""


class PaymentRepository:
    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    # ---------- small helpers ----------

    @staticmethod
    def _order_clause(order_by: str | None, sort: str | None):
        field = (order_by or PaymentOrderField.CREATED.value).strip().lower()
        # accept the aliased form ("p.created") callers used to pass
        if field.startswith("p."):
            field = field[2:]
        try:
            column = _ORDER_COLUMNS[PaymentOrderField(field)]
        except ValueError:
            raise InvalidPaymentQuery(f"Cannot order payments by {order_by!r}") from None

        direction = (sort or SortDirection.DESC.value).strip().upper()
        if direction == SortDirection.ASC.value:
            return column.asc()
        if direction == SortDirection.DESC.value:
            return column.desc()
        raise InvalidPaymentQuery(f"Invalid sort direction {sort!r}, expected ASC or DESC")

    @staticmethod
    def _check_limit(limit: int | None) -> None:
        if limit is not None and limit < 1:
            raise InvalidPaymentQuery(f"Limit must be a positive integer, got {limit!r}")

    @staticmethod
    def _listing_query() -> Select:
        """Base listing projection: payment fields plus invoice, method and status."""
        return (
            select(
                Payment.id,
                Payment.amount,
                func.coalesce(Payment.currency, settings.DEFAULT_CURRENCY).label("currency"),
                Payment.created,
                Payment.completed,
                Invoice.id.label("invoice"),
                PaymentMethod.name.label("method"),
                PaymentStatus.name.label("status"),
                PaymentStatus.label.label("status_label"),
                Payment.message,
            )
            .join(PaymentMethod, Payment.method_id == PaymentMethod.id)
            .join(PaymentStatus, Payment.status_id == PaymentStatus.id)
            .join(Invoice, Payment.invoice_id == Invoice.id)
        )

    async def _rows(self, stmt: Select) -> list[PaymentRow]:
        result = await self.db.execute(stmt)
        return [PaymentRow.model_validate(dict(m)) for m in result.mappings().all()]

    # ---------- main methods ----------

    async def fetch_payments(self, criteria: PaymentFilter) -> list[PaymentRow]:
        """
        Return listing rows matching ``criteria``.

        Filters combine with AND; ``created_from`` is inclusive. Ordering
        defaults to ``created DESC``.
        """
        order = self._order_clause(criteria.order_by, criteria.sort)
        self._check_limit(criteria.limit)

        conditions = []
        if criteria.invoice_id is not None:
            conditions.append(Payment.invoice_id == criteria.invoice_id)
        if criteria.client_id is not None:
            conditions.append(Payment.client_id == criteria.client_id)
        if criteria.created_from is not None:
            conditions.append(Payment.created >= criteria.created_from)

        stmt = self._listing_query()
        if conditions:
            stmt = stmt.where(and_(*conditions))
        stmt = stmt.order_by(order)
        if criteria.limit is not None:
            stmt = stmt.limit(criteria.limit)

        rows = await self._rows(stmt)
        logger.debug("Fetched %d payments for %s", len(rows), criteria.model_dump(exclude_none=True))
        return rows

    async def get_payments_for_invoice(
        self,
        invoice_id: uuid.UUID,
        order_by: str | None = None,
        sort: str = "DESC",
    ) -> list[PaymentRow]:
        """All payments for an invoice."""
        return await self.fetch_payments(
            PaymentFilter(invoice_id=invoice_id, order_by=order_by, sort=sort)
        )

    async def get_payments_for_client(
        self,
        client_id: uuid.UUID,
        order_by: str | None = None,
        sort: str = "DESC",
    ) -> list[PaymentRow]:
        """All payments for a client."""
        return await self.fetch_payments(
            PaymentFilter(client_id=client_id, order_by=order_by, sort=sort)
        )

    async def get_recent_payments(self, limit: int = 5) -> list[PaymentRow]:
        """
        Most recently created payments, newest first, with the client's
        name and id added to the listing projection.
        """
        self._check_limit(limit)
        stmt = (
            self._listing_query()
            .add_columns(Client.name.label("client"), Client.id.label("client_id"))
            .join(Client, Payment.client_id == Client.id)
            .order_by(Payment.created.desc())
            .limit(limit)
        )
        return await self._rows(stmt)

    async def get_payments_since(self, created_from: datetime) -> list[PaymentRow]:
        """
        Chart feed: ``amount`` and ``created`` of every payment created at or
        after ``created_from``, oldest first.

        Payments without a method or status are excluded by the inner joins.
        """
        stmt = (
            select(Payment.amount, Payment.created)
            .join(PaymentMethod, Payment.method_id == PaymentMethod.id)
            .join(PaymentStatus, Payment.status_id == PaymentStatus.id)
            .where(Payment.created >= created_from)
            .order_by(Payment.created.asc())
        )
        return await self._rows(stmt)
