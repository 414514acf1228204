# app/api/v1/routes/payments.py
"""
Payment endpoints: per-invoice and per-client listings, recent payments,
and the daily / monthly chart series.
"""

from __future__ import annotations

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.config.settings import settings
from app.core.db import get_db
from app.domain.services.payment_chart_service import PaymentChartService
from app.infrastructure.db.repositories.payment_repository import (
    InvalidPaymentQuery,
    PaymentRepository,
)

from app.api.v1.envelope import error, ok
from app.api.v1.schemas.payment import PaymentResponse, RecentPaymentResponse

logger = logging.getLogger("api.v1.payments")

router = APIRouter(prefix="/payments", tags=["Payments"])


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _bad_request(exc: InvalidPaymentQuery) -> HTTPException:
    logger.info("Rejected payment query: %s", exc)
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail=error(str(exc), errors=[{"type": "invalid_payment_query"}]),
    )


def _dump(rows, schema=PaymentResponse) -> list[dict]:
    return [schema.model_validate(r, from_attributes=True).model_dump(mode="json") for r in rows]


# ---------------------------------------------------------------------------
# Listings
# ---------------------------------------------------------------------------

@router.get("/invoice/{invoice_id}", response_model=dict)
async def payments_for_invoice(
    invoice_id: UUID,
    order_by: str | None = Query(default=None, description="created/amount/completed/id"),
    sort: str = Query(default="DESC", description="ASC or DESC"),
    db: AsyncSession = Depends(get_db),
):
    """All payments recorded against an invoice."""
    try:
        rows = await PaymentRepository(db).get_payments_for_invoice(invoice_id, order_by, sort)
    except InvalidPaymentQuery as exc:
        raise _bad_request(exc)
    return ok(data=_dump(rows))


@router.get("/client/{client_id}", response_model=dict)
async def payments_for_client(
    client_id: UUID,
    order_by: str | None = Query(default=None, description="created/amount/completed/id"),
    sort: str = Query(default="DESC", description="ASC or DESC"),
    db: AsyncSession = Depends(get_db),
):
    """All payments made by a client."""
    try:
        rows = await PaymentRepository(db).get_payments_for_client(client_id, order_by, sort)
    except InvalidPaymentQuery as exc:
        raise _bad_request(exc)
    return ok(data=_dump(rows))


@router.get("/recent", response_model=dict)
async def recent_payments(
    limit: int = Query(default=settings.RECENT_PAYMENTS_LIMIT, ge=1, le=100),
    db: AsyncSession = Depends(get_db),
):
    """Most recently created payments, newest first."""
    try:
        rows = await PaymentRepository(db).get_recent_payments(limit)
    except InvalidPaymentQuery as exc:
        raise _bad_request(exc)
    return ok(data=_dump(rows, RecentPaymentResponse))


# ---------------------------------------------------------------------------
# Charts
# ---------------------------------------------------------------------------

@router.get("/chart/daily", response_model=dict)
async def daily_chart(db: AsyncSession = Depends(get_db)):
    """``[[epoch_ms, "amount"], ...]`` for the last month, oldest day first."""
    points = await PaymentChartService(PaymentRepository(db)).daily_totals()
    return ok(data=[[millis, str(total)] for millis, total in points])


@router.get("/chart/monthly", response_model=dict)
async def monthly_chart(db: AsyncSession = Depends(get_db)):
    """``{"January 2021": "amount", ...}`` for the last year."""
    totals = await PaymentChartService(PaymentRepository(db)).monthly_totals()
    return ok(data={label: str(total) for label, total in totals.items()})
