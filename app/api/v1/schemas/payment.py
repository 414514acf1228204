# app/api/v1/schemas/payment.py
"""Pydantic schemas for payment listing and chart endpoints."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict


class PaymentResponse(BaseModel):
    """Single payment in a listing."""
    model_config = ConfigDict(from_attributes=True)

    id: UUID | None = None
    amount: Decimal
    currency: str | None = None
    created: datetime
    completed: datetime | None = None
    invoice: UUID | None = None
    method: str | None = None
    status: str | None = None
    status_label: str | None = None
    message: str | None = None


class RecentPaymentResponse(PaymentResponse):
    """Payment with the paying client attached (dashboard widget)."""
    client: str | None = None
    client_id: UUID | None = None
