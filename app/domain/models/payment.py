from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class SortDirection(str, Enum):
    ASC = "ASC"
    DESC = "DESC"


class PaymentOrderField(str, Enum):
    CREATED = "created"
    AMOUNT = "amount"
    COMPLETED = "completed"
    ID = "id"


class PaymentFilter(BaseModel):
    """Criteria for a payment listing query. Unset filters are not applied."""

    invoice_id: Optional[UUID] = None
    client_id: Optional[UUID] = None
    created_from: Optional[datetime] = None
    order_by: Optional[str] = None
    sort: str = SortDirection.DESC.value
    limit: Optional[int] = None


class PaymentRow(BaseModel):
    """One payment as returned by the query layer.

    Only ``amount`` and ``created`` are needed for period aggregation; the
    descriptive fields are filled for listing queries and left ``None`` for
    the chart feed.
    """

    model_config = ConfigDict(from_attributes=True)

    amount: Decimal = Field(default=Decimal("0"))
    created: datetime

    id: Optional[UUID] = None
    currency: Optional[str] = None
    completed: Optional[datetime] = None
    invoice: Optional[UUID] = None
    method: Optional[str] = None
    status: Optional[str] = None
    status_label: Optional[str] = None
    message: Optional[str] = None
    client: Optional[str] = None
    client_id: Optional[UUID] = None
