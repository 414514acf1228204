# app/domain/services/payment_aggregation.py
"""
Payment totals bucketed by calendar period, for the dashboard charts.

Pure Python, no DB dependency: rows arrive already filtered to a time window
by ``PaymentRepository.get_payments_since``. Works with ``PaymentRow``
objects or plain dicts carrying ``amount`` and ``created``.
"""

from __future__ import annotations

import logging
from datetime import date, datetime, timezone
from decimal import Decimal, InvalidOperation
from collections.abc import Iterable, Mapping
from typing import Any

logger = logging.getLogger("payment_aggregation")

_MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _to_decimal(value: Any) -> Decimal:
    """Convert float/str/int/Decimal/None to Decimal without binary-float drift."""
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    try:
        return Decimal(str(value))
    except (InvalidOperation, TypeError, ValueError) as exc:
        raise ValueError(f"Invalid payment amount: {value!r}") from exc


def _fields(row: Any) -> tuple[Decimal, datetime]:
    if isinstance(row, Mapping):
        return _to_decimal(row.get("amount")), row["created"]
    return _to_decimal(row.amount), row.created


def _day_start_millis(day: date) -> int:
    midnight = datetime(day.year, day.month, day.day, tzinfo=timezone.utc)
    return int(midnight.timestamp()) * 1000


def month_label(moment: date) -> str:
    """``"January 2021"`` style label, independent of the process locale."""
    return f"{_MONTH_NAMES[moment.month - 1]} {moment.year:04d}"


# ---------------------------------------------------------------------------
# Aggregation
# ---------------------------------------------------------------------------

def aggregate_by_day(
    rows: Iterable[Any],
    window_start: datetime | None = None,
) -> list[tuple[int, Decimal]]:
    """
    Sum payment amounts per calendar day.

    Each row's ``created`` is truncated to its date (in the timestamp's own
    timezone). Returns ``(epoch_millis_of_utc_midnight, total)`` pairs in
    ascending date order, the shape the charting library expects.

    ``window_start`` is the lower bound the query layer applied; rows are not
    re-filtered against it.
    """
    totals: dict[date, Decimal] = {}
    count = 0
    for row in rows:
        amount, created = _fields(row)
        day = created.date()
        totals[day] = totals.get(day, Decimal("0")) + amount
        count += 1

    logger.debug(
        "Aggregated %d payments into %d daily buckets (window start %s)",
        count,
        len(totals),
        window_start.isoformat() if window_start else "n/a",
    )

    return [(_day_start_millis(day), totals[day]) for day in sorted(totals)]


def aggregate_by_month(rows: Iterable[Any]) -> dict[str, Decimal]:
    """
    Sum payment amounts per calendar month, keyed ``"<Month> <Year>"``.

    Keys keep the order in which months are first seen in ``rows``; the
    result is not re-sorted.
    """
    totals: dict[str, Decimal] = {}
    count = 0
    for row in rows:
        amount, created = _fields(row)
        key = month_label(created)
        totals[key] = totals.get(key, Decimal("0")) + amount
        count += 1

    logger.debug("Aggregated %d payments into %d monthly buckets", count, len(totals))
    return totals
