# app/domain/services/payment_chart_service.py
"""
Dashboard chart data: payment totals for the last month (per day) and the
last year (per month).
"""

from __future__ import annotations

import calendar
import logging
from datetime import datetime, timezone
from decimal import Decimal

from app.domain.services.payment_aggregation import aggregate_by_day, aggregate_by_month
from app.infrastructure.db.repositories.payment_repository import PaymentRepository

logger = logging.getLogger("payment_chart_service")


def shift_months(moment: datetime, months: int) -> datetime:
    """
    Move ``moment`` by ``months`` calendar months, clamping the day to the
    length of the target month (Mar 31 - 1 month -> Feb 28/29).
    """
    index = moment.year * 12 + (moment.month - 1) + months
    year, month = divmod(index, 12)
    month += 1
    day = min(moment.day, calendar.monthrange(year, month)[1])
    return moment.replace(year=year, month=month, day=day)


class PaymentChartService:
    def __init__(self, repository: PaymentRepository) -> None:
        self.repository = repository

    @staticmethod
    def _now(now: datetime | None) -> datetime:
        return now if now is not None else datetime.now(timezone.utc)

    async def daily_totals(self, now: datetime | None = None) -> list[tuple[int, Decimal]]:
        """Per-day totals for payments created within one month of ``now``."""
        window_start = shift_months(self._now(now), -1)
        rows = await self.repository.get_payments_since(window_start)
        points = aggregate_by_day(rows, window_start)
        logger.info("Daily payment chart: %d points since %s", len(points), window_start.date())
        return points

    async def monthly_totals(self, now: datetime | None = None) -> dict[str, Decimal]:
        """Per-month totals for payments created within one year of ``now``."""
        window_start = shift_months(self._now(now), -12)
        rows = await self.repository.get_payments_since(window_start)
        totals = aggregate_by_month(rows)
        logger.info("Monthly payment chart: %d months since %s", len(totals), window_start.date())
        return totals
