"""Shared test fixtures for the payments test suite."""

import asyncio
from datetime import datetime, timezone
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

import pytest


@pytest.fixture(scope="session")
def event_loop():
    """Use a single event loop for the entire test session."""
    loop = asyncio.new_event_loop()
    yield loop
    loop.close()


def _make_db(rows: list[dict] | None = None) -> AsyncMock:
    """AsyncSession stand-in whose ``execute`` yields ``rows`` as mappings."""
    result = MagicMock()
    result.mappings.return_value.all.return_value = list(rows or [])
    db = AsyncMock()
    db.execute = AsyncMock(return_value=result)
    return db


def _executed_sql(db: AsyncMock) -> str:
    """SQL text of the last statement passed to ``db.execute``."""
    stmt = db.execute.call_args.args[0]
    return " ".join(str(stmt).split())


@pytest.fixture
def sample_chart_rows() -> list[dict]:
    """Three payments over two days, as the chart feed returns them."""
    return [
        {"amount": Decimal("10.00"), "created": datetime(2021, 1, 1, 8, 0, tzinfo=timezone.utc)},
        {"amount": Decimal("5.00"), "created": datetime(2021, 1, 1, 20, 0, tzinfo=timezone.utc)},
        {"amount": Decimal("3.00"), "created": datetime(2021, 1, 2, 0, 0, tzinfo=timezone.utc)},
    ]


@pytest.fixture
def make_db():
    return _make_db


@pytest.fixture
def executed_sql():
    return _executed_sql
