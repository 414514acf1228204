# tests/test_payment_repository.py
"""Tests for PaymentRepository query construction and row mapping."""

import uuid
from datetime import datetime, timezone
from decimal import Decimal

import pytest

from app.domain.models.payment import PaymentFilter, PaymentRow
from app.infrastructure.db.repositories.payment_repository import (
    InvalidPaymentQuery,
    PaymentRepository,
)

INVOICE_ID = uuid.UUID("11111111-1111-1111-1111-111111111111")
CLIENT_ID = uuid.UUID("22222222-2222-2222-2222-222222222222")


def _listing_row(**overrides) -> dict:
    row = {
        "id": uuid.uuid4(),
        "amount": Decimal("120.00"),
        "currency": "USD",
        "created": datetime(2021, 1, 5, 9, 0, tzinfo=timezone.utc),
        "completed": datetime(2021, 1, 5, 9, 1, tzinfo=timezone.utc),
        "invoice": INVOICE_ID,
        "method": "Bank Transfer",
        "status": "captured",
        "status_label": "success",
        "message": None,
    }
    row.update(overrides)
    return row


# --------------------------------------------------------------------------- #
# Listings
# --------------------------------------------------------------------------- #

def test_payments_for_invoice_filters_and_orders(event_loop, make_db, executed_sql):
    db = make_db([_listing_row()])
    repo = PaymentRepository(db)

    rows = event_loop.run_until_complete(repo.get_payments_for_invoice(INVOICE_ID))

    assert len(rows) == 1
    assert isinstance(rows[0], PaymentRow)
    assert rows[0].method == "Bank Transfer"
    assert rows[0].invoice == INVOICE_ID

    sql = executed_sql(db)
    assert "JOIN payment_methods ON payments.method_id = payment_methods.id" in sql
    assert "JOIN payment_statuses ON payments.status_id = payment_statuses.id" in sql
    assert "JOIN invoices ON payments.invoice_id = invoices.id" in sql
    assert "WHERE payments.invoice_id = :" in sql
    assert "payment_statuses.label AS status_label" in sql
    assert sql.endswith("ORDER BY payments.created DESC")


def test_payments_for_client_custom_order(event_loop, make_db, executed_sql):
    db = make_db([])
    repo = PaymentRepository(db)

    rows = event_loop.run_until_complete(
        repo.get_payments_for_client(CLIENT_ID, order_by="amount", sort="asc")
    )

    assert rows == []
    sql = executed_sql(db)
    assert "WHERE payments.client_id = :" in sql
    assert sql.endswith("ORDER BY payments.amount ASC")


def test_aliased_order_field_is_accepted(event_loop, make_db, executed_sql):
    db = make_db([])
    event_loop.run_until_complete(
        PaymentRepository(db).get_payments_for_invoice(INVOICE_ID, order_by="p.completed")
    )
    assert executed_sql(db).endswith("ORDER BY payments.completed DESC")


def test_fetch_payments_combines_filters(event_loop, make_db, executed_sql):
    db = make_db([])
    criteria = PaymentFilter(
        invoice_id=INVOICE_ID,
        client_id=CLIENT_ID,
        created_from=datetime(2021, 1, 1, tzinfo=timezone.utc),
        limit=10,
    )

    event_loop.run_until_complete(PaymentRepository(db).fetch_payments(criteria))

    sql = executed_sql(db)
    assert "payments.invoice_id = :" in sql
    assert "payments.client_id = :" in sql
    assert "payments.created >= :" in sql
    assert " AND " in sql
    assert "LIMIT" in sql


def test_fetch_payments_without_filters_has_no_where(event_loop, make_db, executed_sql):
    db = make_db([])
    event_loop.run_until_complete(PaymentRepository(db).fetch_payments(PaymentFilter()))
    assert "WHERE" not in executed_sql(db)


def test_unknown_order_field_rejected_before_query(event_loop, make_db):
    db = make_db([])
    with pytest.raises(InvalidPaymentQuery):
        event_loop.run_until_complete(
            PaymentRepository(db).get_payments_for_invoice(INVOICE_ID, order_by="amount; DROP TABLE payments")
        )
    db.execute.assert_not_called()


def test_invalid_sort_direction_rejected(event_loop, make_db):
    db = make_db([])
    with pytest.raises(InvalidPaymentQuery):
        event_loop.run_until_complete(
            PaymentRepository(db).get_payments_for_client(CLIENT_ID, sort="sideways")
        )
    db.execute.assert_not_called()


def test_invalid_payment_query_is_value_error():
    assert issubclass(InvalidPaymentQuery, ValueError)


# --------------------------------------------------------------------------- #
# Recent payments
# --------------------------------------------------------------------------- #

def test_recent_payments_joins_client_and_limits(event_loop, make_db, executed_sql):
    db = make_db([_listing_row(client="Acme Ltd", client_id=CLIENT_ID)])

    rows = event_loop.run_until_complete(PaymentRepository(db).get_recent_payments(limit=3))

    assert rows[0].client == "Acme Ltd"
    assert rows[0].client_id == CLIENT_ID

    stmt = db.execute.call_args.args[0]
    sql = executed_sql(db)
    assert "clients.name AS client" in sql
    assert "clients.id AS client_id" in sql
    assert "JOIN clients ON payments.client_id = clients.id" in sql
    assert "ORDER BY payments.created DESC" in sql
    assert 3 in stmt.compile().params.values()


def test_recent_payments_rejects_non_positive_limit(event_loop, make_db):
    db = make_db([])
    with pytest.raises(InvalidPaymentQuery):
        event_loop.run_until_complete(PaymentRepository(db).get_recent_payments(limit=0))
    db.execute.assert_not_called()


# --------------------------------------------------------------------------- #
# Chart feed
# --------------------------------------------------------------------------- #

def test_payments_since_selects_amount_and_created(event_loop, make_db, executed_sql, sample_chart_rows):
    db = make_db(sample_chart_rows)
    since = datetime(2020, 12, 1, tzinfo=timezone.utc)

    rows = event_loop.run_until_complete(PaymentRepository(db).get_payments_since(since))

    assert [r.amount for r in rows] == [Decimal("10.00"), Decimal("5.00"), Decimal("3.00")]
    assert all(r.method is None for r in rows)

    sql = executed_sql(db)
    assert sql.startswith("SELECT payments.amount, payments.created FROM payments")
    assert "payments.created >= :" in sql
    assert "GROUP BY" not in sql
    assert sql.endswith("ORDER BY payments.created ASC")


def test_listing_currency_falls_back_to_default(event_loop, make_db, executed_sql):
    from app.config.settings import settings

    db = make_db([_listing_row(currency=settings.DEFAULT_CURRENCY)])
    rows = event_loop.run_until_complete(PaymentRepository(db).get_payments_for_invoice(INVOICE_ID))

    assert rows[0].currency == settings.DEFAULT_CURRENCY
    stmt = db.execute.call_args.args[0]
    assert "coalesce(payments.currency, :" in executed_sql(db)
    assert settings.DEFAULT_CURRENCY in stmt.compile().params.values()


def test_payment_created_column_is_not_nullable():
    """Listing rows require ``created``, so the column must never hold NULL."""
    from app.infrastructure.db.models import Payment

    assert Payment.__table__.c.created.nullable is False
