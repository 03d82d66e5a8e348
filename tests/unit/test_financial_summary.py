"""Unit tests for the pure transaction aggregation."""

from datetime import date
from decimal import Decimal

from site_builder.application.services import summarize_transactions
from site_builder.domain.entities import BusinessType, Transaction, TransactionType


def _tx(kind: TransactionType, amount: str, on: date) -> Transaction:
    return Transaction(
        id=f"{kind.value}-{amount}-{on.isoformat()}",
        type=kind,
        category="Outros",
        description="",
        amount=Decimal(amount),
        date=on,
        business_type=BusinessType.BARBERSHOP,
    )


def test_empty_ledger_sums_to_zero():
    summary = summarize_transactions([], date(2026, 10, 1))

    assert summary.total_income == 0
    assert summary.total_expenses == 0
    assert summary.profit == 0
    assert summary.monthly_income == 0
    assert summary.monthly_expenses == 0


def test_profit_may_be_negative():
    summary = summarize_transactions(
        [
            _tx(TransactionType.INCOME, "50", date(2026, 10, 1)),
            _tx(TransactionType.EXPENSE, "120.50", date(2026, 10, 2)),
        ],
        date(2026, 10, 10),
    )
    assert summary.profit == Decimal("-70.50")


def test_monthly_figures_match_year_and_month():
    summary = summarize_transactions(
        [
            _tx(TransactionType.INCOME, "10", date(2026, 10, 31)),
            _tx(TransactionType.INCOME, "20", date(2026, 11, 1)),
            _tx(TransactionType.INCOME, "40", date(2025, 10, 15)),
            _tx(TransactionType.EXPENSE, "5", date(2026, 10, 1)),
        ],
        date(2026, 10, 1),
    )

    assert summary.total_income == Decimal("70")
    assert summary.monthly_income == Decimal("10")
    assert summary.monthly_expenses == Decimal("5")


def test_decimal_amounts_add_exactly():
    summary = summarize_transactions(
        [
            _tx(TransactionType.INCOME, "0.1", date(2026, 10, 1)),
            _tx(TransactionType.INCOME, "0.2", date(2026, 10, 2)),
        ],
        date(2026, 10, 3),
    )
    assert summary.total_income == Decimal("0.3")
