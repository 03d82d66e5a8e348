"""Pure aggregation of transactions into a FinancialSummary."""

from collections.abc import Iterable
from datetime import date
from decimal import Decimal

from site_builder.domain.entities import FinancialSummary, Transaction, TransactionType


def summarize_transactions(
    transactions: Iterable[Transaction], as_of: date
) -> FinancialSummary:
    """Sum income and expenses overall and for the calendar month of ``as_of``.

    The caller filters by business beforehand. No rounding is applied.
    """
    totals = {TransactionType.INCOME: Decimal("0"), TransactionType.EXPENSE: Decimal("0")}
    monthly = {TransactionType.INCOME: Decimal("0"), TransactionType.EXPENSE: Decimal("0")}

    for transaction in transactions:
        totals[transaction.type] += transaction.amount
        if (transaction.date.year, transaction.date.month) == (as_of.year, as_of.month):
            monthly[transaction.type] += transaction.amount

    total_income = totals[TransactionType.INCOME]
    total_expenses = totals[TransactionType.EXPENSE]
    return FinancialSummary(
        total_income=total_income,
        total_expenses=total_expenses,
        profit=total_income - total_expenses,
        monthly_income=monthly[TransactionType.INCOME],
        monthly_expenses=monthly[TransactionType.EXPENSE],
    )
