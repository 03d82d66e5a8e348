"""Domain entities for the per-business financial ledger."""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum

from .content import BusinessType


class TransactionType(str, Enum):
    INCOME = "income"
    EXPENSE = "expense"


class StockLevel(str, Enum):
    """Stock status of an inventory item relative to its minimum quantity."""

    LOW = "low"
    MEDIUM = "medium"
    NORMAL = "normal"


@dataclass(frozen=True)
class Transaction:
    """A single income or expense entry of one business."""

    id: str
    type: TransactionType
    category: str
    description: str
    amount: Decimal
    date: date
    business_type: BusinessType


@dataclass(frozen=True)
class InventoryItem:
    """A stocked product. ``last_updated`` is maintained by the ledger store only."""

    id: str
    name: str
    category: str
    quantity: int
    min_quantity: int
    unit_price: Decimal
    supplier: str
    last_updated: datetime
    business_type: BusinessType

    @property
    def stock_level(self) -> StockLevel:
        if self.quantity <= self.min_quantity:
            return StockLevel.LOW
        if self.quantity <= self.min_quantity * 2:
            return StockLevel.MEDIUM
        return StockLevel.NORMAL


@dataclass(frozen=True)
class FinancialSummary:
    """Derived totals for one business. Amounts keep full decimal precision."""

    total_income: Decimal
    total_expenses: Decimal
    profit: Decimal
    monthly_income: Decimal
    monthly_expenses: Decimal
