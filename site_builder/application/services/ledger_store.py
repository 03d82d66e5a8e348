"""Application service for the per-business ledger: transactions and inventory.

Each collection is persisted as one blob and rewritten on every mutation.
Unknown ids on update/delete are reported as a no-op (None / False),
never as an error.
"""

import logging
from collections.abc import Callable, Mapping
from dataclasses import replace
from datetime import date, datetime, timezone, tzinfo
from typing import Any
from uuid import uuid4

from site_builder.application.interfaces import KeyValueStorage
from site_builder.application.schemas import (
    InventoryItemCreate,
    InventoryItemUpdate,
    TransactionCreate,
    TransactionUpdate,
    parse_payload,
)
from site_builder.domain.entities import (
    BusinessType,
    EditCapability,
    FinancialSummary,
    InventoryItem,
    StockLevel,
    Transaction,
    TransactionType,
)

from .financial_summary import summarize_transactions
from .session_gate import SessionGate
from .snapshot_publisher import SnapshotPublisher
from .state_codec import BlobCodec

logger = logging.getLogger(__name__)

TRANSACTIONS_KEY = "financial_transactions"
INVENTORY_KEY = "inventory_items"

Clock = Callable[[], datetime]

INCOME_CATEGORIES: dict[BusinessType, tuple[str, ...]] = {
    BusinessType.BARBERSHOP: ("Cortes", "Barba", "Produtos", "Outros"),
    BusinessType.AUTOMOTIVE: ("Lavagem", "Enceramento", "Troca de Óleo", "Produtos", "Outros"),
}
EXPENSE_CATEGORIES: tuple[str, ...] = ("Aluguel", "Produtos", "Equipamentos", "Marketing", "Outros")


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def transaction_categories(
    business_type: BusinessType | str, transaction_type: TransactionType | str
) -> tuple[str, ...]:
    """Suggested category names for the transaction form."""
    if TransactionType(transaction_type) is TransactionType.EXPENSE:
        return EXPENSE_CATEGORIES
    return INCOME_CATEGORIES[BusinessType.parse(business_type)]


class LedgerStore:
    """Orchestrates ledger CRUD and derived queries. Depends on the storage port (DI)."""

    def __init__(
        self,
        storage: KeyValueStorage,
        gate: SessionGate,
        *,
        publisher: SnapshotPublisher | None = None,
        clock: Clock = _utc_now,
        tz: tzinfo = timezone.utc,
        id_factory: Callable[[], str] = lambda: str(uuid4()),
    ):
        self._storage = storage
        self._gate = gate
        self._publisher = publisher or SnapshotPublisher()
        self._clock = clock
        self._tz = tz
        self._id_factory = id_factory

        self._transactions_codec: BlobCodec[list[Transaction]] = BlobCodec(
            TRANSACTIONS_KEY, list[Transaction]
        )
        self._inventory_codec: BlobCodec[list[InventoryItem]] = BlobCodec(
            INVENTORY_KEY, list[InventoryItem]
        )
        self._transactions: list[Transaction] = self._transactions_codec.load(storage, default=list)
        self._inventory: list[InventoryItem] = self._inventory_codec.load(storage, default=list)

    @property
    def publisher(self) -> SnapshotPublisher:
        return self._publisher

    # ── Transactions ────────────────────────────────────────────────

    def add_transaction(
        self,
        data: TransactionCreate | Mapping[str, Any],
        capability: EditCapability | None,
    ) -> Transaction:
        self._gate.authorize(capability)
        data = parse_payload(TransactionCreate, data)

        transaction = Transaction(id=self._id_factory(), **data.model_dump())
        self._commit_transactions([*self._transactions, transaction])
        logger.info(
            "Recorded %s of %s for %s (%s)",
            transaction.type.value,
            transaction.amount,
            transaction.business_type.value,
            transaction.id,
        )
        return transaction

    def update_transaction(
        self,
        transaction_id: str,
        patch: TransactionUpdate | Mapping[str, Any],
        capability: EditCapability | None,
    ) -> Transaction | None:
        self._gate.authorize(capability)
        patch = parse_payload(TransactionUpdate, patch)

        for index, transaction in enumerate(self._transactions):
            if transaction.id == transaction_id:
                updated = replace(transaction, **patch.model_dump(exclude_unset=True, exclude_none=True))
                transactions = list(self._transactions)
                transactions[index] = updated
                self._commit_transactions(transactions)
                return updated

        logger.info("Transaction '%s' not found — nothing to update", transaction_id)
        return None

    def delete_transaction(
        self, transaction_id: str, capability: EditCapability | None
    ) -> bool:
        self._gate.authorize(capability)

        transactions = [t for t in self._transactions if t.id != transaction_id]
        if len(transactions) == len(self._transactions):
            logger.info("Transaction '%s' not found — nothing to delete", transaction_id)
            return False
        self._commit_transactions(transactions)
        logger.info("Deleted transaction '%s'", transaction_id)
        return True

    def list_transactions(self, business_type: BusinessType | str) -> list[Transaction]:
        business_type = BusinessType.parse(business_type)
        return [t for t in self._transactions if t.business_type is business_type]

    def summarize(
        self, business_type: BusinessType | str, as_of: date | None = None
    ) -> FinancialSummary:
        """Totals for one business; monthly figures use the month of ``as_of``.

        Without ``as_of`` the reference is today's date in the store's ``tz``
        (UTC unless configured), so the month rolls over at local midnight.
        """
        reference = as_of if as_of is not None else self._clock().astimezone(self._tz).date()
        return summarize_transactions(self.list_transactions(business_type), reference)

    def _commit_transactions(self, transactions: list[Transaction]) -> None:
        self._transactions_codec.save(self._storage, transactions)
        self._transactions = transactions
        self._publisher.publish("transactions", list(transactions))

    # ── Inventory ───────────────────────────────────────────────────

    def add_inventory_item(
        self,
        data: InventoryItemCreate | Mapping[str, Any],
        capability: EditCapability | None,
    ) -> InventoryItem:
        self._gate.authorize(capability)
        data = parse_payload(InventoryItemCreate, data)

        item = InventoryItem(id=self._id_factory(), last_updated=self._clock(), **data.model_dump())
        self._commit_inventory([*self._inventory, item])
        logger.info("Added inventory item '%s' (%s)", item.name, item.id)
        return item

    def update_inventory_item(
        self,
        item_id: str,
        patch: InventoryItemUpdate | Mapping[str, Any],
        capability: EditCapability | None,
    ) -> InventoryItem | None:
        """Apply ``patch`` and refresh ``last_updated``, which never moves backwards."""
        self._gate.authorize(capability)
        patch = parse_payload(InventoryItemUpdate, patch)

        for index, item in enumerate(self._inventory):
            if item.id == item_id:
                updated = replace(
                    item,
                    **patch.model_dump(exclude_unset=True, exclude_none=True),
                    last_updated=max(self._clock(), item.last_updated),
                )
                inventory = list(self._inventory)
                inventory[index] = updated
                self._commit_inventory(inventory)
                return updated

        logger.info("Inventory item '%s' not found — nothing to update", item_id)
        return None

    def delete_inventory_item(
        self, item_id: str, capability: EditCapability | None
    ) -> bool:
        self._gate.authorize(capability)

        inventory = [item for item in self._inventory if item.id != item_id]
        if len(inventory) == len(self._inventory):
            logger.info("Inventory item '%s' not found — nothing to delete", item_id)
            return False
        self._commit_inventory(inventory)
        logger.info("Deleted inventory item '%s'", item_id)
        return True

    def list_inventory(self, business_type: BusinessType | str) -> list[InventoryItem]:
        business_type = BusinessType.parse(business_type)
        return [item for item in self._inventory if item.business_type is business_type]

    def low_stock_items(self, business_type: BusinessType | str) -> list[InventoryItem]:
        return [
            item for item in self.list_inventory(business_type)
            if item.stock_level is StockLevel.LOW
        ]

    def _commit_inventory(self, inventory: list[InventoryItem]) -> None:
        self._inventory_codec.save(self._storage, inventory)
        self._inventory = inventory
        self._publisher.publish("inventory", list(inventory))
