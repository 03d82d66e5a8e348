"""Ledger endpoints — transactions, inventory and the financial summary."""

from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query, status

from site_builder.application.schemas import (
    InventoryItemCreate,
    InventoryItemResponse,
    InventoryItemUpdate,
    TransactionCreate,
    TransactionUpdate,
)
from site_builder.application.services import LedgerStore, transaction_categories
from site_builder.domain.entities import (
    BusinessType,
    EditCapability,
    FinancialSummary,
    Transaction,
    TransactionType,
)
from site_builder.infrastructure.dependencies import get_capability, get_ledger_store

router = APIRouter(prefix="/ledger", tags=["Ledger"])


def _not_found(entity_type: str, entity_id: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"{entity_type} with id '{entity_id}' not found",
    )


# ── Per-business queries ─────────────────────────────────────────────


@router.get("/{business_type}/transactions")
async def list_transactions(
    business_type: BusinessType,
    store: LedgerStore = Depends(get_ledger_store),
) -> list[Transaction]:
    return store.list_transactions(business_type)


@router.get("/{business_type}/summary")
async def get_summary(
    business_type: BusinessType,
    as_of: date | None = Query(None, description="Reference date for the monthly figures"),
    store: LedgerStore = Depends(get_ledger_store),
) -> FinancialSummary:
    return store.summarize(business_type, as_of=as_of)


@router.get("/{business_type}/categories")
async def list_categories(
    business_type: BusinessType,
    transaction_type: TransactionType = Query(TransactionType.INCOME, alias="type"),
) -> list[str]:
    """Suggested categories for the transaction form."""
    return list(transaction_categories(business_type, transaction_type))


@router.get("/{business_type}/inventory", response_model=list[InventoryItemResponse])
async def list_inventory(
    business_type: BusinessType,
    store: LedgerStore = Depends(get_ledger_store),
) -> list[InventoryItemResponse]:
    return [
        InventoryItemResponse.model_validate(item, from_attributes=True)
        for item in store.list_inventory(business_type)
    ]


@router.get("/{business_type}/inventory/low-stock", response_model=list[InventoryItemResponse])
async def list_low_stock(
    business_type: BusinessType,
    store: LedgerStore = Depends(get_ledger_store),
) -> list[InventoryItemResponse]:
    return [
        InventoryItemResponse.model_validate(item, from_attributes=True)
        for item in store.low_stock_items(business_type)
    ]


# ── Transactions ─────────────────────────────────────────────────────


@router.post("/transactions", status_code=status.HTTP_201_CREATED)
async def create_transaction(
    data: TransactionCreate,
    store: LedgerStore = Depends(get_ledger_store),
    capability: EditCapability | None = Depends(get_capability),
) -> Transaction:
    return store.add_transaction(data, capability)


@router.patch("/transactions/{transaction_id}")
async def update_transaction(
    transaction_id: str,
    patch: TransactionUpdate,
    store: LedgerStore = Depends(get_ledger_store),
    capability: EditCapability | None = Depends(get_capability),
) -> Transaction:
    transaction = store.update_transaction(transaction_id, patch, capability)
    if transaction is None:
        raise _not_found("Transaction", transaction_id)
    return transaction


@router.delete("/transactions/{transaction_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_transaction(
    transaction_id: str,
    store: LedgerStore = Depends(get_ledger_store),
    capability: EditCapability | None = Depends(get_capability),
) -> None:
    if not store.delete_transaction(transaction_id, capability):
        raise _not_found("Transaction", transaction_id)


# ── Inventory ────────────────────────────────────────────────────────


@router.post("/inventory", status_code=status.HTTP_201_CREATED, response_model=InventoryItemResponse)
async def create_inventory_item(
    data: InventoryItemCreate,
    store: LedgerStore = Depends(get_ledger_store),
    capability: EditCapability | None = Depends(get_capability),
) -> InventoryItemResponse:
    item = store.add_inventory_item(data, capability)
    return InventoryItemResponse.model_validate(item, from_attributes=True)


@router.patch("/inventory/{item_id}", response_model=InventoryItemResponse)
async def update_inventory_item(
    item_id: str,
    patch: InventoryItemUpdate,
    store: LedgerStore = Depends(get_ledger_store),
    capability: EditCapability | None = Depends(get_capability),
) -> InventoryItemResponse:
    item = store.update_inventory_item(item_id, patch, capability)
    if item is None:
        raise _not_found("InventoryItem", item_id)
    return InventoryItemResponse.model_validate(item, from_attributes=True)


@router.delete("/inventory/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_inventory_item(
    item_id: str,
    store: LedgerStore = Depends(get_ledger_store),
    capability: EditCapability | None = Depends(get_capability),
) -> None:
    if not store.delete_inventory_item(item_id, capability):
        raise _not_found("InventoryItem", item_id)
