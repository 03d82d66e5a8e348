"""Pydantic DTOs for transactions and inventory items.

Numeric fields arrive as free text from forms; they are parsed here so
that non-numeric, NaN or negative values never reach the ledger.
"""

import datetime as dt
from decimal import Decimal

from pydantic import BaseModel, Field

from site_builder.domain.entities import BusinessType, StockLevel, TransactionType


class TransactionCreate(BaseModel):
    """Schema for recording a new transaction."""

    model_config = {"extra": "forbid"}

    type: TransactionType
    category: str = Field(..., min_length=1, max_length=100, examples=["Cortes"])
    description: str = ""
    amount: Decimal = Field(..., ge=0, allow_inf_nan=False, examples=["35.00"])
    date: dt.date
    business_type: BusinessType


class TransactionUpdate(BaseModel):
    """Schema for updating a transaction — all fields optional."""

    model_config = {"extra": "forbid"}

    type: TransactionType | None = None
    category: str | None = Field(None, min_length=1, max_length=100)
    description: str | None = None
    amount: Decimal | None = Field(None, ge=0, allow_inf_nan=False)
    date: dt.date | None = None
    business_type: BusinessType | None = None


class InventoryItemCreate(BaseModel):
    """Schema for adding an inventory item. ``last_updated`` is set by the store."""

    model_config = {"extra": "forbid"}

    name: str = Field(..., min_length=1, max_length=255, examples=["Pomada modeladora"])
    category: str = ""
    quantity: int = Field(..., ge=0)
    min_quantity: int = Field(0, ge=0)
    unit_price: Decimal = Field(..., ge=0, allow_inf_nan=False)
    supplier: str = ""
    business_type: BusinessType


class InventoryItemUpdate(BaseModel):
    """Schema for updating an inventory item — all fields optional."""

    model_config = {"extra": "forbid"}

    name: str | None = Field(None, min_length=1, max_length=255)
    category: str | None = None
    quantity: int | None = Field(None, ge=0)
    min_quantity: int | None = Field(None, ge=0)
    unit_price: Decimal | None = Field(None, ge=0, allow_inf_nan=False)
    supplier: str | None = None
    business_type: BusinessType | None = None


class InventoryItemResponse(BaseModel):
    """Inventory item as returned to the client, including its stock level."""

    id: str
    name: str
    category: str
    quantity: int
    min_quantity: int
    unit_price: Decimal
    supplier: str
    last_updated: dt.datetime
    business_type: BusinessType
    stock_level: StockLevel

    model_config = {"from_attributes": True}
