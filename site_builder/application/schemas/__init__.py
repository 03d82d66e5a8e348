from .validation import parse_payload
from .content import (
    ContentPatch,
    LogoPatch,
    HeroPatch,
    AboutPatch,
    ServicesPatch,
    ServiceItemData,
    ServiceItemPatch,
    ContactPatch,
    ColorsPatch,
    FooterPatch,
)
from .catalog import CatalogEntryCreate, CatalogEntryUpdate
from .session import LoginRequest, SessionResponse
from .ledger import (
    TransactionCreate,
    TransactionUpdate,
    InventoryItemCreate,
    InventoryItemUpdate,
    InventoryItemResponse,
)

__all__ = [
    "parse_payload",
    "ContentPatch",
    "LogoPatch",
    "HeroPatch",
    "AboutPatch",
    "ServicesPatch",
    "ServiceItemData",
    "ServiceItemPatch",
    "ContactPatch",
    "ColorsPatch",
    "FooterPatch",
    "CatalogEntryCreate",
    "CatalogEntryUpdate",
    "TransactionCreate",
    "TransactionUpdate",
    "InventoryItemCreate",
    "InventoryItemUpdate",
    "LoginRequest",
    "SessionResponse",
    "InventoryItemResponse",
]
