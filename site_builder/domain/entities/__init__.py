from .content import (
    BusinessType,
    ServiceIcon,
    Logo,
    Hero,
    About,
    ServiceItem,
    Services,
    Contact,
    ThemeColors,
    Footer,
    ContentRecord,
)
from .catalog import ServiceCatalogEntry, ServiceCategory
from .ledger import (
    Transaction,
    TransactionType,
    InventoryItem,
    StockLevel,
    FinancialSummary,
)
from .session import EditCapability

__all__ = [
    "BusinessType",
    "ServiceIcon",
    "Logo",
    "Hero",
    "About",
    "ServiceItem",
    "Services",
    "Contact",
    "ThemeColors",
    "Footer",
    "ContentRecord",
    "ServiceCatalogEntry",
    "ServiceCategory",
    "Transaction",
    "TransactionType",
    "InventoryItem",
    "StockLevel",
    "FinancialSummary",
    "EditCapability",
]
