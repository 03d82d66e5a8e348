"""Domain entity for the barbershop service catalog."""

from dataclasses import dataclass
from enum import Enum


class ServiceCategory(str, Enum):
    """Catalog categories offered by the barbershop."""

    CORTE = "corte"
    BARBA = "barba"
    COMBO = "combo"
    TRATAMENTO = "tratamento"


@dataclass(frozen=True)
class ServiceCatalogEntry:
    """A priced service in the catalog. Ordering is insertion order."""

    id: str
    name: str
    description: str
    price: str
    category: ServiceCategory
