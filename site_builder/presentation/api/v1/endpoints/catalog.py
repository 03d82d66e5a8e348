"""Service catalog CRUD endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from site_builder.application.schemas import CatalogEntryCreate, CatalogEntryUpdate
from site_builder.application.services import ContentStore
from site_builder.domain.entities import EditCapability, ServiceCatalogEntry
from site_builder.infrastructure.dependencies import get_capability, get_content_store

router = APIRouter(prefix="/catalog", tags=["Catalog"])


@router.get("")
async def list_entries(
    store: ContentStore = Depends(get_content_store),
) -> list[ServiceCatalogEntry]:
    return store.list_catalog()


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_entry(
    data: CatalogEntryCreate,
    store: ContentStore = Depends(get_content_store),
    capability: EditCapability | None = Depends(get_capability),
) -> ServiceCatalogEntry:
    return store.add_catalog_entry(data, capability)


@router.patch("/{entry_id}")
async def update_entry(
    entry_id: str,
    patch: CatalogEntryUpdate,
    store: ContentStore = Depends(get_content_store),
    capability: EditCapability | None = Depends(get_capability),
) -> ServiceCatalogEntry:
    entry = store.update_catalog_entry(entry_id, patch, capability)
    if entry is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"ServiceCatalogEntry with id '{entry_id}' not found",
        )
    return entry


@router.delete("/{entry_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_entry(
    entry_id: str,
    store: ContentStore = Depends(get_content_store),
    capability: EditCapability | None = Depends(get_capability),
) -> None:
    if not store.delete_catalog_entry(entry_id, capability):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"ServiceCatalogEntry with id '{entry_id}' not found",
        )
