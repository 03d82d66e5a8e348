"""Landing-page content endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from site_builder.application.schemas import ContentPatch, ServiceItemPatch
from site_builder.application.services import ContentStore
from site_builder.application.services.content_defaults import PRESET_COLORS
from site_builder.domain.entities import BusinessType, ContentRecord, EditCapability, ServiceIcon
from site_builder.domain.exceptions import EntityNotFoundError
from site_builder.infrastructure.dependencies import get_capability, get_content_store

router = APIRouter(prefix="/content", tags=["Content"])


@router.get("/theme/presets")
async def list_color_presets() -> dict:
    """Preset colors offered by the theme picker, and the available service icons."""
    return {
        "colors": list(PRESET_COLORS),
        "icons": [icon.value for icon in ServiceIcon],
    }


@router.get("/{business_type}")
async def get_content(
    business_type: BusinessType,
    store: ContentStore = Depends(get_content_store),
) -> ContentRecord:
    return store.get(business_type)


@router.patch("/{business_type}")
async def update_content(
    business_type: BusinessType,
    patch: ContentPatch,
    store: ContentStore = Depends(get_content_store),
    capability: EditCapability | None = Depends(get_capability),
) -> ContentRecord:
    """Merge a section-level patch into the business's content."""
    return store.update(business_type, patch, capability)


@router.patch("/{business_type}/services/{index}")
async def update_service_item(
    business_type: BusinessType,
    index: int,
    patch: ServiceItemPatch,
    store: ContentStore = Depends(get_content_store),
    capability: EditCapability | None = Depends(get_capability),
) -> ContentRecord:
    """Edit a single service card by its position."""
    try:
        return store.update_service_item(business_type, index, patch, capability)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.post("/{business_type}/reset")
async def reset_content(
    business_type: BusinessType,
    store: ContentStore = Depends(get_content_store),
    capability: EditCapability | None = Depends(get_capability),
) -> ContentRecord:
    return store.reset(business_type, capability)
