"""V1 API router — aggregates all v1 endpoint routers."""

from fastapi import APIRouter

from site_builder.presentation.api.v1.endpoints.health import router as health_router
from site_builder.presentation.api.v1.endpoints.session import router as session_router
from site_builder.presentation.api.v1.endpoints.content import router as content_router
from site_builder.presentation.api.v1.endpoints.catalog import router as catalog_router
from site_builder.presentation.api.v1.endpoints.ledger import router as ledger_router

router = APIRouter(prefix="/v1")
router.include_router(health_router)
router.include_router(session_router)
router.include_router(content_router)
router.include_router(catalog_router)
router.include_router(ledger_router)
