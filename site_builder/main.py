"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from site_builder.config import get_settings
from site_builder.domain.exceptions import (
    UnauthorizedError,
    ValidationFailure,
)
from site_builder.infrastructure.dependencies import get_services
from site_builder.infrastructure.logging.log_config import setup_logging
from site_builder.presentation.api.router import router as api_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan — configure logging and load persisted state."""
    settings = get_settings()
    setup_logging()

    services = get_services()
    logger.info(
        "Site builder ready (env=%s, storage=%s, admin session restored=%s)",
        settings.app_env,
        settings.storage_backend,
        services.gate.is_authenticated,
    )

    yield


def _register_exception_handlers(app: FastAPI) -> None:
    """Map domain exceptions onto HTTP responses."""

    @app.exception_handler(UnauthorizedError)
    async def unauthorized_handler(request: Request, exc: UnauthorizedError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content={"detail": exc.reason},
        )

    @app.exception_handler(ValidationFailure)
    async def validation_failure_handler(request: Request, exc: ValidationFailure) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={"detail": str(exc), "field": exc.field},
        )


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    _register_exception_handlers(app)
    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "site_builder.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )
