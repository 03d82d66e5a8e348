"""FastAPI dependency injection — wires infrastructure to application layer.

The stores hold their collections in memory, so one set of services is
built per process and shared by every request.
"""

import logging
from dataclasses import dataclass
from datetime import timezone, tzinfo
from functools import lru_cache
from zoneinfo import ZoneInfo

from fastapi import Depends, Header

from site_builder.application.interfaces import KeyValueStorage
from site_builder.application.services import (
    ContentStore,
    LedgerStore,
    SessionGate,
    SnapshotPublisher,
)
from site_builder.config import Settings, get_settings
from site_builder.domain.entities import EditCapability
from site_builder.infrastructure.database import create_db_engine, create_session_factory
from site_builder.infrastructure.storage import (
    InMemoryKeyValueStorage,
    JsonFileKeyValueStorage,
    SQLAlchemyKeyValueStorage,
)

logger = logging.getLogger(__name__)


@dataclass
class ServiceContainer:
    """Process-wide store instances sharing one storage and one session gate."""

    storage: KeyValueStorage
    gate: SessionGate
    content: ContentStore
    ledger: LedgerStore
    publisher: SnapshotPublisher


def build_storage(settings: Settings) -> KeyValueStorage:
    """Instantiate the configured storage backend."""
    if settings.storage_backend == "memory":
        return InMemoryKeyValueStorage()
    if settings.storage_backend == "json":
        return JsonFileKeyValueStorage(storage_dir=settings.storage_dir)

    engine = create_db_engine(settings.database_url, echo=False)
    return SQLAlchemyKeyValueStorage(create_session_factory(engine))


def ledger_timezone(settings: Settings) -> tzinfo:
    """Zone used for the ledger's "current month"."""
    if settings.timezone.upper() == "UTC":
        return timezone.utc
    return ZoneInfo(settings.timezone)


def build_services(storage: KeyValueStorage, settings: Settings) -> ServiceContainer:
    """Wire gate and stores over ``storage``."""
    publisher = SnapshotPublisher()
    gate = SessionGate(storage, admin_password=settings.admin_password)
    return ServiceContainer(
        storage=storage,
        gate=gate,
        content=ContentStore(storage, gate, publisher=publisher),
        ledger=LedgerStore(storage, gate, publisher=publisher, tz=ledger_timezone(settings)),
        publisher=publisher,
    )


@lru_cache
def get_services() -> ServiceContainer:
    """Build the process-wide service container on first use."""
    settings = get_settings()
    logger.info("Initialising stores with '%s' storage backend", settings.storage_backend)
    return build_services(build_storage(settings), settings)


def get_session_gate(services: ServiceContainer = Depends(get_services)) -> SessionGate:
    return services.gate


def get_content_store(services: ServiceContainer = Depends(get_services)) -> ContentStore:
    return services.content


def get_ledger_store(services: ServiceContainer = Depends(get_services)) -> LedgerStore:
    return services.ledger


def get_capability(
    x_edit_token: str | None = Header(None, alias="X-Edit-Token"),
) -> EditCapability | None:
    """Read the edit capability presented by the client, if any."""
    if not x_edit_token:
        return None
    return EditCapability(token=x_edit_token)
