"""Application service for landing-page content and the service catalog.

Holds one ContentRecord per business plus the barbershop catalog, seeded
from storage at construction. Every mutation checks the edit capability,
builds a new immutable snapshot, persists it and notifies subscribers.
"""

import logging
from collections.abc import Callable, Mapping
from dataclasses import replace
from typing import Any
from uuid import uuid4

from site_builder.application.interfaces import KeyValueStorage
from site_builder.application.schemas import (
    CatalogEntryCreate,
    CatalogEntryUpdate,
    ContentPatch,
    ServiceItemPatch,
    parse_payload,
)
from site_builder.domain.entities import (
    BusinessType,
    ContentRecord,
    EditCapability,
    ServiceCatalogEntry,
    ServiceIcon,
    ServiceItem,
)
from site_builder.domain.exceptions import EntityNotFoundError

from .content_defaults import DEFAULT_CATALOG, DEFAULT_CONTENT
from .session_gate import SessionGate
from .snapshot_publisher import SnapshotPublisher
from .state_codec import BlobCodec

logger = logging.getLogger(__name__)

CATALOG_KEY = "service_catalog"


def content_key(variant: BusinessType) -> str:
    """Storage key of a business's content record, e.g. ``barbershop_content``."""
    return f"{variant.value}_content"


def _normalize_icons(raw: Any) -> Any:
    """Map unknown persisted icon names onto the closed ServiceIcon set."""
    try:
        items = raw["services"]["items"]
    except (KeyError, TypeError):
        return raw
    if isinstance(items, list):
        for item in items:
            if isinstance(item, dict) and isinstance(item.get("icon"), str):
                item["icon"] = ServiceIcon.from_name(item["icon"]).value
    return raw


class ContentStore:
    """Orchestrates content and catalog edits. Depends on the storage port (DI)."""

    def __init__(
        self,
        storage: KeyValueStorage,
        gate: SessionGate,
        *,
        publisher: SnapshotPublisher | None = None,
        defaults: Mapping[BusinessType, ContentRecord] = DEFAULT_CONTENT,
        default_catalog: tuple[ServiceCatalogEntry, ...] = DEFAULT_CATALOG,
        id_factory: Callable[[], str] = lambda: str(uuid4()),
    ):
        self._storage = storage
        self._gate = gate
        self._publisher = publisher or SnapshotPublisher()
        self._defaults = dict(defaults)
        self._id_factory = id_factory

        self._codecs: dict[BusinessType, BlobCodec[ContentRecord]] = {
            variant: BlobCodec(content_key(variant), ContentRecord) for variant in BusinessType
        }
        self._catalog_codec: BlobCodec[list[ServiceCatalogEntry]] = BlobCodec(
            CATALOG_KEY, list[ServiceCatalogEntry]
        )

        self._records: dict[BusinessType, ContentRecord] = {
            variant: self._codecs[variant].load(
                storage,
                default=lambda v=variant: self._defaults[v],
                prepare=_normalize_icons,
            )
            for variant in BusinessType
        }
        self._catalog: list[ServiceCatalogEntry] = self._catalog_codec.load(
            storage, default=lambda: list(default_catalog)
        )

    @property
    def publisher(self) -> SnapshotPublisher:
        return self._publisher

    # ── Content ─────────────────────────────────────────────────────

    def get(self, variant: BusinessType | str) -> ContentRecord:
        return self._records[BusinessType.parse(variant)]

    def update(
        self,
        variant: BusinessType | str,
        patch: ContentPatch | Mapping[str, Any],
        capability: EditCapability | None,
    ) -> ContentRecord:
        """Merge the set fields of each section patch into the current record."""
        self._gate.authorize(capability, require_edit_mode=True)
        variant = BusinessType.parse(variant)
        patch = parse_payload(ContentPatch, patch)

        current = self._records[variant]
        changes: dict[str, Any] = {}
        for section_name, fields in patch.model_dump(exclude_unset=True, exclude_none=True).items():
            if section_name == "services" and "items" in fields:
                fields["items"] = tuple(ServiceItem(**item) for item in fields["items"])
            changes[section_name] = replace(getattr(current, section_name), **fields)

        if not changes:
            return current
        logger.info("Updating %s content sections: %s", variant.value, ", ".join(changes))
        return self._commit_record(variant, replace(current, **changes))

    def update_service_item(
        self,
        variant: BusinessType | str,
        index: int,
        patch: ServiceItemPatch | Mapping[str, Any],
        capability: EditCapability | None,
    ) -> ContentRecord:
        """Patch one service card in place, addressed by its position."""
        self._gate.authorize(capability, require_edit_mode=True)
        variant = BusinessType.parse(variant)
        patch = parse_payload(ServiceItemPatch, patch)

        current = self._records[variant]
        items = list(current.services.items)
        if not 0 <= index < len(items):
            raise EntityNotFoundError("ServiceItem", index)

        items[index] = replace(items[index], **patch.model_dump(exclude_unset=True, exclude_none=True))
        services = replace(current.services, items=tuple(items))
        return self._commit_record(variant, replace(current, services=services))

    def reset(
        self, variant: BusinessType | str, capability: EditCapability | None
    ) -> ContentRecord:
        """Restore the built-in content of ``variant``."""
        self._gate.authorize(capability, require_edit_mode=True)
        variant = BusinessType.parse(variant)
        logger.info("Resetting %s content to defaults", variant.value)
        return self._commit_record(variant, self._defaults[variant])

    def _commit_record(self, variant: BusinessType, record: ContentRecord) -> ContentRecord:
        self._codecs[variant].save(self._storage, record)
        self._records[variant] = record
        self._publisher.publish(f"content:{variant.value}", record)
        return record

    # ── Catalog ─────────────────────────────────────────────────────

    def list_catalog(self) -> list[ServiceCatalogEntry]:
        return list(self._catalog)

    def add_catalog_entry(
        self,
        data: CatalogEntryCreate | Mapping[str, Any],
        capability: EditCapability | None,
    ) -> ServiceCatalogEntry:
        self._gate.authorize(capability, require_edit_mode=True)
        data = parse_payload(CatalogEntryCreate, data)

        entry = ServiceCatalogEntry(id=self._id_factory(), **data.model_dump())
        self._commit_catalog([*self._catalog, entry])
        logger.info("Added catalog entry '%s' (%s)", entry.name, entry.id)
        return entry

    def update_catalog_entry(
        self,
        entry_id: str,
        patch: CatalogEntryUpdate | Mapping[str, Any],
        capability: EditCapability | None,
    ) -> ServiceCatalogEntry | None:
        """Apply ``patch`` to the matching entry. Returns None when the id is unknown."""
        self._gate.authorize(capability, require_edit_mode=True)
        patch = parse_payload(CatalogEntryUpdate, patch)

        for index, entry in enumerate(self._catalog):
            if entry.id == entry_id:
                updated = replace(entry, **patch.model_dump(exclude_unset=True, exclude_none=True))
                catalog = list(self._catalog)
                catalog[index] = updated
                self._commit_catalog(catalog)
                return updated

        logger.info("Catalog entry '%s' not found — nothing to update", entry_id)
        return None

    def delete_catalog_entry(
        self, entry_id: str, capability: EditCapability | None
    ) -> bool:
        """Remove the matching entry. Returns False when the id is unknown."""
        self._gate.authorize(capability, require_edit_mode=True)

        catalog = [entry for entry in self._catalog if entry.id != entry_id]
        if len(catalog) == len(self._catalog):
            logger.info("Catalog entry '%s' not found — nothing to delete", entry_id)
            return False
        self._commit_catalog(catalog)
        logger.info("Deleted catalog entry '%s'", entry_id)
        return True

    def _commit_catalog(self, catalog: list[ServiceCatalogEntry]) -> None:
        self._catalog_codec.save(self._storage, catalog)
        self._catalog = catalog
        self._publisher.publish("catalog", list(catalog))
