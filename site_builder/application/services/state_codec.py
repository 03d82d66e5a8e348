"""Typed (de)serialization of store state to and from named JSON blobs."""

import logging
from collections.abc import Callable
from typing import Any, Generic, TypeVar

from pydantic import TypeAdapter, ValidationError

from site_builder.application.interfaces import KeyValueStorage
from site_builder.domain.exceptions import MalformedPersistedStateError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class BlobCodec(Generic[T]):
    """Binds a storage key to the shape persisted under it.

    Decimals are written as strings, dates and datetimes as ISO-8601, enums
    by value, so a saved value decodes back to an equal object.
    """

    def __init__(self, key: str, shape: Any):
        self.key = key
        self._adapter: TypeAdapter[T] = TypeAdapter(shape)

    def encode(self, value: T) -> Any:
        return self._adapter.dump_python(value, mode="json")

    def decode(self, raw: Any) -> T:
        try:
            return self._adapter.validate_python(raw)
        except ValidationError as exc:
            first = exc.errors()[0]
            location = ".".join(str(part) for part in first["loc"]) or "<root>"
            raise MalformedPersistedStateError(
                self.key, f"{location}: {first['msg']}"
            ) from exc

    def load(
        self,
        storage: KeyValueStorage,
        default: Callable[[], T],
        prepare: Callable[[Any], Any] | None = None,
    ) -> T:
        """Read the blob, falling back to ``default()`` when absent or malformed."""
        raw = storage.load(self.key)
        if raw is None:
            logger.debug("No persisted state for '%s' — using defaults", self.key)
            return default()
        try:
            return self.decode(prepare(raw) if prepare else raw)
        except MalformedPersistedStateError as exc:
            logger.warning("%s — falling back to defaults", exc)
            return default()

    def save(self, storage: KeyValueStorage, value: T) -> None:
        storage.save(self.key, self.encode(value))
