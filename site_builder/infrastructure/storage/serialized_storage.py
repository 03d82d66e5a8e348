"""Shared JSON (de)serialization for key-value storage adapters.

Concrete adapters only move raw JSON text in and out of their medium;
this base class owns encoding and the fail-soft decoding policy.
"""

import json
import logging
from abc import abstractmethod
from typing import Any

from site_builder.application.interfaces import KeyValueStorage

logger = logging.getLogger(__name__)


class SerializedKeyValueStorage(KeyValueStorage):
    """KeyValueStorage that persists values as JSON text."""

    def load(self, key: str) -> Any | None:
        raw = self._read_raw(key)
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except json.JSONDecodeError as exc:
            logger.warning(
                "Stored value for '%s' is not valid JSON (%s) — treating as absent",
                key,
                exc,
            )
            return None

    def save(self, key: str, value: Any) -> None:
        raw = json.dumps(value, ensure_ascii=False)
        self._write_raw(key, raw)
        logger.debug("Saved '%s' (%d chars)", key, len(raw))

    def remove(self, key: str) -> None:
        self._delete_raw(key)
        logger.debug("Removed '%s'", key)

    # ── Medium-specific hooks ───────────────────────────────────────

    @abstractmethod
    def _read_raw(self, key: str) -> str | None:
        ...

    @abstractmethod
    def _write_raw(self, key: str, raw: str) -> None:
        ...

    @abstractmethod
    def _delete_raw(self, key: str) -> None:
        ...
