"""Local filesystem key-value storage — one JSON file per key.

Storage layout:
    <storage_dir>/<key>.json
"""

import logging
import re
from pathlib import Path

from .serialized_storage import SerializedKeyValueStorage

logger = logging.getLogger(__name__)

_KEY_PATTERN = re.compile(r"^[A-Za-z0-9_\-]+$")


class JsonFileKeyValueStorage(SerializedKeyValueStorage):
    """Infrastructure adapter that keeps each blob in its own JSON file."""

    def __init__(self, storage_dir: str):
        self._storage_dir = Path(storage_dir)
        self._storage_dir.mkdir(parents=True, exist_ok=True)

    def _path_for(self, key: str) -> Path:
        if not _KEY_PATTERN.match(key):
            raise ValueError(f"Invalid storage key: {key!r}")
        return self._storage_dir / f"{key}.json"

    def _read_raw(self, key: str) -> str | None:
        path = self._path_for(key)
        if not path.exists():
            return None
        return path.read_text("utf-8")

    def _write_raw(self, key: str, raw: str) -> None:
        path = self._path_for(key)
        tmp_path = path.with_suffix(".json.tmp")
        tmp_path.write_text(raw, encoding="utf-8")
        tmp_path.replace(path)

    def _delete_raw(self, key: str) -> None:
        path = self._path_for(key)
        if path.exists():
            path.unlink(missing_ok=True)
            logger.info("Deleted stored blob: %s", path)
