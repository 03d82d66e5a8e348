"""In-process key-value storage — used for tests and the ``memory`` backend."""

from .serialized_storage import SerializedKeyValueStorage


class InMemoryKeyValueStorage(SerializedKeyValueStorage):
    """Keeps JSON text in a dict, so values still round-trip through serialization."""

    def __init__(self, initial: dict[str, str] | None = None):
        self._data: dict[str, str] = dict(initial or {})

    def _read_raw(self, key: str) -> str | None:
        return self._data.get(key)

    def _write_raw(self, key: str, raw: str) -> None:
        self._data[key] = raw

    def _delete_raw(self, key: str) -> None:
        self._data.pop(key, None)

    def raw(self, key: str) -> str | None:
        """Return the stored JSON text for ``key`` (inspection helper)."""
        return self._data.get(key)

    def keys(self) -> list[str]:
        return list(self._data)
