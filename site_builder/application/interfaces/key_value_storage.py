"""Abstract storage interface (port) for named JSON blobs."""

from abc import ABC, abstractmethod
from typing import Any


class KeyValueStorage(ABC):
    """Port for the persistent key-value namespace — implemented in the infrastructure layer.

    Values are JSON-compatible Python objects. Writes overwrite wholesale;
    merging is the calling store's job. There is no versioning: two
    processes writing the same key simply last-write-win.
    """

    @abstractmethod
    def load(self, key: str) -> Any | None:
        """Return the stored value, or None when absent or unreadable."""
        ...

    @abstractmethod
    def save(self, key: str, value: Any) -> None:
        """Replace the value stored under ``key``."""
        ...

    @abstractmethod
    def remove(self, key: str) -> None:
        """Delete ``key``. Removing an absent key is a no-op."""
        ...
