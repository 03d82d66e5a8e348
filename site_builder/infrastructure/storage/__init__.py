from .serialized_storage import SerializedKeyValueStorage
from .memory_storage import InMemoryKeyValueStorage
from .json_file_storage import JsonFileKeyValueStorage
from .sqlalchemy_storage import SQLAlchemyKeyValueStorage

__all__ = [
    "SerializedKeyValueStorage",
    "InMemoryKeyValueStorage",
    "JsonFileKeyValueStorage",
    "SQLAlchemyKeyValueStorage",
]
