"""Concrete key-value storage backed by a SQLAlchemy table."""

from datetime import datetime, timezone

from sqlalchemy.orm import Session, sessionmaker

from site_builder.infrastructure.database.models import KeyValueEntryModel

from .serialized_storage import SerializedKeyValueStorage


class SQLAlchemyKeyValueStorage(SerializedKeyValueStorage):
    """Implements the KeyValueStorage port with one row per key.

    Each call opens its own short session and commits before returning,
    so writes are durable as soon as ``save`` returns.
    """

    def __init__(self, session_factory: sessionmaker[Session]):
        self._session_factory = session_factory

    def _read_raw(self, key: str) -> str | None:
        with self._session_factory() as session:
            model = session.get(KeyValueEntryModel, key)
            return model.value if model else None

    def _write_raw(self, key: str, raw: str) -> None:
        with self._session_factory() as session:
            model = session.get(KeyValueEntryModel, key)
            if model is None:
                session.add(KeyValueEntryModel(key=key, value=raw))
            else:
                model.value = raw
                model.updated_at = datetime.now(timezone.utc)
            session.commit()

    def _delete_raw(self, key: str) -> None:
        with self._session_factory() as session:
            model = session.get(KeyValueEntryModel, key)
            if model is not None:
                session.delete(model)
                session.commit()
