"""Generic SQLAlchemy key-value store implementation."""

import logging
from typing import Optional
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from spendlog.database.base import KeyValueStore
from spendlog.database.models import StoredValue, create_session_factory
from spendlog.domain.errors import PersistenceError, storage_write_failed

logger = logging.getLogger(__name__)


class SQLAlchemyKeyValueStore(KeyValueStore):
    """SQLAlchemy-based implementation of KeyValueStore interface."""

    def __init__(self, database_url: str):
        """Initialize SQLAlchemy store.

        Args:
            database_url: SQLAlchemy database URL (e.g., 'sqlite:///path/to.db')

        Raises:
            PersistenceError: If the database cannot be opened
        """
        self.database_url = database_url
        try:
            self.session_factory = create_session_factory(database_url)
        except SQLAlchemyError as e:
            raise PersistenceError(f"Could not open ledger store: {e}") from e
        self._session: Optional[Session] = None

    def _get_session(self) -> Session:
        """Get current session, creating one if needed."""
        if self._session is None:
            self._session = self.session_factory()
        return self._session

    def connect(self) -> None:
        """Connect to the store."""
        # Connection is lazy, so this is a no-op
        pass

    def disconnect(self) -> None:
        """Disconnect from the store."""
        if self._session is not None:
            self._session.close()
            self._session = None

    def initialize_schema(self) -> None:
        """Initialize storage schema (create tables)."""
        # Schema is created automatically by create_session_factory
        pass

    def get(self, key: str) -> Optional[str]:
        """Get the text stored under key, or None if absent."""
        session = self._get_session()
        try:
            # Column query bypasses the identity map
            return session.query(StoredValue.value).filter(StoredValue.key == key).scalar()
        except SQLAlchemyError as e:
            session.rollback()
            raise PersistenceError(f"Could not read '{key}' from the ledger store: {e}") from e

    def set(self, key: str, value: str) -> None:
        """Store text under key, replacing any previous value."""
        session = self._get_session()
        try:
            entry = session.query(StoredValue).filter(StoredValue.key == key).first()
            if entry is None:
                session.add(StoredValue(key=key, value=value))
            else:
                entry.value = value
            session.commit()
        except SQLAlchemyError as e:
            session.rollback()
            logger.error("Write of %s failed: %s", key, e)
            raise PersistenceError(storage_write_failed(key)) from e
