"""Factories opening the SQLite-backed ledger store."""

import os
from pathlib import Path
from typing import Optional

from spendlog.config import LedgerConfig
from spendlog.database.ledger_store import LedgerStore
from spendlog.database.sqlalchemy_db import SQLAlchemyKeyValueStore
from spendlog.domain.errors import PersistenceError

DB_PATH_ENV = "SPENDLOG_DB_PATH"
DEFAULT_DB_FILE = Path("~/.spendlog/spendlog.db")


def resolve_database_path(database_path: Optional[str] = None) -> Path:
    """Locate the ledger database file, creating its directory.

    Args:
        database_path: Explicit path; SPENDLOG_DB_PATH and then
            ~/.spendlog/spendlog.db are used when omitted

    Raises:
        PersistenceError: If the directory cannot be created
    """
    path = Path(database_path or os.environ.get(DB_PATH_ENV) or DEFAULT_DB_FILE).expanduser()
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise PersistenceError(f"Cannot create ledger directory {path.parent}: {e}") from e
    return path


def create_sqlite_store(database_path: Optional[str] = None) -> SQLAlchemyKeyValueStore:
    """Open a connected SQLite store with its schema in place."""
    store = SQLAlchemyKeyValueStore(f"sqlite:///{resolve_database_path(database_path)}")
    store.connect()
    store.initialize_schema()
    return store


def create_ledger_store(config: LedgerConfig, database_path: Optional[str] = None) -> LedgerStore:
    """Open the ledger of a session on the SQLite store at database_path."""
    return LedgerStore(create_sqlite_store(database_path), config)
