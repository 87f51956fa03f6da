"""Persistence layer for spendlog."""

from spendlog.database.base import KeyValueStore
from spendlog.database.factories import create_ledger_store, create_sqlite_store
from spendlog.database.ledger_store import LedgerStore

__all__ = ["KeyValueStore", "create_ledger_store", "create_sqlite_store", "LedgerStore"]
