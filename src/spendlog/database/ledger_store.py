"""Durable storage of the ledger and the rollover marker."""

import json
import logging
from typing import Optional, Sequence

from spendlog.config import LedgerConfig
from spendlog.database.base import KeyValueStore
from spendlog.database.mappers import expense_to_record, record_to_expense
from spendlog.domain.entities import Expense, MonthKey
from spendlog.domain.errors import ValidationError

logger = logging.getLogger(__name__)


class LedgerStore:
    """Reads and writes the full ledger and the last-sent month marker."""

    def __init__(self, store: KeyValueStore, config: LedgerConfig):
        """Initialize ledger store.

        Args:
            store: Key-value store backing the ledger
            config: Configuration naming the storage keys
        """
        self.store = store
        self.config = config

    def load(self) -> list[Expense]:
        """Load the persisted ledger.

        A missing or malformed payload yields an empty ledger. Records that
        cannot be read, or that repeat an id already loaded, are skipped.

        Returns:
            List of expenses in stored order

        Raises:
            PersistenceError: If the store cannot be read
        """
        raw = self.store.get(self.config.ledger_storage_key)
        if not raw:
            return []

        try:
            records = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.warning("Failed to parse expenses from storage: %s", e)
            return []
        if not isinstance(records, list):
            logger.warning(
                "Failed to parse expenses from storage: expected a list, got %s",
                type(records).__name__,
            )
            return []

        expenses = []
        seen_ids = set()
        for index, record in enumerate(records):
            try:
                expense = record_to_expense(record)
            except ValueError as e:
                logger.warning("Skipping stored expense #%d: %s", index, e)
                continue
            if expense.id in seen_ids:
                logger.warning("Skipping stored expense #%d: duplicate id %s", index, expense.id)
                continue
            seen_ids.add(expense.id)
            expenses.append(expense)
        return expenses

    def save(self, ledger: Sequence[Expense]) -> None:
        """Overwrite the persisted ledger with the given sequence.

        Raises:
            PersistenceError: If the write fails
        """
        payload = json.dumps([expense_to_record(expense) for expense in ledger])
        self.store.set(self.config.ledger_storage_key, payload)

    def get_marker(self) -> Optional[MonthKey]:
        """Get the month in which a summary was last dispatched, if any."""
        raw = self.store.get(self.config.marker_storage_key)
        if not raw:
            return None
        try:
            return MonthKey.parse(raw)
        except ValidationError as e:
            logger.warning("Ignoring stored last-sent month: %s", e)
            return None

    def set_marker(self, month: MonthKey) -> None:
        """Record the month in which a summary was dispatched."""
        self.store.set(self.config.marker_storage_key, str(month))
