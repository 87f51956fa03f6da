"""Monthly aggregation of ledger entries.

All functions are pure: they never mutate the ledger passed in.
"""

import logging
from decimal import Decimal
from typing import Iterable, Sequence

from spendlog.domain.entities import Expense, MonthKey

logger = logging.getLogger(__name__)


def entries_for_month(ledger: Iterable[Expense], month: MonthKey) -> list[Expense]:
    """Return the expenses that occurred within the given calendar month.

    Membership is decided from the timestamp's own year and month.
    """
    return [expense for expense in ledger if month.contains(expense.occurred_at)]


def _is_valid_amount(amount: object) -> bool:
    return isinstance(amount, Decimal) and amount.is_finite() and amount > 0


def total_for_month(ledger: Iterable[Expense], month: MonthKey) -> Decimal:
    """Sum the amounts of the expenses in the given month.

    Expenses with an amount that is not a positive finite Decimal are left out
    of the sum and logged.

    Returns:
        Total amount, Decimal("0") when the month has no expenses
    """
    total = Decimal("0")
    for expense in entries_for_month(ledger, month):
        if not _is_valid_amount(expense.amount):
            logger.warning(
                "Excluding expense %s from %s total: invalid amount %r",
                expense.id,
                month,
                expense.amount,
            )
            continue
        total += expense.amount
    return total


def sorted_descending_by_time(expenses: Iterable[Expense]) -> list[Expense]:
    """Return expenses most recent first. The sort is stable."""
    return sorted(expenses, key=lambda expense: expense.occurred_at, reverse=True)


def months_with_entries(ledger: Sequence[Expense]) -> list[MonthKey]:
    """Return the distinct months that hold at least one expense, oldest first."""
    return sorted({MonthKey.from_datetime(expense.occurred_at) for expense in ledger})
