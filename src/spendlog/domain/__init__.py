"""Domain layer for spendlog application."""

from spendlog.domain.entities import Expense, MonthKey, MonthOption, ReminderState
from spendlog.domain.errors import (
    DomainError,
    ValidationError,
    NotFoundError,
    PersistenceError,
    DeliveryUnavailable,
)

__all__ = [
    "Expense",
    "MonthKey",
    "MonthOption",
    "ReminderState",
    "DomainError",
    "ValidationError",
    "NotFoundError",
    "PersistenceError",
    "DeliveryUnavailable",
]
