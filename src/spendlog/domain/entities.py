"""Domain model entities for spendlog.

These are pure data classes representing business concepts, independent of
how the ledger is serialized in the key-value store.
"""

import re
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum

from dateutil.relativedelta import relativedelta

from spendlog.domain.errors import ValidationError, invalid_month_key

_MONTH_KEY_RE = re.compile(r"^(\d{4})-(\d{2})$")


@dataclass(frozen=True)
class Expense:
    """A single recorded outlay."""

    id: str
    amount: Decimal
    reason: str
    notes: str
    occurred_at: datetime


@dataclass(frozen=True, order=True)
class MonthKey:
    """Calendar month identifier, canonical text form ``YYYY-MM``."""

    year: int
    month: int

    def __post_init__(self):
        if not 1 <= self.year <= 9999 or not 1 <= self.month <= 12:
            raise ValidationError(invalid_month_key(f"{self.year}-{self.month}"))

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"

    @classmethod
    def parse(cls, text: str) -> "MonthKey":
        """Parse a ``YYYY-MM`` string.

        Raises:
            ValidationError: If the text is not a valid month key
        """
        match = _MONTH_KEY_RE.match(text.strip()) if text else None
        if match is None:
            raise ValidationError(invalid_month_key(text))
        return cls(year=int(match.group(1)), month=int(match.group(2)))

    @classmethod
    def from_datetime(cls, moment: datetime) -> "MonthKey":
        """Month key for the year and month of the given timestamp."""
        return cls(year=moment.year, month=moment.month)

    def contains(self, moment: datetime) -> bool:
        """Return True if the timestamp falls within this calendar month."""
        return moment.year == self.year and moment.month == self.month

    def shift(self, months: int) -> "MonthKey":
        """Return the month key ``months`` calendar months away."""
        try:
            first_day = datetime(self.year, self.month, 1) + relativedelta(months=months)
        except (ValueError, OverflowError):
            raise ValidationError(f"Month {self} shifted by {months} is out of range")
        return MonthKey(year=first_day.year, month=first_day.month)

    def previous(self) -> "MonthKey":
        return self.shift(-1)

    def human(self) -> str:
        """Render as ``MM/YYYY``."""
        return f"{self.month:02d}/{self.year:04d}"

    def label(self) -> str:
        """Short label such as ``Sep 2025``."""
        return datetime(self.year, self.month, 1).strftime("%b %Y")


class ReminderState(Enum):
    """States of the monthly summary reminder."""

    NO_REMINDER = "no_reminder"
    REMINDER_PENDING = "reminder_pending"


@dataclass(frozen=True)
class MonthOption:
    """A selectable month for the report view."""

    key: MonthKey
    label: str
