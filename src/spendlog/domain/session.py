"""Session controller orchestrating the ledger, reminder and dispatch."""

import logging
import random
import string
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Callable, Optional, Union

from spendlog.config import LedgerConfig
from spendlog.database.ledger_store import LedgerStore
from spendlog.delivery.base import DeliveryChannel
from spendlog.domain import aggregator
from spendlog.domain.dispatch import SummaryDispatcher
from spendlog.domain.entities import Expense, MonthKey, MonthOption
from spendlog.domain.errors import (
    NotFoundError,
    PersistenceError,
    ValidationError,
    empty_reason,
    expense_not_found,
    invalid_amount,
)
from spendlog.domain.rollover import RolloverDetector
from spendlog.utils.amount_parser import parse_amount

logger = logging.getLogger(__name__)

AmountInput = Union[str, int, float, Decimal]
MonthInput = Union[MonthKey, str]

# Month selector window relative to the current month
MONTH_WINDOW_BEFORE = 6
MONTH_WINDOW_AFTER = 2

_ID_ALPHABET = string.digits + string.ascii_lowercase


def local_now() -> datetime:
    """Current time as a timezone-aware local datetime."""
    return datetime.now().astimezone()


@dataclass
class SessionState:
    """Transient, UI-facing state of a session."""

    selected_month: MonthKey
    reminder_visible: bool = False
    draft_amount: str = ""
    draft_reason: str = ""
    draft_notes: str = ""


class SessionController:
    """Applies user intents to the ledger and exposes computed values."""

    def __init__(
        self,
        ledger_store: LedgerStore,
        channel: DeliveryChannel,
        config: LedgerConfig,
        clock: Callable[[], datetime] = local_now,
    ):
        """Initialize session controller.

        Args:
            ledger_store: Persistence for the ledger and marker
            channel: External delivery capability for summaries
            config: Session configuration
            clock: Returns the current time as an aware datetime
        """
        self.ledger_store = ledger_store
        self.config = config
        self.clock = clock
        self.detector = RolloverDetector()
        self.dispatcher = SummaryDispatcher(
            ledger_store=ledger_store,
            channel=channel,
            detector=self.detector,
            config=config,
            clock=clock,
        )
        self._ledger: list[Expense] = []
        self.state = SessionState(selected_month=self.current_month)

    @property
    def current_month(self) -> MonthKey:
        return MonthKey.from_datetime(self.clock())

    def start(self) -> None:
        """Load the ledger and decide whether a summary reminder is owed.

        Raises:
            PersistenceError: If the store cannot be read
        """
        self._ledger = self.ledger_store.load()
        current = self.current_month
        self.detector.evaluate(self.ledger_store.get_marker(), current)
        self.state.selected_month = current
        self._sync()
        logger.debug(
            "Session started for %s with %d expenses (reminder %s)",
            current,
            len(self._ledger),
            self.detector.state.value,
        )

    def _sync(self) -> None:
        self.state.reminder_visible = self.detector.pending

    def _save(self) -> None:
        try:
            self.ledger_store.save(self._ledger)
        except PersistenceError:
            logger.warning("Ledger kept in memory only; last change is not saved")
            raise

    def _new_id(self, now: datetime) -> str:
        existing = {expense.id for expense in self._ledger}
        while True:
            suffix = "".join(random.choices(_ID_ALPHABET, k=6))
            expense_id = f"{int(now.timestamp() * 1000)}-{suffix}"
            if expense_id not in existing:
                return expense_id

    @staticmethod
    def _coerce_amount(amount: AmountInput) -> Decimal:
        if isinstance(amount, bool):
            raise ValidationError(invalid_amount(amount))
        if isinstance(amount, Decimal):
            value = amount
        elif isinstance(amount, (int, float)):
            value = Decimal(str(amount))
        elif isinstance(amount, str):
            try:
                value = parse_amount(amount)
            except ValueError:
                raise ValidationError(invalid_amount(amount))
        else:
            raise ValidationError(invalid_amount(amount))

        if not value.is_finite() or value <= 0:
            raise ValidationError(invalid_amount(amount))
        return value

    @staticmethod
    def _coerce_month(month: MonthInput) -> MonthKey:
        if isinstance(month, MonthKey):
            return month
        return MonthKey.parse(month)

    # Intents

    def add_expense(self, amount: AmountInput, reason: str, notes: Optional[str] = "") -> Expense:
        """Record a new expense occurring now.

        Args:
            amount: Positive amount, as a number or text such as "1,234.50"
            reason: Short description, must not be empty
            notes: Optional free text

        Returns:
            The created expense

        Raises:
            ValidationError: If the amount or reason is invalid; nothing changes
            PersistenceError: If the ledger could not be saved; the expense is
                kept for the session
        """
        value = self._coerce_amount(amount)
        reason = (reason or "").strip()
        if not reason:
            raise ValidationError(empty_reason())

        now = self.clock()
        expense = Expense(
            id=self._new_id(now),
            amount=value,
            reason=reason,
            notes=(notes or "").strip(),
            occurred_at=now,
        )
        self._ledger.insert(0, expense)
        self.state.selected_month = MonthKey.from_datetime(now)
        self._sync()
        self._save()
        logger.info("Added expense %s (%s)", expense.id, expense.amount)
        return expense

    def remove_expense(self, expense_id: str, confirmed: bool) -> bool:
        """Delete an expense the user has confirmed removing.

        Returns:
            True if the expense was removed, False if not confirmed

        Raises:
            NotFoundError: If no expense has the given id
            PersistenceError: If the ledger could not be saved
        """
        if not confirmed:
            return False

        remaining = [expense for expense in self._ledger if expense.id != expense_id]
        if len(remaining) == len(self._ledger):
            raise NotFoundError(expense_not_found(expense_id))

        self._ledger = remaining
        self._sync()
        self._save()
        logger.info("Removed expense %s", expense_id)
        return True

    def select_month(self, month: MonthInput) -> MonthKey:
        """Select the month shown in the report view."""
        self.state.selected_month = self._coerce_month(month)
        return self.state.selected_month

    def confirm_send_reminder(self, month: Optional[MonthInput] = None) -> str:
        """Send the summary the reminder asked for.

        Args:
            month: Month to summarize; defaults to the most recently
                completed month

        Returns:
            The summary text handed to the delivery channel

        Raises:
            DeliveryUnavailable: If the composer cannot be opened; the
                reminder stays pending
        """
        if month is None:
            target = self.detector.suggested_month(self.current_month)
        else:
            target = self._coerce_month(month)
        return self._dispatch(target)

    def dismiss_reminder(self) -> None:
        """Hide the reminder until the next session start."""
        self.detector.dismiss()
        self._sync()

    def send_summary_for_selected_month(self) -> str:
        """Send the summary for the month currently selected."""
        return self._dispatch(self.state.selected_month)

    def _dispatch(self, month: MonthKey) -> str:
        try:
            return self.dispatcher.dispatch(month, aggregator.total_for_month(self._ledger, month))
        finally:
            self._sync()

    # Draft entry

    def update_draft(
        self,
        amount: Optional[str] = None,
        reason: Optional[str] = None,
        notes: Optional[str] = None,
    ) -> None:
        """Update the draft entry fields that are provided."""
        if amount is not None:
            self.state.draft_amount = amount
        if reason is not None:
            self.state.draft_reason = reason
        if notes is not None:
            self.state.draft_notes = notes

    def clear_draft(self) -> None:
        """Reset all draft entry fields."""
        self.state.draft_amount = ""
        self.state.draft_reason = ""
        self.state.draft_notes = ""

    def submit_draft(self) -> Expense:
        """Add an expense from the draft fields and clear them.

        The draft is kept when validation fails. It is cleared once the
        expense is recorded, even if saving it failed.
        """
        try:
            expense = self.add_expense(
                self.state.draft_amount, self.state.draft_reason, self.state.draft_notes
            )
        except PersistenceError:
            self.clear_draft()
            raise
        self.clear_draft()
        return expense

    # Read interface

    @property
    def ledger(self) -> tuple[Expense, ...]:
        """Snapshot of the working ledger."""
        return tuple(self._ledger)

    @property
    def reminder_visible(self) -> bool:
        return self.state.reminder_visible

    @property
    def selected_month(self) -> MonthKey:
        return self.state.selected_month

    def selected_entries(self) -> list[Expense]:
        """Expenses of the selected month, most recent first."""
        return aggregator.sorted_descending_by_time(
            aggregator.entries_for_month(self._ledger, self.state.selected_month)
        )

    def selected_total(self) -> Decimal:
        return aggregator.total_for_month(self._ledger, self.state.selected_month)

    def months_with_expenses(self) -> list[MonthKey]:
        """Months that hold at least one expense, oldest first."""
        return aggregator.months_with_entries(self._ledger)

    def month_options(self) -> list[MonthOption]:
        """Months offered by the month selector.

        A window around the current month, plus the selected month when it
        falls outside the window.
        """
        current = self.current_month
        options = [
            MonthOption(key=key, label=key.label())
            for key in (
                current.shift(offset)
                for offset in range(-MONTH_WINDOW_BEFORE, MONTH_WINDOW_AFTER + 1)
            )
        ]
        if all(option.key != self.state.selected_month for option in options):
            selected = self.state.selected_month
            options.append(MonthOption(key=selected, label=selected.label()))
        return options
