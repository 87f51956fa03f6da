"""Monthly summary formatting and dispatch."""

import logging
from datetime import datetime
from decimal import Decimal
from typing import Callable

from spendlog.config import LedgerConfig
from spendlog.database.ledger_store import LedgerStore
from spendlog.delivery.base import DeliveryChannel
from spendlog.domain.entities import MonthKey
from spendlog.domain.rollover import RolloverDetector

logger = logging.getLogger(__name__)

SUMMARY_TOTAL_LABEL = "Total expenses:"
SUMMARY_FOOTER = "(sent from spendlog)"


def format_amount(amount: Decimal) -> str:
    """Format an amount with two decimals and comma thousands separators."""
    return f"{amount:,.2f}"


def build_summary_text(month: MonthKey, total: Decimal, label: str) -> str:
    """Build the summary message for a month.

    Args:
        month: Month being summarized
        total: Total expenses for the month
        label: Fixed label opening the message

    Returns:
        Message text, e.g. "Expense summary for 08/2025\\nTotal expenses: 120.50\\n..."
    """
    return "\n".join(
        [
            f"{label} {month.human()}",
            f"{SUMMARY_TOTAL_LABEL} {format_amount(total)}",
            SUMMARY_FOOTER,
        ]
    )


class SummaryDispatcher:
    """Hands monthly summaries to the delivery channel and records the send."""

    def __init__(
        self,
        ledger_store: LedgerStore,
        channel: DeliveryChannel,
        detector: RolloverDetector,
        config: LedgerConfig,
        clock: Callable[[], datetime],
    ):
        """Initialize summary dispatcher.

        Args:
            ledger_store: Store holding the last-sent marker
            channel: External delivery capability
            detector: Reminder state cleared after a dispatch
            config: Session configuration (recipient and label)
            clock: Returns the current time
        """
        self.ledger_store = ledger_store
        self.channel = channel
        self.detector = detector
        self.config = config
        self.clock = clock

    def dispatch(self, month: MonthKey, total: Decimal) -> str:
        """Open the external composer with the summary and record the send.

        The marker is set to the current month, not to ``month``, once the
        composer has been invoked. Delivery itself cannot be observed.

        Args:
            month: Month being summarized
            total: Total expenses for that month

        Returns:
            The summary text handed to the channel

        Raises:
            DeliveryUnavailable: If the composer cannot be opened; nothing is
                recorded and the reminder stays pending
            PersistenceError: If the marker could not be saved after the
                composer was opened
        """
        text = build_summary_text(month, total, self.config.summary_label)
        self.channel.open_composer(self.config.recipient_identity, text)

        current = MonthKey.from_datetime(self.clock())
        self.detector.mark_sent()
        self.ledger_store.set_marker(current)
        logger.info("Dispatched summary for %s; marked %s as sent", month, current)
        return text
