"""Month rollover detection for the monthly summary reminder."""

from typing import Optional

from spendlog.domain.entities import MonthKey, ReminderState


class RolloverDetector:
    """Decides at session start whether a monthly summary is owed.

    The stored marker is the month in which a summary was last sent, not the
    month it summarized, so a single comparison against the current month is
    enough. A user who skips several months gets one reminder.
    """

    def __init__(self):
        self.state = ReminderState.NO_REMINDER

    def evaluate(self, last_sent: Optional[MonthKey], current: MonthKey) -> ReminderState:
        """Evaluate the reminder state for a new session.

        Args:
            last_sent: Month in which a summary was last dispatched, or None
                if none was ever sent
            current: Month of the session start

        Returns:
            The new reminder state
        """
        if last_sent is None or last_sent == current:
            self.state = ReminderState.NO_REMINDER
        else:
            self.state = ReminderState.REMINDER_PENDING
        return self.state

    @property
    def pending(self) -> bool:
        return self.state is ReminderState.REMINDER_PENDING

    def dismiss(self) -> None:
        """Hide the reminder for this session only."""
        self.state = ReminderState.NO_REMINDER

    def mark_sent(self) -> None:
        """Clear the reminder once a summary has been dispatched."""
        self.state = ReminderState.NO_REMINDER

    @staticmethod
    def suggested_month(current: MonthKey) -> MonthKey:
        """Most recently completed month, the default target of a reminder send."""
        return current.previous()
