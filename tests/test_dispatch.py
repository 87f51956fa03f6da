"""Tests for summary formatting and dispatch."""

import pytest
from decimal import Decimal

from spendlog.database.ledger_store import LedgerStore
from spendlog.domain.dispatch import SummaryDispatcher, build_summary_text, format_amount
from spendlog.domain.entities import MonthKey, ReminderState
from spendlog.domain.errors import DeliveryUnavailable, PersistenceError
from spendlog.domain.rollover import RolloverDetector


class TestBuildSummaryText:
    """Tests for build_summary_text."""

    def test_contains_label_month_and_total(self):
        text = build_summary_text(MonthKey(2025, 8), Decimal("120.5"), "Expense summary for")

        assert text.splitlines()[0] == "Expense summary for 08/2025"
        assert "120.50" in text

    def test_is_deterministic(self):
        first = build_summary_text(MonthKey(2025, 8), Decimal("3"), "Label")
        second = build_summary_text(MonthKey(2025, 8), Decimal("3"), "Label")
        assert first == second

    def test_format_amount_uses_two_decimals_and_thousands_separator(self):
        assert format_amount(Decimal("1234567.891")) == "1,234,567.89"
        assert format_amount(Decimal("0")) == "0.00"


@pytest.fixture
def dispatcher_parts(ledger_store, channel, config, clock):
    detector = RolloverDetector()
    detector.evaluate(MonthKey(2025, 8), MonthKey(2025, 9))
    dispatcher = SummaryDispatcher(
        ledger_store=ledger_store,
        channel=channel,
        detector=detector,
        config=config,
        clock=clock,
    )
    return dispatcher, detector


class TestSummaryDispatcher:
    """Tests for SummaryDispatcher.dispatch."""

    def test_dispatch_opens_composer_for_recipient(self, dispatcher_parts, channel, config):
        dispatcher, _ = dispatcher_parts

        text = dispatcher.dispatch(MonthKey(2025, 8), Decimal("120.50"))

        assert channel.sent == [(config.recipient_identity, text)]
        assert "08/2025" in text
        assert "120.50" in text

    def test_dispatch_marks_current_month_not_summarized_month(
        self, dispatcher_parts, ledger_store
    ):
        dispatcher, detector = dispatcher_parts

        dispatcher.dispatch(MonthKey(2025, 8), Decimal("120.50"))

        assert ledger_store.get_marker() == MonthKey(2025, 9)
        assert detector.state is ReminderState.NO_REMINDER

    def test_delivery_failure_leaves_marker_and_reminder(
        self, ledger_store, unavailable_channel, config, clock
    ):
        ledger_store.set_marker(MonthKey(2025, 8))
        detector = RolloverDetector()
        detector.evaluate(ledger_store.get_marker(), MonthKey(2025, 9))
        dispatcher = SummaryDispatcher(ledger_store, unavailable_channel, detector, config, clock)

        with pytest.raises(DeliveryUnavailable):
            dispatcher.dispatch(MonthKey(2025, 8), Decimal("1"))

        assert ledger_store.get_marker() == MonthKey(2025, 8)
        assert detector.pending

    def test_marker_write_failure_after_delivery(self, memory_store, channel, config, clock):
        detector = RolloverDetector()
        detector.evaluate(MonthKey(2025, 8), MonthKey(2025, 9))
        memory_store.fail_writes = True
        dispatcher = SummaryDispatcher(
            LedgerStore(memory_store, config), channel, detector, config, clock
        )

        with pytest.raises(PersistenceError):
            dispatcher.dispatch(MonthKey(2025, 8), Decimal("1"))

        assert len(channel.sent) == 1
        assert not detector.pending
