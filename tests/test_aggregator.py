"""Tests for monthly aggregation."""

from datetime import datetime, UTC
from decimal import Decimal

from spendlog.domain.aggregator import (
    entries_for_month,
    months_with_entries,
    sorted_descending_by_time,
    total_for_month,
)
from spendlog.domain.entities import Expense, MonthKey


def _expense(expense_id, amount, year, month, day=1, hour=12):
    return Expense(
        id=expense_id,
        amount=Decimal(amount),
        reason=f"reason {expense_id}",
        notes="",
        occurred_at=datetime(year, month, day, hour, tzinfo=UTC),
    )


LEDGER = [
    _expense("a", "10.00", 2025, 9, 3),
    _expense("b", "20.25", 2025, 8, 31, 23),
    _expense("c", "5.50", 2025, 9, 20),
    _expense("d", "100", 2024, 9, 10),
]


def test_entries_for_month_filters_by_calendar_month():
    result = entries_for_month(LEDGER, MonthKey(2025, 9))
    assert [e.id for e in result] == ["a", "c"]


def test_entries_for_month_is_idempotent():
    first = entries_for_month(LEDGER, MonthKey(2025, 9))
    second = entries_for_month(LEDGER, MonthKey(2025, 9))
    assert first == second
    assert len(LEDGER) == 4


def test_total_for_month_sums_matching_entries():
    assert total_for_month(LEDGER, MonthKey(2025, 9)) == Decimal("15.50")
    assert total_for_month(LEDGER, MonthKey(2025, 8)) == Decimal("20.25")


def test_total_for_month_same_month_other_year_not_included():
    assert total_for_month(LEDGER, MonthKey(2024, 9)) == Decimal("100")


def test_total_for_empty_month_is_zero():
    assert total_for_month(LEDGER, MonthKey(2023, 1)) == Decimal("0")
    assert total_for_month([], MonthKey(2025, 9)) == Decimal("0")


def test_total_excludes_invalid_amounts(caplog):
    bad = Expense(
        id="bad",
        amount=Decimal("NaN"),
        reason="broken",
        notes="",
        occurred_at=datetime(2025, 9, 5, tzinfo=UTC),
    )
    assert total_for_month(LEDGER + [bad], MonthKey(2025, 9)) == Decimal("15.50")
    assert "bad" in caplog.text


def test_sorted_descending_by_time():
    result = sorted_descending_by_time(LEDGER)
    assert [e.id for e in result] == ["c", "a", "b", "d"]


def test_sorted_descending_by_time_is_stable():
    first = _expense("x", "1", 2025, 9, 1)
    second = _expense("y", "2", 2025, 9, 1)
    assert [e.id for e in sorted_descending_by_time([first, second])] == ["x", "y"]


def test_months_with_entries():
    assert months_with_entries(LEDGER) == [
        MonthKey(2024, 9),
        MonthKey(2025, 8),
        MonthKey(2025, 9),
    ]
