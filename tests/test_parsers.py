"""Tests for amount and month parsing."""

import pytest
from datetime import datetime, UTC
from decimal import Decimal

from spendlog.domain.entities import MonthKey
from spendlog.domain.errors import ValidationError
from spendlog.utils.amount_parser import parse_amount
from spendlog.utils.month_parser import parse_month

NOW = datetime(2025, 1, 20, 12, 0, tzinfo=UTC)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("123.45", Decimal("123.45")),
        ("$123.45", Decimal("123.45")),
        ("₪ 99", Decimal("99")),
        ("1,234.56", Decimal("1234.56")),
        (" 7 ", Decimal("7")),
    ],
)
def test_parse_amount(text, expected):
    assert parse_amount(text) == expected


@pytest.mark.parametrize("text", ["", "   ", "abc", "NaN", "inf", "1.2.3"])
def test_parse_amount_rejects_invalid(text):
    with pytest.raises(ValueError):
        parse_amount(text)


def test_parse_month_canonical():
    assert parse_month("2024-11", now=NOW) == MonthKey(2024, 11)


def test_parse_month_single_digit_month():
    assert parse_month("2025-8", now=NOW) == MonthKey(2025, 8)


def test_parse_month_relative():
    assert parse_month("this month", now=NOW) == MonthKey(2025, 1)
    assert parse_month("Last Month", now=NOW) == MonthKey(2024, 12)
    assert parse_month("next month", now=NOW) == MonthKey(2025, 2)


def test_parse_month_natural_text():
    assert parse_month("Aug 2025", now=NOW) == MonthKey(2025, 8)
    assert parse_month("2025/03/31", now=NOW) == MonthKey(2025, 3)


@pytest.mark.parametrize("text", ["not a month", "2025-13", "0000-05"])
def test_parse_month_rejects_invalid(text):
    with pytest.raises(ValidationError):
        parse_month(text, now=NOW)
