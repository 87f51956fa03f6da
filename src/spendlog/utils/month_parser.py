"""Month parsing utilities."""

import re
from datetime import datetime
from typing import Optional

from dateutil import parser as date_parser

from spendlog.domain.entities import MonthKey
from spendlog.domain.errors import ValidationError

_CANONICAL_RE = re.compile(r"^(\d{4})-(\d{1,2})$")


def parse_month(month_str: str, now: Optional[datetime] = None) -> MonthKey:
    """Parse a month string into a MonthKey.

    Supports:
    - Canonical keys: "2025-08", also with a single-digit month "2025-8"
    - Relative months: "this month", "last month", "next month"
    - Anything dateutil understands: "Aug 2025", "2025/08/15", etc.

    Args:
        month_str: Month string
        now: Reference time for relative months, defaults to local now

    Returns:
        MonthKey

    Raises:
        ValidationError: If month string cannot be parsed
    """
    text = month_str.strip().lower()
    if now is None:
        now = datetime.now().astimezone()
    current = MonthKey.from_datetime(now)

    relative_months = {
        "this month": current,
        "current": current,
        "last month": current.previous(),
        "previous": current.previous(),
        "next month": current.shift(1),
    }
    if text in relative_months:
        return relative_months[text]

    match = _CANONICAL_RE.match(text)
    if match:
        return MonthKey(year=int(match.group(1)), month=int(match.group(2)))

    # Try parsing as absolute date; the day defaults to the first
    try:
        parsed = date_parser.parse(text, default=datetime(now.year, now.month, 1))
    except (ValueError, OverflowError) as e:
        raise ValidationError(f"Could not parse month '{month_str}': {e}")
    return MonthKey.from_datetime(parsed)
