"""Mapper functions to convert between domain entities and stored records.

The ledger is stored as a JSON list of plain records. This layer isolates the
conversion so the record layout can change without touching the domain.
"""

from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Any

from spendlog.domain.entities import Expense


def expense_to_record(expense: Expense) -> dict[str, Any]:
    """Convert a domain Expense to a JSON-ready record."""
    return {
        "id": expense.id,
        "amount": str(expense.amount),
        "reason": expense.reason,
        "notes": expense.notes,
        "occurredAt": expense.occurred_at.isoformat(),
    }


def record_to_expense(record: Any) -> Expense:
    """Convert a stored record to a domain Expense.

    Records written by older versions used ``dateISO`` for a UTC timestamp and
    a plain number for the amount; both are accepted. Such timestamps, and
    timestamps without an offset, are converted to local time.

    Raises:
        ValueError: If the record is malformed or its amount is not a positive
            finite number
    """
    if not isinstance(record, dict):
        raise ValueError(f"Expected an object, got {type(record).__name__}")

    expense_id = record.get("id")
    if expense_id is None or expense_id == "":
        raise ValueError("Missing id")

    raw_amount = record.get("amount")
    if isinstance(raw_amount, bool) or not isinstance(raw_amount, (int, float, str)):
        raise ValueError(f"Invalid amount {raw_amount!r}")
    try:
        amount = Decimal(str(raw_amount))
    except InvalidOperation:
        raise ValueError(f"Invalid amount {raw_amount!r}")
    if not amount.is_finite() or amount <= 0:
        raise ValueError(f"Invalid amount {raw_amount!r}")

    reason = record.get("reason")
    if not isinstance(reason, str) or not reason.strip():
        raise ValueError("Missing reason")

    notes = record.get("notes") or ""
    if not isinstance(notes, str):
        raise ValueError("Invalid notes")

    raw_timestamp = record.get("occurredAt", record.get("dateISO"))
    if not isinstance(raw_timestamp, str):
        raise ValueError("Missing timestamp")
    occurred_at = datetime.fromisoformat(raw_timestamp)
    if "occurredAt" not in record or occurred_at.tzinfo is None:
        # Read legacy and naive timestamps in local time
        occurred_at = occurred_at.astimezone()

    return Expense(
        id=str(expense_id),
        amount=amount,
        reason=reason,
        notes=notes,
        occurred_at=occurred_at,
    )
