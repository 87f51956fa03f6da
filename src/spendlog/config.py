"""Configuration for a spendlog session."""

import os
from dataclasses import dataclass
from typing import Optional

DEFAULT_RECIPIENT = "972545317545"
DEFAULT_LEDGER_KEY = "my_expenses_v1"
DEFAULT_MARKER_KEY = "my_expenses_last_sent_month"
DEFAULT_SUMMARY_LABEL = "Expense summary for"


@dataclass(frozen=True)
class LedgerConfig:
    """Options recognized by the session controller.

    Attributes:
        recipient_identity: Phone number (international format, no '+') that
            receives the monthly summary
        ledger_storage_key: Store key holding the serialized ledger
        marker_storage_key: Store key holding the last-sent month
        summary_label: Fixed label opening the summary text
    """

    recipient_identity: str = DEFAULT_RECIPIENT
    ledger_storage_key: str = DEFAULT_LEDGER_KEY
    marker_storage_key: str = DEFAULT_MARKER_KEY
    summary_label: str = DEFAULT_SUMMARY_LABEL


def load_config(
    recipient_identity: Optional[str] = None,
    ledger_storage_key: Optional[str] = None,
    marker_storage_key: Optional[str] = None,
    summary_label: Optional[str] = None,
) -> LedgerConfig:
    """Build a LedgerConfig.

    Explicit arguments win, then the SPENDLOG_RECIPIENT, SPENDLOG_LEDGER_KEY,
    SPENDLOG_MARKER_KEY and SPENDLOG_SUMMARY_LABEL environment variables, then
    the defaults.
    """
    if recipient_identity is None:
        recipient_identity = os.environ.get("SPENDLOG_RECIPIENT", DEFAULT_RECIPIENT)
    if ledger_storage_key is None:
        ledger_storage_key = os.environ.get("SPENDLOG_LEDGER_KEY", DEFAULT_LEDGER_KEY)
    if marker_storage_key is None:
        marker_storage_key = os.environ.get("SPENDLOG_MARKER_KEY", DEFAULT_MARKER_KEY)
    if summary_label is None:
        summary_label = os.environ.get("SPENDLOG_SUMMARY_LABEL", DEFAULT_SUMMARY_LABEL)

    return LedgerConfig(
        recipient_identity=recipient_identity.strip().lstrip("+"),
        ledger_storage_key=ledger_storage_key,
        marker_storage_key=marker_storage_key,
        summary_label=summary_label,
    )
