"""Utility functions for spendlog."""

from spendlog.utils.month_parser import parse_month
from spendlog.utils.amount_parser import parse_amount

__all__ = ["parse_month", "parse_amount"]
