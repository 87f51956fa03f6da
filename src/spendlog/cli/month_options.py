"""CLI helpers for month option resolution."""

import click

from spendlog.domain.entities import MonthKey
from spendlog.domain.errors import ValidationError
from spendlog.domain.session import SessionController
from spendlog.utils.month_parser import parse_month


def resolve_month_or_exit(ctx: click.Context, session: SessionController, month: str) -> MonthKey:
    """Parse a --month value relative to the session clock, exiting on error."""
    try:
        return parse_month(month, now=session.clock())
    except ValidationError as e:
        click.echo(f"Error: Invalid month: {e}", err=True)
        ctx.exit(1)
