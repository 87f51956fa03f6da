"""CLI error handling helpers."""

import click

from spendlog.domain.errors import DeliveryUnavailable, DomainError, PersistenceError

RECOVERY_HINTS = {
    DeliveryUnavailable: "The summary was not marked as sent; the reminder stays pending.",
    PersistenceError: "Check that the database file (--db-path / SPENDLOG_DB_PATH) is writable.",
}


def recovery_hint(error: Exception) -> str | None:
    """Return what the user can expect or do after the error, if anything."""
    for error_type, hint in RECOVERY_HINTS.items():
        if isinstance(error, error_type):
            return hint
    return None


def handle_domain_error(ctx: click.Context, error: DomainError) -> None:
    """Render a domain error with its recovery hint and exit with failure."""
    click.echo(f"Error: {error}", err=True)
    hint = recovery_hint(error)
    if hint:
        click.echo(hint, err=True)
    ctx.exit(1)
