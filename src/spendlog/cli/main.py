"""Main CLI entry point."""

import logging

import click

from spendlog.config import load_config
from spendlog.cli.error_handling import handle_domain_error
from spendlog.database.factories import create_ledger_store
from spendlog.database.ledger_store import LedgerStore
from spendlog.delivery.whatsapp import WhatsAppDeepLinkChannel
from spendlog.domain.errors import PersistenceError
from spendlog.domain.session import SessionController, local_now

# Import and register all commands at module level
from spendlog.cli.commands import add, remove, report, send


@click.group()
@click.option(
    "--db-path",
    type=click.Path(dir_okay=False),
    help="Path to database file (overrides SPENDLOG_DB_PATH environment variable)",
    envvar="SPENDLOG_DB_PATH",
)
@click.option(
    "--recipient",
    help="Phone number receiving monthly summaries, international format without '+'",
    envvar="SPENDLOG_RECIPIENT",
)
@click.option(
    "--label",
    help="Label opening the summary message",
    envvar="SPENDLOG_SUMMARY_LABEL",
)
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging")
@click.pass_context
def cli(ctx, db_path: str | None, recipient: str | None, label: str | None, verbose: bool):
    """Spendlog - personal expense log with monthly summaries.

    Record expenses, review them month by month, and send a monthly summary
    over WhatsApp. When a new month starts you are reminded once to send the
    summary of the month that just ended.
    """
    ctx.ensure_object(dict)
    if verbose:
        logging.basicConfig(level=logging.DEBUG)

    # Start a session only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is None:
        return

    config = load_config(recipient_identity=recipient, summary_label=label)
    try:
        if ctx.obj.get("store") is not None:
            ledger_store = LedgerStore(ctx.obj["store"], config)
        else:
            ledger_store = create_ledger_store(config, database_path=db_path)
        ctx.call_on_close(ledger_store.store.disconnect)

        session = SessionController(
            ledger_store=ledger_store,
            channel=ctx.obj.get("channel") or WhatsAppDeepLinkChannel(),
            config=config,
            clock=ctx.obj.get("clock") or local_now,
        )
        session.start()
    except PersistenceError as e:
        handle_domain_error(ctx, e)
    ctx.obj["session"] = session

    if session.reminder_visible and ctx.invoked_subcommand != "reminder":
        suggested = session.detector.suggested_month(session.current_month)
        click.echo(
            f"A new month has started. Send the summary for {suggested.human()} with "
            "'spendlog reminder send' or hide this with 'spendlog reminder dismiss'.",
            err=True,
        )


# Register all commands
add.register_commands(cli)
remove.register_commands(cli)
report.register_commands(cli)
send.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
