"""Summary sending and reminder commands."""

import click

from spendlog.cli.error_handling import handle_domain_error
from spendlog.cli.month_options import resolve_month_or_exit
from spendlog.domain.errors import DomainError


def _echo_sent(text: str) -> None:
    click.echo("Opened WhatsApp with the summary below. Confirm and send it there.")
    click.echo("-" * 60)
    click.echo(text)


@click.command("send")
@click.option("--month", help="Month to summarize; defaults to this month")
@click.pass_context
def send_summary(ctx, month: str | None) -> None:
    """Send the summary for a month over WhatsApp.

    Examples:
        spendlog send
        spendlog send --month 2025-08
    """
    session = ctx.obj["session"]
    if month:
        session.select_month(resolve_month_or_exit(ctx, session, month))

    try:
        text = session.send_summary_for_selected_month()
    except DomainError as e:
        handle_domain_error(ctx, e)
    _echo_sent(text)


@click.group()
def reminder_group():
    """Handle the new-month summary reminder."""
    pass


@reminder_group.command("status")
@click.pass_context
def reminder_status(ctx) -> None:
    """Show whether a monthly summary is owed."""
    session = ctx.obj["session"]
    if session.reminder_visible:
        suggested = session.detector.suggested_month(session.current_month)
        click.echo(f"A new month has started. The summary for {suggested.human()} has not been sent.")
    else:
        click.echo("No summary is owed.")


@reminder_group.command("send")
@click.option("--month", help="Month to summarize; defaults to the month that just ended")
@click.pass_context
def reminder_send(ctx, month: str | None) -> None:
    """Send the summary the reminder asks for."""
    session = ctx.obj["session"]
    target = resolve_month_or_exit(ctx, session, month) if month else None

    try:
        text = session.confirm_send_reminder(target)
    except DomainError as e:
        handle_domain_error(ctx, e)
    _echo_sent(text)


@reminder_group.command("dismiss")
@click.pass_context
def reminder_dismiss(ctx) -> None:
    """Hide the reminder for this command.

    Each spendlog command is its own session, so the notice returns on the
    next command until a summary is sent.
    """
    session = ctx.obj["session"]
    session.dismiss_reminder()
    click.echo(
        "Reminder hidden for this command only. It shows again on the next "
        "spendlog command until a summary is sent."
    )


def register_commands(cli: click.Group) -> None:
    """Register send and reminder commands with main CLI."""
    cli.add_command(send_summary)
    cli.add_command(reminder_group, name="reminder")
