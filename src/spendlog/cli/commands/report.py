"""Monthly report commands."""

import click

from spendlog.cli.month_options import resolve_month_or_exit
from spendlog.domain.dispatch import format_amount


@click.command("report")
@click.option("--month", help="Month to show (YYYY-MM, 'last month', 'Aug 2025'); defaults to this month")
@click.option("--verbose", "-v", is_flag=True, help="Show notes and expense IDs")
@click.pass_context
def report(ctx, month: str | None, verbose: bool) -> None:
    """Show the expenses and total for a month.

    Examples:
        spendlog report
        spendlog report --month 2025-08
    """
    session = ctx.obj["session"]
    if month:
        session.select_month(resolve_month_or_exit(ctx, session, month))

    selected = session.selected_month
    entries = session.selected_entries()
    click.echo(f"\nExpenses for {selected.label()} ({selected.human()}):")

    if not entries:
        click.echo("No expenses found for this month.")
    else:
        click.echo("-" * 80)
        if verbose:
            for expense in entries:
                click.echo(f"\nExpense ID: {expense.id}")
                click.echo(f"  Date: {expense.occurred_at:%Y-%m-%d %H:%M}")
                click.echo(f"  Amount: {format_amount(expense.amount)}")
                click.echo(f"  Reason: {expense.reason}")
                if expense.notes:
                    click.echo(f"  Notes: {expense.notes}")
        else:
            click.echo(f"{'Date':<18} {'Amount':>12}  {'Reason':<30} {'Notes':<16}")
            click.echo("-" * 80)
            for expense in entries:
                click.echo(
                    f"{expense.occurred_at:%Y-%m-%d %H:%M}{'':<2} "
                    f"{format_amount(expense.amount):>12}  "
                    f"{expense.reason[:30]:<30} {expense.notes[:16]:<16}"
                )

    click.echo("-" * 80)
    click.echo(f"Total expenses: {format_amount(session.selected_total())}")


@click.command("months")
@click.option("--month", help="Month to select in addition to the default window")
@click.pass_context
def list_months(ctx, month: str | None) -> None:
    """List months available in the month selector.

    Months holding at least one expense are marked.
    """
    session = ctx.obj["session"]
    if month:
        session.select_month(resolve_month_or_exit(ctx, session, month))

    current = session.current_month
    with_expenses = set(session.months_with_expenses())
    for option in session.month_options():
        markers = []
        if option.key == current:
            markers.append("current")
        if option.key == session.selected_month:
            markers.append("selected")
        if option.key in with_expenses:
            markers.append("has expenses")
        suffix = f"  ({', '.join(markers)})" if markers else ""
        click.echo(f"{option.key}  {option.label}{suffix}")


def register_commands(cli):
    """Register report commands with main CLI."""
    cli.add_command(report)
    cli.add_command(list_months)
