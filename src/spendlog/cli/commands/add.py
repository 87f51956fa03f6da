"""Add expense command."""

import click

from spendlog.cli.error_handling import handle_domain_error
from spendlog.domain.dispatch import format_amount
from spendlog.domain.errors import DomainError


@click.command("add")
@click.option("--amount", required=True, help="Expense amount (e.g., 42.50 or 1,200)")
@click.option("--reason", required=True, help="What the money was spent on")
@click.option("--notes", default="", help="Optional notes")
@click.pass_context
def add_expense(ctx, amount: str, reason: str, notes: str):
    """Record an expense made now.

    Examples:
        spendlog add --amount 42.50 --reason "Groceries"
        spendlog add --amount 120 --reason "Fuel" --notes "Road trip"
    """
    session = ctx.obj["session"]

    try:
        expense = session.add_expense(amount=amount, reason=reason, notes=notes)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Added expense {expense.id}")
    click.echo(f"  Amount: {format_amount(expense.amount)}")
    click.echo(f"  Reason: {expense.reason}")
    if expense.notes:
        click.echo(f"  Notes: {expense.notes}")
    click.echo(
        f"  Total for {session.selected_month.human()}: {format_amount(session.selected_total())}"
    )


def register_commands(cli):
    """Register add command with main CLI."""
    cli.add_command(add_expense)
