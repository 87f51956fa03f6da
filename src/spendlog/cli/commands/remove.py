"""Remove expense command."""

import click

from spendlog.cli.error_handling import handle_domain_error
from spendlog.domain.dispatch import format_amount
from spendlog.domain.errors import DomainError, expense_not_found


@click.command("remove")
@click.argument("expense_id")
@click.option("--yes", "-y", is_flag=True, help="Delete without asking for confirmation")
@click.pass_context
def remove_expense(ctx, expense_id: str, yes: bool) -> None:
    """Delete an expense.

    Examples:
        spendlog remove 1726563600000-k3j9x2
    """
    session = ctx.obj["session"]

    expense = next((item for item in session.ledger if item.id == expense_id), None)
    if expense is None:
        click.echo(f"Error: {expense_not_found(expense_id)}", err=True)
        ctx.exit(1)

    confirmed = yes or click.confirm(
        f"Delete expense '{expense.reason}' ({format_amount(expense.amount)})?"
    )
    try:
        removed = session.remove_expense(expense_id, confirmed=confirmed)
    except DomainError as e:
        handle_domain_error(ctx, e)

    if not removed:
        click.echo("Deletion cancelled.")
        return
    click.echo(f"Deleted expense {expense_id}")


def register_commands(cli):
    """Register remove command with main CLI."""
    cli.add_command(remove_expense)
