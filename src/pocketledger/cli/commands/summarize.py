"""Ad-hoc summary command."""

import click

from pocketledger.cli.error_handling import handle_domain_error
from pocketledger.cli.formatting import echo_summary
from pocketledger.domain.account import Account
from pocketledger.domain.account_manager import AccountManager
from pocketledger.domain.entities import Transaction, TransactionType
from pocketledger.domain.errors import DomainError
from pocketledger.utils.amount_parser import parse_magnitude
from pocketledger.utils.date_parser import parse_date


@click.command("summarize")
@click.option("--income", "incomes", multiple=True, help="Income amount (repeatable)")
@click.option("--expense", "expenses", multiple=True, help="Expense amount (repeatable)")
@click.option("--date", "date_str", default="today", show_default=True, help="Transaction date")
@click.option("--name", default="Scratch", show_default=True, help="Account name")
@click.pass_context
def summarize(ctx, incomes: tuple[str, ...], expenses: tuple[str, ...], date_str: str, name: str):
    """Summarize a throwaway account built from the given amounts.

    Examples:
        pocketledger summarize --income 50000 --expense 15000
        pocketledger summarize --income "$1,200.50" --expense 300 --date yesterday
    """
    try:
        txn_date = parse_date(date_str).isoformat()
        entries = [(TransactionType.INCOME, parse_magnitude(a)) for a in incomes]
        entries += [(TransactionType.EXPENSE, parse_magnitude(a)) for a in expenses]

        account = Account(1, name)
        for txn_id, (txn_type, amount) in enumerate(entries, start=1):
            account.add_transaction(
                Transaction(id=txn_id, amount=amount, type=txn_type, date=txn_date)
            )

        manager = AccountManager()
        manager.add_account(account)
        summary = manager.get_summary(account.id)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"Summary for '{name}' ({len(entries)} transactions, {txn_date}):")
    echo_summary(summary)


def register_commands(cli):
    """Register summarize command with main CLI."""
    cli.add_command(summarize)
