"""Demonstration command exercising the ledger API."""

from datetime import datetime, UTC
from decimal import Decimal

import click

from pocketledger.cli.formatting import echo_account, echo_summary, echo_transaction
from pocketledger.domain.account import Account
from pocketledger.domain.account_manager import AccountManager
from pocketledger.domain.entities import Transaction, TransactionType

SAMPLE_TRANSACTIONS = [
    (1, Decimal("50000"), TransactionType.INCOME, "Salary"),
    (2, Decimal("15000"), TransactionType.EXPENSE, "Rent"),
    (3, Decimal("5000"), TransactionType.EXPENSE, "Groceries"),
    (4, Decimal("10000"), TransactionType.INCOME, "Freelance"),
]


def build_sample_manager() -> tuple[AccountManager, Account]:
    """Create a manager holding one account with the sample transactions."""
    manager = AccountManager()
    account = Account(1, "Main account")
    timestamp = datetime.now(UTC).isoformat(timespec="seconds")

    for txn_id, amount, txn_type, description in SAMPLE_TRANSACTIONS:
        account.add_transaction(
            Transaction(
                id=txn_id,
                amount=amount,
                type=txn_type,
                date=timestamp,
                description=description,
            )
        )

    manager.add_account(account)
    return manager, account


@click.command("demo")
def demo():
    """Run a walkthrough of accounts, transactions and summaries.

    Builds a sample account, prints its summary, removes a transaction
    and then the account itself.
    """
    manager, account = build_sample_manager()

    click.echo("1. Accounts:")
    for acc in manager.get_accounts():
        echo_account(acc)

    click.echo("\n2. Lookup of account 1:")
    found = manager.get_account_by_id(1)
    click.echo(f"Found account: {found.name}" if found else "Account not found")

    click.echo("\n3. Transactions:")
    for txn in account.get_transactions():
        echo_transaction(txn)

    click.echo("\n4. Summary:")
    echo_summary(manager.get_summary(account.id))

    click.echo("\n5. Removing transaction 2:")
    click.echo(f"Transaction removed: {account.remove_transaction_by_id(2)}")

    click.echo("\n6. Updated summary:")
    echo_summary(manager.get_summary(account.id))

    click.echo("\n7. Removing account 1:")
    click.echo(f"Account removed: {manager.remove_account_by_id(account.id)}")
    click.echo(f"Accounts left: {len(manager.get_accounts())}")


def register_commands(cli):
    """Register demo command with main CLI."""
    cli.add_command(demo)
