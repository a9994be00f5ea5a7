"""Console formatting helpers shared by commands."""

import click

from pocketledger.domain.account import Account
from pocketledger.domain.entities import Summary, Transaction


def echo_account(account: Account) -> None:
    click.echo(f"ID: {account.id:3d} | {account.name}")


def echo_transaction(txn: Transaction) -> None:
    click.echo(
        f"ID: {txn.id:3d} | {txn.date:25s} | {str(txn.type):7s} | "
        f"{txn.amount:>12} | {txn.description}"
    )


def echo_summary(summary: Summary) -> None:
    click.echo(f"Income:   {summary.income}")
    click.echo(f"Expenses: {summary.expenses}")
    click.echo(f"Balance:  {summary.balance}")
