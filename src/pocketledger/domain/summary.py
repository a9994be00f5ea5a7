"""Summary computation for account transactions."""

import logging
from decimal import Decimal
from typing import Iterable

from pocketledger.domain.entities import Amount, Summary, Transaction, TransactionType

logger = logging.getLogger(__name__)


def _as_decimal(amount: Amount) -> Decimal:
    """Convert an amount to Decimal, going through str so 2.5 stays 2.5."""
    if isinstance(amount, Decimal):
        return amount
    return Decimal(str(amount))


def summarize_transactions(transactions: Iterable[Transaction]) -> Summary:
    """Compute income, expenses and balance in a single pass.

    Amounts are totalled as Decimal, so int, float and Decimal amounts
    may be mixed within one account. Transactions whose type is neither
    income nor expense contribute nothing to either total.

    Args:
        transactions: Transactions of one account

    Returns:
        Summary with ``balance = income - expenses``
    """
    income = Decimal(0)
    expenses = Decimal(0)

    for txn in transactions:
        if txn.type == TransactionType.INCOME:
            income += _as_decimal(txn.amount)
        elif txn.type == TransactionType.EXPENSE:
            expenses += _as_decimal(txn.amount)
        else:
            logger.debug(
                "Skipping transaction %s with unknown type %r", txn.id, txn.type
            )

    return Summary(income=income, expenses=expenses, balance=income - expenses)
