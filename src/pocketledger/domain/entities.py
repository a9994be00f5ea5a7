"""Domain model entities for pocketledger.

These are plain value types. Accounts and the account manager own
collections of them but never mutate them in place.
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Union

Amount = Union[Decimal, int, float]


class TransactionType(str, Enum):
    """Direction of a money movement."""

    INCOME = "income"
    EXPENSE = "expense"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Transaction:
    """Transaction domain entity.

    ``amount`` is the magnitude of the money moved; the direction comes
    from ``type``. ``date`` is an ISO-8601 string supplied by the caller.
    """

    id: int
    amount: Amount
    type: TransactionType
    date: str
    description: str = ""


@dataclass(frozen=True)
class Summary:
    """Income, expenses and balance of one account at query time."""

    income: Amount
    expenses: Amount
    balance: Amount
