"""Domain layer for pocketledger."""

from pocketledger.domain.account import Account
from pocketledger.domain.account_manager import AccountManager
from pocketledger.domain.entities import Summary, Transaction, TransactionType
from pocketledger.domain.errors import DomainError, DuplicateIdError, NotFoundError
from pocketledger.domain.summary import summarize_transactions

__all__ = [
    "Account",
    "AccountManager",
    "Summary",
    "Transaction",
    "TransactionType",
    "DomainError",
    "DuplicateIdError",
    "NotFoundError",
    "summarize_transactions",
]
