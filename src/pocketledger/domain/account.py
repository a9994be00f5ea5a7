"""Account domain model."""

import logging

from pocketledger.domain.entities import Transaction
from pocketledger.domain.errors import DuplicateIdError, duplicate_transaction_id

logger = logging.getLogger(__name__)


class Account:
    """A named account owning an ordered list of transactions.

    Mutating calls are not synchronized. Callers sharing one account
    across threads must serialize ``add_transaction`` and
    ``remove_transaction_by_id`` themselves.
    """

    def __init__(self, id: int, name: str):
        """Initialize an empty account.

        Args:
            id: Account ID, unique within its manager
            name: Display name
        """
        self.id = id
        self.name = name
        self._transactions: list[Transaction] = []

    def __repr__(self) -> str:
        return (
            f"Account(id={self.id!r}, name={self.name!r}, "
            f"transactions={len(self._transactions)})"
        )

    def add_transaction(self, transaction: Transaction) -> None:
        """Append a transaction to this account.

        Args:
            transaction: Transaction to add

        Raises:
            DuplicateIdError: If a transaction with the same ID already exists
        """
        if any(txn.id == transaction.id for txn in self._transactions):
            logger.warning(
                "Rejected duplicate transaction %s for account %s",
                transaction.id,
                self.id,
            )
            raise DuplicateIdError(duplicate_transaction_id(transaction.id, self.id))

        self._transactions.append(transaction)
        logger.debug("Added transaction %s to account %s", transaction.id, self.id)

    def remove_transaction_by_id(self, transaction_id: int) -> bool:
        """Remove a transaction by ID.

        Args:
            transaction_id: Transaction ID

        Returns:
            True if a transaction was removed, False if none had that ID
        """
        for index, txn in enumerate(self._transactions):
            if txn.id == transaction_id:
                del self._transactions[index]
                logger.debug(
                    "Removed transaction %s from account %s", transaction_id, self.id
                )
                return True
        return False

    def get_transactions(self) -> list[Transaction]:
        """Return a copy of the transactions in insertion order."""
        return list(self._transactions)
