"""Account manager domain service."""

import logging
from typing import Optional

from pocketledger.domain.account import Account
from pocketledger.domain.entities import Summary
from pocketledger.domain.errors import (
    DuplicateIdError,
    NotFoundError,
    account_not_found,
    duplicate_account_id,
)
from pocketledger.domain.summary import summarize_transactions

logger = logging.getLogger(__name__)


class AccountManager:
    """Registry of accounts with per-account summaries.

    Mutating calls are not synchronized. Callers sharing one manager
    across threads must serialize ``add_account`` and
    ``remove_account_by_id`` themselves.
    """

    def __init__(self):
        self._accounts: list[Account] = []

    def add_account(self, account: Account) -> None:
        """Register an account.

        Args:
            account: Account to register

        Raises:
            DuplicateIdError: If an account with the same ID is registered
        """
        if self.get_account_by_id(account.id) is not None:
            logger.warning("Rejected duplicate account %s", account.id)
            raise DuplicateIdError(duplicate_account_id(account.id))

        self._accounts.append(account)
        logger.debug("Registered account %s (%s)", account.id, account.name)

    def remove_account_by_id(self, account_id: int) -> bool:
        """Remove an account and its transactions.

        Args:
            account_id: Account ID

        Returns:
            True if an account was removed, False if none had that ID
        """
        for index, acc in enumerate(self._accounts):
            if acc.id == account_id:
                del self._accounts[index]
                logger.debug("Removed account %s", account_id)
                return True
        return False

    def get_accounts(self) -> list[Account]:
        """Return a copy of the registered accounts.

        The list is new on every call; the Account objects are shared.
        """
        return list(self._accounts)

    def get_account_by_id(self, account_id: int) -> Optional[Account]:
        """Get account by ID.

        Args:
            account_id: Account ID

        Returns:
            Account or None if not found
        """
        for acc in self._accounts:
            if acc.id == account_id:
                return acc
        return None

    def get_summary(self, account_id: int) -> Summary:
        """Compute income, expenses and balance for an account.

        Args:
            account_id: Account ID

        Returns:
            Summary of the account's current transactions

        Raises:
            NotFoundError: If no account has that ID
        """
        account = self.get_account_by_id(account_id)
        if account is None:
            raise NotFoundError(account_not_found(account_id))

        return summarize_transactions(account.get_transactions())
