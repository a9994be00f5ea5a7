"""Shared pytest fixtures for pocketledger tests."""

import logging
from decimal import Decimal
import pytest

from pocketledger.domain.account import Account
from pocketledger.domain.account_manager import AccountManager
from pocketledger.domain.entities import Transaction, TransactionType


def _make_transaction(txn_id, amount, txn_type, description=""):
    """Build a transaction dated 2024-01-15."""
    return Transaction(
        id=txn_id,
        amount=Decimal(str(amount)),
        type=txn_type,
        date="2024-01-15T10:00:00+00:00",
        description=description,
    )


@pytest.fixture
def account():
    """Create an empty account."""
    return Account(1, "Main account")


@pytest.fixture
def sample_transactions():
    """Salary, rent, groceries and freelance transactions."""
    return [
        _make_transaction(1, 50000, TransactionType.INCOME, "Salary"),
        _make_transaction(2, 15000, TransactionType.EXPENSE, "Rent"),
        _make_transaction(3, 5000, TransactionType.EXPENSE, "Groceries"),
        _make_transaction(4, 10000, TransactionType.INCOME, "Freelance"),
    ]


@pytest.fixture
def populated_account(account, sample_transactions):
    """Account 1 holding the sample transactions."""
    for txn in sample_transactions:
        account.add_transaction(txn)
    return account


@pytest.fixture
def manager():
    """Create an empty account manager."""
    return AccountManager()


@pytest.fixture
def populated_manager(manager, populated_account):
    """Manager with the populated account registered."""
    manager.add_account(populated_account)
    return manager


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    yield CliRunner()

    # setup_logging leaves a handler on the runner's closed stderr
    logger = logging.getLogger("pocketledger")
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def make_transaction():
    """Factory for transactions dated 2024-01-15."""
    return _make_transaction
