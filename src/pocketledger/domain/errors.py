"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class ConflictError(DomainError):
    """Domain conflict, such as uniqueness violations."""


class DuplicateIdError(ConflictError):
    """An insert would reuse an ID that is already taken."""


def account_not_found(account_id: int) -> str:
    """Return message for missing account."""
    return f"Account {account_id} not found"


def duplicate_account_id(account_id: int) -> str:
    """Return message for duplicate account ID."""
    return f"Account with id {account_id} already exists"


def duplicate_transaction_id(transaction_id: int, account_id: int) -> str:
    """Return message for duplicate transaction ID within an account."""
    return f"Transaction with id {transaction_id} already exists in account {account_id}"
