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


class PersistenceError(DomainError):
    """The ledger store could not be read from or written to."""


class DeliveryUnavailable(DomainError):
    """The external message composer could not be opened."""


def expense_not_found(expense_id: str) -> str:
    """Return message for missing expense."""
    return f"Expense {expense_id} not found"


def invalid_amount(amount: object) -> str:
    """Return message for an amount that is not a positive number."""
    return f"Amount must be a positive number, got '{amount}'"


def empty_reason() -> str:
    """Return message for a missing expense reason."""
    return "Reason must not be empty"


def invalid_month_key(text: str) -> str:
    """Return message for a month key not in YYYY-MM form."""
    return f"Invalid month '{text}': expected YYYY-MM"


def storage_write_failed(key: str) -> str:
    """Return message when a durable write did not succeed."""
    return (
        f"Could not save '{key}' to the ledger store. "
        "Changes are kept for this session but may not be saved."
    )
