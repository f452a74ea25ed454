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


class DependencyError(DomainError):
    """Operation blocked due to dependent domain data."""


def account_not_found(account_id: int) -> str:
    """Return message for missing account."""
    return f"Account {account_id} not found"


def entry_not_found(entry_id: int) -> str:
    """Return message for missing entry."""
    return f"Entry {entry_id} not found"


def template_not_found(template_id: int) -> str:
    """Return message for missing SMS template."""
    return f"SMS template {template_id} not found"


def invalid_account_kind(value: object) -> str:
    """Return message for an account kind outside customer/supplier."""
    return f"Invalid account kind '{value}': expected 'customer' or 'supplier'"


def invalid_window(start: object, end: object) -> str:
    """Return message for a reporting window that ends before it starts."""
    return f"Invalid period window: start {start} is after end {end}"


def deletion_reason_required() -> str:
    """Return message for a delete request without a reason."""
    return "A reason is required to delete a record"


def account_delete_blocked(account_id: int, entry_count: int) -> str:
    """Return message when an account still has ledger entries."""
    return (
        f"Cannot delete account {account_id}: it has "
        f"{entry_count} entr{'ies' if entry_count != 1 else 'y'}. "
        "Please delete them first."
    )
