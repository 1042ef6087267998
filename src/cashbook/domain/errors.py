"""Shared domain error messages and error types."""

from decimal import Decimal

from cashbook.domain.entities import Category


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class InvalidAmountError(ValidationError):
    """Amount is missing, non-numeric or not strictly positive."""


class InvalidCategoryError(ValidationError):
    """Category is outside the fixed category set."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


def entry_not_found(entry_id: str) -> str:
    """Return message for missing entry."""
    return f"Entry {entry_id} not found"


def empty_title() -> str:
    """Return message for a blank title."""
    return "Title must not be empty"


def non_positive_amount(amount: Decimal) -> str:
    """Return message for a zero or negative amount."""
    return f"Amount must be greater than zero, got {amount}"


def unknown_category(value: str) -> str:
    """Return message for a category outside the fixed set."""
    choices = ", ".join(c.value for c in Category)
    return f"Unknown category '{value}'. Choose one of: {choices}"


def unknown_kind(value: str) -> str:
    """Return message for an entry type other than Credit or Debit."""
    return f"Unknown entry type '{value}'. Choose Credit or Debit"


def too_many_decimals(amount: Decimal) -> str:
    """Return message for an amount finer than whole cents."""
    return f"Amount must have at most 2 decimal places, got {amount}"
