"""Entry domain service."""

from dataclasses import replace
from datetime import date
from decimal import Decimal
from typing import Optional, Union

from cashbook.database.base import Database
from cashbook.domain.entities import Category, Entry, EntryKind
from cashbook.domain.errors import (
    InvalidAmountError,
    InvalidCategoryError,
    NotFoundError,
    ValidationError,
    empty_title,
    entry_not_found,
    non_positive_amount,
    too_many_decimals,
    unknown_category,
    unknown_kind,
)
from cashbook.logging_setup import get_logger
from cashbook.utils.amount_parser import to_decimal

logger = get_logger("cashbook.domain.entry")


def validate_title(title: str) -> str:
    """Trim a title and reject blank ones."""
    title = (title or "").strip()
    if not title:
        raise ValidationError(empty_title())
    return title


def validate_amount(amount: Union[Decimal, int, float, str]) -> Decimal:
    """Convert an amount to Decimal and require it to be positive.

    Amounts are stored to the cent, so finer amounts are rejected rather
    than rounded.
    """
    try:
        value = to_decimal(amount)
    except ValueError as e:
        raise InvalidAmountError(str(e))
    if value <= 0:
        raise InvalidAmountError(non_positive_amount(value))
    if value.normalize().as_tuple().exponent < -2:
        raise InvalidAmountError(too_many_decimals(value))
    return value


def validate_category(category: Union[Category, str]) -> Category:
    """Require a category from the fixed set."""
    try:
        return Category(category)
    except ValueError:
        raise InvalidCategoryError(unknown_category(category))


def validate_kind(kind: Union[EntryKind, str]) -> EntryKind:
    """Require Credit or Debit."""
    try:
        return EntryKind(kind)
    except ValueError:
        raise ValidationError(unknown_kind(kind))


class EntryService:
    """Service for managing ledger entries."""

    def __init__(self, db: Database):
        """Initialize entry service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_entry(
        self,
        title: str,
        amount: Union[Decimal, int, float, str],
        category: Union[Category, str],
        date: date,
        kind: Union[EntryKind, str] = EntryKind.DEBIT,
    ) -> str:
        """Create an entry.

        Args:
            title: Display title (surrounding whitespace is trimmed)
            amount: Positive magnitude
            category: Category name or enum member
            date: Transaction date
            kind: Credit or Debit

        Returns:
            Entry ID assigned by the database

        Raises:
            ValidationError: If any field fails validation
        """
        entry_id = self.db.create_entry(
            title=validate_title(title),
            amount=validate_amount(amount),
            category=validate_category(category),
            date=date,
            kind=validate_kind(kind),
        )
        logger.info("Created entry %s", entry_id)
        return entry_id

    def get_entry(self, entry_id: str) -> Optional[Entry]:
        """Get entry by ID.

        Returns:
            Entry entity or None if not found
        """
        return self.db.get_entry(entry_id)

    def require_entry(self, entry_id: str) -> Entry:
        """Get entry by ID.

        Raises:
            NotFoundError: If entry doesn't exist
        """
        entry = self.db.get_entry(entry_id)
        if entry is None:
            raise NotFoundError(entry_not_found(entry_id))
        return entry

    def update_entry(
        self,
        entry_id: str,
        title: Optional[str] = None,
        amount: Optional[Union[Decimal, int, float, str]] = None,
        category: Optional[Union[Category, str]] = None,
        date: Optional[date] = None,
        kind: Optional[Union[EntryKind, str]] = None,
    ) -> Entry:
        """Update entry fields.

        Fields left as None keep their stored value. The merged entry is
        validated as a whole and replaces the stored record.

        Returns:
            The updated entry

        Raises:
            NotFoundError: If entry doesn't exist
            ValidationError: If a supplied field fails validation
        """
        current = self.require_entry(entry_id)

        updated = replace(
            current,
            title=validate_title(title) if title is not None else current.title,
            amount=validate_amount(amount) if amount is not None else current.amount,
            category=(
                validate_category(category) if category is not None else current.category
            ),
            date=date if date is not None else current.date,
            kind=validate_kind(kind) if kind is not None else current.kind,
        )

        self.db.replace_entry(updated)
        logger.info("Updated entry %s", entry_id)
        return updated

    def delete_entry(self, entry_id: str) -> None:
        """Delete an entry.

        Raises:
            NotFoundError: If entry doesn't exist
        """
        self.require_entry(entry_id)
        self.db.delete_entry(entry_id)
        logger.info("Deleted entry %s", entry_id)

    def list_entries(self) -> tuple[Entry, ...]:
        """Return a snapshot of all entries, most recent first."""
        return tuple(self.db.list_entries())
