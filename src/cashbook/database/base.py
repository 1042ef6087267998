"""Abstract database interface."""

from abc import ABC, abstractmethod
from datetime import date
from decimal import Decimal
from typing import Optional

# Import entities directly to avoid circular import through domain/__init__.py
from cashbook.domain.entities import Category, Entry, EntryKind


class Database(ABC):
    """Abstract database interface for cashbook."""

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    @abstractmethod
    def create_entry(
        self,
        title: str,
        amount: Decimal,
        category: Category,
        date: date,
        kind: EntryKind,
    ) -> str:
        """Create a new entry. Returns the assigned entry ID."""
        pass

    @abstractmethod
    def get_entry(self, entry_id: str) -> Optional[Entry]:
        """Get entry by ID."""
        pass

    @abstractmethod
    def replace_entry(self, entry: Entry) -> None:
        """Overwrite the stored entry with the same ID."""
        pass

    @abstractmethod
    def delete_entry(self, entry_id: str) -> None:
        """Delete an entry."""
        pass

    @abstractmethod
    def list_entries(self) -> list[Entry]:
        """List all entries, most recent date first."""
        pass
