"""Mapper functions to convert between domain models and SQLAlchemy models."""

from cashbook.domain import entities as domain
from cashbook.database.models import Entry as ORMEntry


def entry_to_domain(orm_entry: ORMEntry) -> domain.Entry:
    """Convert SQLAlchemy Entry model to domain Entry entity.

    Stored categories outside the fixed set are read back as Other.
    """
    return domain.Entry(
        id=orm_entry.id,
        title=orm_entry.title,
        amount=orm_entry.amount,
        category=domain.Category.coerce(orm_entry.category),
        date=orm_entry.date,
        created_at=orm_entry.created_at,
        kind=domain.EntryKind(orm_entry.kind),
    )


def apply_entry(orm_entry: ORMEntry, entry: domain.Entry) -> None:
    """Copy the mutable fields of a domain entry onto an ORM row."""
    orm_entry.title = entry.title
    orm_entry.amount = entry.amount
    orm_entry.category = domain.Category.coerce(entry.category).value
    orm_entry.date = entry.date
    orm_entry.kind = domain.EntryKind(entry.kind).value
