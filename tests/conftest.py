"""Shared pytest fixtures for cashbook tests."""

import tempfile
import os
from datetime import date, datetime, timedelta, UTC
from decimal import Decimal

import pytest

from cashbook.database.factories import create_sqlite_database
from cashbook.domain.entities import Category, Entry, EntryKind
from cashbook.domain.entry import EntryService
from cashbook.domain.reports import ReportService

TODAY = date(2024, 3, 15)


@pytest.fixture
def today():
    """Fixed civil date used as 'now' across tests (a Friday)."""
    return TODAY


@pytest.fixture
def clock():
    """Clock returning noon on the fixed test day."""
    return lambda: datetime(TODAY.year, TODAY.month, TODAY.day, 12, 0)


@pytest.fixture
def make_entry():
    """Factory for Entry entities with sensible defaults."""
    counter = iter(range(1, 10_000))

    def factory(
        amount="10.00",
        kind=EntryKind.DEBIT,
        category=Category.FOOD,
        day=TODAY,
        title="Entry",
        entry_id=None,
    ) -> Entry:
        return Entry(
            id=entry_id or f"e{next(counter)}",
            title=title,
            amount=Decimal(amount) if isinstance(amount, str) else amount,
            category=category,
            date=day,
            created_at=datetime(2024, 1, 1, tzinfo=UTC),
            kind=kind,
        )

    return factory


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def entry_service(temp_db):
    """Create an EntryService with a temporary database."""
    return EntryService(temp_db)


@pytest.fixture
def report_service(temp_db, clock):
    """Create a ReportService with a temporary database and fixed clock."""
    return ReportService(temp_db, clock=clock)


@pytest.fixture
def sample_entries(entry_service, today):
    """Store a small ledger spanning several windows and return the IDs."""
    return {
        "lunch": entry_service.create_entry(
            title="Lunch", amount="100.00", category="Food", date=today, kind="Debit"
        ),
        "refund": entry_service.create_entry(
            title="Refund", amount="50.00", category="Food", date=today, kind="Credit"
        ),
        "bus": entry_service.create_entry(
            title="Bus pass",
            amount="30.00",
            category="Transport",
            date=today - timedelta(days=3),
            kind="Debit",
        ),
        "salary": entry_service.create_entry(
            title="Salary",
            amount="2000.00",
            category="Other",
            date=today - timedelta(days=20),
            kind="Credit",
        ),
        "course": entry_service.create_entry(
            title="Course",
            amount="250.00",
            category="Education",
            date=today - timedelta(days=60),
            kind="Debit",
        ),
    }


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
