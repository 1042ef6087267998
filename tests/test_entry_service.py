"""Tests for the entry domain service."""

from datetime import date
from decimal import Decimal

import pytest

from cashbook.domain.entities import Category, EntryKind
from cashbook.domain.errors import (
    InvalidAmountError,
    InvalidCategoryError,
    NotFoundError,
    ValidationError,
)


def test_create_and_get_entry(entry_service):
    entry_id = entry_service.create_entry(
        title="  Groceries  ",
        amount="45.20",
        category="Food",
        date=date(2024, 3, 15),
        kind="Debit",
    )
    entry = entry_service.get_entry(entry_id)
    assert entry is not None
    assert entry.id == entry_id
    assert entry.title == "Groceries"
    assert entry.amount == Decimal("45.20")
    assert entry.category == Category.FOOD
    assert entry.date == date(2024, 3, 15)
    assert entry.kind == EntryKind.DEBIT


def test_create_defaults_to_debit(entry_service):
    entry_id = entry_service.create_entry(
        title="Bus", amount=Decimal("2.5"), category=Category.TRANSPORT, date=date(2024, 3, 1)
    )
    assert entry_service.require_entry(entry_id).kind == EntryKind.DEBIT


def test_ids_are_unique(entry_service):
    ids = {
        entry_service.create_entry(title=f"e{i}", amount="1", category="Other", date=date(2024, 1, 1))
        for i in range(5)
    }
    assert len(ids) == 5


@pytest.mark.parametrize("title", ["", "   ", None])
def test_rejects_blank_title(entry_service, title):
    with pytest.raises(ValidationError, match="Title"):
        entry_service.create_entry(title=title, amount="1", category="Food", date=date(2024, 1, 1))


@pytest.mark.parametrize("amount", ["0", "-10", "abc", 0, -1.5])
def test_rejects_bad_amount(entry_service, amount):
    with pytest.raises(InvalidAmountError):
        entry_service.create_entry(title="x", amount=amount, category="Food", date=date(2024, 1, 1))


@pytest.mark.parametrize("amount", ["0.004", "12.345", Decimal("0.001")])
def test_rejects_sub_cent_amount(entry_service, amount):
    with pytest.raises(InvalidAmountError, match="2 decimal places"):
        entry_service.create_entry(title="Tip", amount=amount, category="Food", date=date(2024, 1, 1))
    assert entry_service.list_entries() == ()


@pytest.mark.parametrize("amount", ["12.50", "12.500", "1e3"])
def test_accepts_whole_cent_amount(entry_service, amount):
    entry_id = entry_service.create_entry(
        title="Tip", amount=amount, category="Food", date=date(2024, 1, 1)
    )
    stored = entry_service.require_entry(entry_id).amount
    assert stored > 0
    assert stored == Decimal(amount)


def test_rejects_unknown_category(entry_service):
    with pytest.raises(InvalidCategoryError, match="Pets"):
        entry_service.create_entry(title="x", amount="1", category="Pets", date=date(2024, 1, 1))


def test_rejects_unknown_kind(entry_service):
    with pytest.raises(ValidationError, match="Refund"):
        entry_service.create_entry(
            title="x", amount="1", category="Food", date=date(2024, 1, 1), kind="Refund"
        )


def test_validation_errors_are_value_errors(entry_service):
    with pytest.raises(ValueError):
        entry_service.create_entry(title="x", amount="0", category="Food", date=date(2024, 1, 1))


def test_nothing_stored_when_validation_fails(entry_service):
    with pytest.raises(ValidationError):
        entry_service.create_entry(title="x", amount="-1", category="Food", date=date(2024, 1, 1))
    assert entry_service.list_entries() == ()


def test_update_entry_merges_fields(entry_service):
    entry_id = entry_service.create_entry(
        title="Lunch", amount="12", category="Food", date=date(2024, 3, 1)
    )
    updated = entry_service.update_entry(entry_id, amount="15.50", kind="Credit")

    assert updated.title == "Lunch"
    assert updated.amount == Decimal("15.50")
    assert updated.kind == EntryKind.CREDIT

    stored = entry_service.require_entry(entry_id)
    assert stored.amount == Decimal("15.50")
    assert stored.kind == EntryKind.CREDIT
    assert stored.category == Category.FOOD
    assert stored.date == date(2024, 3, 1)


def test_update_entry_all_fields(entry_service):
    entry_id = entry_service.create_entry(
        title="Lunch", amount="12", category="Food", date=date(2024, 3, 1)
    )
    entry_service.update_entry(
        entry_id,
        title=" Movie ",
        amount="9",
        category="Entertainment",
        date=date(2024, 3, 2),
        kind="Debit",
    )
    stored = entry_service.require_entry(entry_id)
    assert stored.title == "Movie"
    assert stored.category == Category.ENTERTAINMENT
    assert stored.date == date(2024, 3, 2)


def test_update_rejects_invalid_amount(entry_service):
    entry_id = entry_service.create_entry(
        title="Lunch", amount="12", category="Food", date=date(2024, 3, 1)
    )
    with pytest.raises(InvalidAmountError):
        entry_service.update_entry(entry_id, amount="0")
    assert entry_service.require_entry(entry_id).amount == Decimal("12")


def test_update_missing_entry(entry_service):
    with pytest.raises(NotFoundError):
        entry_service.update_entry("missing", title="x")


def test_delete_entry(entry_service):
    entry_id = entry_service.create_entry(
        title="Lunch", amount="12", category="Food", date=date(2024, 3, 1)
    )
    entry_service.delete_entry(entry_id)
    assert entry_service.get_entry(entry_id) is None


def test_delete_missing_entry(entry_service):
    with pytest.raises(NotFoundError, match="missing"):
        entry_service.delete_entry("missing")


def test_list_entries_most_recent_first(entry_service):
    for day in (5, 20, 1):
        entry_service.create_entry(
            title=f"day {day}", amount="1", category="Food", date=date(2024, 3, day)
        )
    assert [e.title for e in entry_service.list_entries()] == ["day 20", "day 5", "day 1"]
