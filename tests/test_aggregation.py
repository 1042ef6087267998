"""Tests for summaries and category totals."""

from datetime import timedelta
from decimal import Decimal

import pytest

from cashbook.domain.aggregation import (
    category_chart_slices,
    category_totals,
    magnitude,
    quantize_money,
    signed_value,
    summarize,
)
from cashbook.domain.entities import Category, CategoryTotals, ChartSlice, EntryKind, Summary


class TestSignedValue:
    """Tests for the sign conversion."""

    def test_credit_is_positive(self, make_entry):
        assert signed_value(make_entry("12.50", EntryKind.CREDIT)) == Decimal("12.50")

    def test_debit_is_negative(self, make_entry):
        assert signed_value(make_entry("12.50", EntryKind.DEBIT)) == Decimal("-12.50")

    @pytest.mark.parametrize("bad_amount", [Decimal("0"), Decimal("-5"), "abc", None])
    def test_invalid_amount_counts_as_zero(self, make_entry, bad_amount):
        entry = make_entry(Decimal("1"))
        from dataclasses import replace

        entry = replace(entry, amount=bad_amount)
        assert magnitude(entry) == Decimal("0")
        assert signed_value(entry) == Decimal("0")

    def test_float_amount_has_no_binary_noise(self, make_entry):
        assert magnitude(make_entry(0.1)) == Decimal("0.1")


class TestSummarize:
    """Tests for window summaries."""

    def test_empty_snapshot(self, today):
        zero = Decimal("0")
        assert summarize([], today) == Summary(daily=zero, weekly=zero, monthly=zero, total=zero)

    def test_debit_and_credit_today(self, make_entry, today):
        entries = [
            make_entry("100", EntryKind.DEBIT, Category.FOOD),
            make_entry("50", EntryKind.CREDIT, Category.FOOD),
        ]
        summary = summarize(entries, today)
        assert summary.daily == Decimal("-50")
        assert summary.weekly == Decimal("-50")
        assert summary.monthly == Decimal("-50")
        assert summary.total == Decimal("-50")

    def test_windows_nest(self, make_entry, today):
        entries = [
            make_entry("1", EntryKind.CREDIT, day=today),
            make_entry("10", EntryKind.CREDIT, day=today - timedelta(days=7)),
            make_entry("100", EntryKind.CREDIT, day=today - timedelta(days=29)),
            make_entry("1000", EntryKind.CREDIT, day=today - timedelta(days=400)),
        ]
        summary = summarize(entries, today)
        assert summary.daily == Decimal("1")
        assert summary.weekly == Decimal("11")
        assert summary.monthly == Decimal("111")
        assert summary.total == Decimal("1111")

    def test_total_includes_future_entries(self, make_entry, today):
        entries = [make_entry("5", EntryKind.CREDIT, day=today + timedelta(days=3))]
        summary = summarize(entries, today)
        assert summary.daily == summary.weekly == summary.monthly == Decimal("0")
        assert summary.total == Decimal("5")

    def test_sign_conservation(self, make_entry, today):
        entries = [
            make_entry("19.99", EntryKind.DEBIT, day=today - timedelta(days=d))
            for d in range(0, 90, 7)
        ] + [make_entry("250.01", EntryKind.CREDIT, day=today - timedelta(days=45))]
        assert summarize(entries, today).total == sum(signed_value(e) for e in entries)

    def test_decimal_sums_are_exact(self, make_entry, today):
        entries = [make_entry(0.1, EntryKind.CREDIT) for _ in range(3)]
        assert summarize(entries, today).total == Decimal("0.3")


class TestCategoryTotals:
    """Tests for per-category credit/debit routing."""

    def test_routes_without_netting(self, make_entry):
        entries = [
            make_entry("100", EntryKind.DEBIT, Category.FOOD),
            make_entry("50", EntryKind.CREDIT, Category.FOOD),
        ]
        totals = category_totals(entries)
        assert totals == {
            Category.FOOD: CategoryTotals(credit=Decimal("50"), debit=Decimal("100"))
        }

    def test_only_present_categories_in_enum_order(self, make_entry):
        entries = [
            make_entry("5", category=Category.OTHER),
            make_entry("5", category=Category.FOOD),
            make_entry("5", category=Category.HEALTHCARE),
        ]
        assert list(category_totals(entries)) == [
            Category.FOOD,
            Category.HEALTHCARE,
            Category.OTHER,
        ]

    def test_unknown_category_goes_to_other(self, make_entry):
        totals = category_totals([make_entry("7", category="Pets")])
        assert totals == {Category.OTHER: CategoryTotals(credit=Decimal("0"), debit=Decimal("7"))}

    def test_totals_are_non_negative(self, make_entry):
        entries = [
            make_entry("3", EntryKind.DEBIT, Category.SHOPPING),
            make_entry("-4", EntryKind.CREDIT, Category.SHOPPING),
            make_entry("8", EntryKind.CREDIT, Category.EDUCATION),
        ]
        for totals in category_totals(entries).values():
            assert totals.credit >= 0
            assert totals.debit >= 0

    def test_empty(self):
        assert category_totals([]) == {}


class TestChartSlices:
    """Tests for chart slices."""

    def test_empty_sides_are_omitted(self, make_entry):
        entries = [
            make_entry("100", EntryKind.DEBIT, Category.FOOD),
            make_entry("50", EntryKind.CREDIT, Category.FOOD),
            make_entry("20", EntryKind.DEBIT, Category.TRANSPORT),
        ]
        assert category_chart_slices(entries) == (
            ChartSlice(Category.FOOD, EntryKind.CREDIT, Decimal("50")),
            ChartSlice(Category.FOOD, EntryKind.DEBIT, Decimal("100")),
            ChartSlice(Category.TRANSPORT, EntryKind.DEBIT, Decimal("20")),
        )


@pytest.mark.parametrize(
    "value, expected",
    [
        (Decimal("1.005"), Decimal("1.01")),
        (Decimal("-1.005"), Decimal("-1.01")),
        (Decimal("2"), Decimal("2.00")),
    ],
)
def test_quantize_money(value, expected):
    assert quantize_money(value) == expected
