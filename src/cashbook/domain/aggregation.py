"""Signed summaries and per-category totals."""

from decimal import Decimal, ROUND_HALF_UP
from typing import Sequence

from cashbook.domain.entities import (
    Category,
    CategoryTotals,
    ChartSlice,
    DateRange,
    Entry,
    EntryKind,
    Summary,
)
from cashbook.domain.windows import civil_today, entry_day, in_window
from cashbook.logging_setup import get_logger
from cashbook.utils.amount_parser import to_decimal
from cashbook.utils.date_parser import DateLike

logger = get_logger("cashbook.domain.aggregation")

ZERO = Decimal("0")
CENT = Decimal("0.01")


def magnitude(entry: Entry) -> Decimal:
    """Return an entry's amount as a non-negative Decimal.

    Amounts are validated before they are stored, so a non-numeric or
    non-positive value here means the snapshot came from somewhere else.
    Such amounts count as zero instead of corrupting the running sums.
    """
    try:
        amount = to_decimal(entry.amount)
    except ValueError:
        logger.warning("Entry %s has non-numeric amount %r; counting as 0", entry.id, entry.amount)
        return ZERO
    if amount <= 0:
        logger.warning("Entry %s has non-positive amount %s; counting as 0", entry.id, amount)
        return ZERO
    return amount


def signed_value(entry: Entry) -> Decimal:
    """Return the amount with the sign implied by the entry kind.

    Credits are positive and debits negative. All net figures go through
    this function.
    """
    amount = magnitude(entry)
    if entry.kind == EntryKind.CREDIT:
        return amount
    return -amount


def quantize_money(value: Decimal) -> Decimal:
    """Round a total to cents for display."""
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def summarize(entries: Sequence[Entry], now: DateLike) -> Summary:
    """Sum signed values over the today, week and month windows and overall.

    Args:
        entries: Snapshot of entries
        now: Clock value the windows end on

    Returns:
        Summary with unrounded Decimal totals
    """
    today = civil_today(now)
    totals = {
        DateRange.TODAY: ZERO,
        DateRange.WEEK: ZERO,
        DateRange.MONTH: ZERO,
    }
    total = ZERO

    for entry in entries:
        value = signed_value(entry)
        total += value
        day = entry_day(entry)
        for date_range in totals:
            if in_window(day, date_range, today):
                totals[date_range] += value

    return Summary(
        daily=totals[DateRange.TODAY],
        weekly=totals[DateRange.WEEK],
        monthly=totals[DateRange.MONTH],
        total=total,
    )


def category_totals(entries: Sequence[Entry]) -> dict[Category, CategoryTotals]:
    """Route each amount into the credit or debit side of its category.

    Credits and debits are never netted against each other and both sides
    hold positive magnitudes. Only categories with at least one entry are
    present, in category declaration order. Unknown categories count
    towards Other.
    """
    credit: dict[Category, Decimal] = {}
    debit: dict[Category, Decimal] = {}

    for entry in entries:
        category = Category.coerce(entry.category)
        if category != entry.category:
            logger.warning(
                "Entry %s has unknown category %r; counting as %s",
                entry.id,
                entry.category,
                category.value,
            )
        credit.setdefault(category, ZERO)
        debit.setdefault(category, ZERO)
        if entry.kind == EntryKind.CREDIT:
            credit[category] += magnitude(entry)
        else:
            debit[category] += magnitude(entry)

    return {
        category: CategoryTotals(credit=credit[category], debit=debit[category])
        for category in Category
        if category in credit
    }


def category_chart_slices(entries: Sequence[Entry]) -> tuple[ChartSlice, ...]:
    """Flatten category totals into chart slices, skipping empty sides."""
    slices: list[ChartSlice] = []
    for category, totals in category_totals(entries).items():
        if totals.credit:
            slices.append(ChartSlice(category, EntryKind.CREDIT, totals.credit))
        if totals.debit:
            slices.append(ChartSlice(category, EntryKind.DEBIT, totals.debit))
    return tuple(slices)
