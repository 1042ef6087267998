"""Domain model entities for cashbook.

These are pure data classes representing ledger concepts, independent of the
database schema. Aggregation code only ever sees these types.
"""

from dataclasses import dataclass
from datetime import datetime, date
from decimal import Decimal
from enum import Enum
from typing import Optional

ALL_CATEGORIES = "All"


class Category(str, Enum):
    """Fixed set of entry categories."""

    FOOD = "Food"
    TRANSPORT = "Transport"
    UTILITIES = "Utilities"
    ENTERTAINMENT = "Entertainment"
    HEALTHCARE = "Healthcare"
    SHOPPING = "Shopping"
    EDUCATION = "Education"
    OTHER = "Other"

    @classmethod
    def coerce(cls, value) -> "Category":
        """Map any value onto the category set, falling back to OTHER."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return cls.OTHER


class EntryKind(str, Enum):
    """Direction of a monetary movement."""

    CREDIT = "Credit"
    DEBIT = "Debit"


class DateRange(str, Enum):
    """Relative date windows shared by filtering and summaries."""

    ALL = "all"
    TODAY = "today"
    WEEK = "week"
    MONTH = "month"


@dataclass(frozen=True)
class Entry:
    """Ledger entry domain entity."""

    id: str
    title: str
    amount: Decimal
    category: Category
    date: date
    created_at: datetime
    kind: EntryKind


@dataclass(frozen=True)
class FilterOptions:
    """Filter criteria for entry lists.

    A category of None means no category restriction.
    """

    category: Optional[Category] = None
    date_range: DateRange = DateRange.ALL

    @classmethod
    def from_values(
        cls, category: Optional[str] = ALL_CATEGORIES, date_range: Optional[str] = "all"
    ) -> "FilterOptions":
        """Build options from wire values such as ("All", "week").

        Raises:
            ValueError: If date_range is not a known window
        """
        resolved_category = None
        if category is not None and category != ALL_CATEGORIES:
            resolved_category = Category.coerce(category)
        return cls(
            category=resolved_category,
            date_range=DateRange(date_range or DateRange.ALL.value),
        )


@dataclass(frozen=True)
class Summary:
    """Signed totals over the standard windows."""

    daily: Decimal
    weekly: Decimal
    monthly: Decimal
    total: Decimal


@dataclass(frozen=True)
class CategoryTotals:
    """Credit and debit magnitudes for one category."""

    credit: Decimal
    debit: Decimal


@dataclass(frozen=True)
class ChartSlice:
    """One non-empty (category, kind) slice of the category breakdown."""

    category: Category
    kind: EntryKind
    value: Decimal


@dataclass(frozen=True)
class DailyBucket:
    """Net amount for one calendar day of the trend series."""

    day: date
    day_label: str
    net_amount: Decimal
