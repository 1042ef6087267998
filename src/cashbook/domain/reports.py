"""Report domain service.

Takes a snapshot from the database and a reading of the clock, then derives
every view through the pure functions of the domain package.
"""

from datetime import date, datetime
from pathlib import Path
from typing import Callable, Optional, Union

from cashbook.database.base import Database
from cashbook.domain.aggregation import category_chart_slices, category_totals, summarize
from cashbook.domain.entities import (
    Category,
    CategoryTotals,
    ChartSlice,
    DailyBucket,
    Entry,
    FilterOptions,
    Summary,
)
from cashbook.domain.export import FileSink, export_filename, to_delimited_text
from cashbook.domain.filtering import filter_entries
from cashbook.domain.series import daily_series
from cashbook.domain.windows import WEEK_DAYS, civil_today

Clock = Callable[[], Union[date, datetime]]


class ReportService:
    """Service for building ledger views."""

    def __init__(self, db: Database, clock: Clock = datetime.now):
        """Initialize report service.

        Args:
            db: Database instance
            clock: Callable returning the current date or time
        """
        self.db = db
        self.clock = clock

    def today(self) -> date:
        """Read the clock once and return the civil day."""
        return civil_today(self.clock())

    def snapshot(self) -> tuple[Entry, ...]:
        """Return all stored entries."""
        return tuple(self.db.list_entries())

    def filtered(self, options: Optional[FilterOptions] = None) -> tuple[Entry, ...]:
        """Return entries matching the options, most recent first."""
        return filter_entries(self.snapshot(), options or FilterOptions(), self.today())

    def summary(self) -> Summary:
        """Return today, week, month and overall net totals."""
        return summarize(self.snapshot(), self.today())

    def category_totals(self) -> dict[Category, CategoryTotals]:
        """Return credit and debit totals per category."""
        return category_totals(self.snapshot())

    def chart_slices(self) -> tuple[ChartSlice, ...]:
        """Return the non-empty category breakdown slices."""
        return category_chart_slices(self.snapshot())

    def daily_series(self, window_days: int = WEEK_DAYS) -> tuple[DailyBucket, ...]:
        """Return the net amount per day for the trailing window."""
        return daily_series(self.snapshot(), self.today(), window_days)

    def export_text(self, options: Optional[FilterOptions] = None) -> str:
        """Render the filtered entries as CSV text."""
        return to_delimited_text(self.filtered(options))

    def export(self, sink: FileSink, options: Optional[FilterOptions] = None) -> Path:
        """Hand the CSV export to a sink under the dated file name.

        Returns:
            Location reported by the sink
        """
        today = self.today()
        entries = filter_entries(self.snapshot(), options or FilterOptions(), today)
        return sink(export_filename(today), to_delimited_text(entries))
