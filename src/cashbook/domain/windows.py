"""Relative date windows.

Filtering and summaries both decide window membership here, so a filtered
"week" list always sums to the weekly summary figure.
"""

from datetime import date, timedelta
from typing import Optional

from dateutil.relativedelta import relativedelta

from cashbook.domain.entities import DateRange, Entry
from cashbook.utils.date_parser import DateLike, to_civil_date

WEEK_DAYS = 7


def window_start(date_range: DateRange, today: date) -> Optional[date]:
    """Return the first day included in a window, or None for no bound.

    The week window is rolling (today minus seven days), not the ISO week.
    The month window subtracts one calendar month and clamps to the last
    valid day, so 2024-03-31 starts on 2024-02-29 and 2023-03-31 on
    2023-02-28.
    """
    if date_range == DateRange.ALL:
        return None
    if date_range == DateRange.TODAY:
        return today
    if date_range == DateRange.WEEK:
        return today - timedelta(days=WEEK_DAYS)
    if date_range == DateRange.MONTH:
        return today - relativedelta(months=1)
    raise ValueError(f"Unknown date range: {date_range!r}")


def in_window(day: date, date_range: DateRange, today: date) -> bool:
    """Check whether a civil date falls inside a window ending today.

    Entries dated after today never fall inside a bounded window.
    """
    start = window_start(date_range, today)
    if start is None:
        return True
    return start <= day <= today


def civil_today(now: DateLike) -> date:
    """Reduce the caller's clock value to the civil day windows end on."""
    return to_civil_date(now)


def entry_day(entry: Entry) -> date:
    """Return the civil date an entry is bucketed under."""
    return to_civil_date(entry.date)
