"""Entry filtering for list views."""

from typing import Sequence

from cashbook.domain.entities import Category, Entry, FilterOptions
from cashbook.domain.windows import civil_today, entry_day, in_window
from cashbook.logging_setup import get_logger
from cashbook.utils.date_parser import DateLike

logger = get_logger("cashbook.domain.filtering")


def matches(entry: Entry, options: FilterOptions, today) -> bool:
    """Check a single entry against category and window criteria."""
    if options.category is not None:
        if Category.coerce(entry.category) != options.category:
            return False
    return in_window(entry_day(entry), options.date_range, today)


def filter_entries(
    entries: Sequence[Entry], options: FilterOptions, now: DateLike
) -> tuple[Entry, ...]:
    """Select entries matching the options, most recent first.

    The input is never modified. Entries sharing a date keep their relative
    input order.

    Args:
        entries: Snapshot of entries
        options: Category and date window criteria
        now: Clock value the windows end on

    Returns:
        Tuple of matching entries sorted by date descending
    """
    today = civil_today(now)
    selected = [entry for entry in entries if matches(entry, options, today)]
    selected.sort(key=entry_day, reverse=True)
    logger.debug(
        "Filtered %d of %d entries (category=%s, range=%s)",
        len(selected),
        len(entries),
        options.category.value if options.category else "All",
        options.date_range.value,
    )
    return tuple(selected)
