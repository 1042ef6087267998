"""Daily net series for trend charts."""

from datetime import date, timedelta
from decimal import Decimal
from typing import Sequence

from cashbook.domain.aggregation import ZERO, signed_value
from cashbook.domain.entities import DailyBucket, Entry
from cashbook.domain.windows import WEEK_DAYS, civil_today, entry_day
from cashbook.logging_setup import get_logger
from cashbook.utils.date_parser import DateLike

logger = get_logger("cashbook.domain.series")


def daily_series(
    entries: Sequence[Entry], now: DateLike, window_days: int = WEEK_DAYS
) -> tuple[DailyBucket, ...]:
    """Bucket entries into the trailing window of days ending today.

    Always returns exactly ``window_days`` buckets, oldest first. Days with
    no entries get a zero bucket so the chart keeps a fixed length.

    Raises:
        ValueError: If window_days is less than one
    """
    if window_days < 1:
        raise ValueError(f"window_days must be at least 1, got {window_days}")

    today = civil_today(now)
    days = [today - timedelta(days=offset) for offset in range(window_days - 1, -1, -1)]
    net: dict[date, Decimal] = {day: ZERO for day in days}

    for entry in entries:
        day = entry_day(entry)
        if day in net:
            net[day] += signed_value(entry)

    logger.debug("Binned %d entries into %d days ending %s", len(entries), window_days, today)
    return tuple(
        DailyBucket(day=day, day_label=day.strftime("%a"), net_amount=net[day])
        for day in days
    )


def series_bounds(series: Sequence[DailyBucket]) -> tuple[Decimal, Decimal]:
    """Return padded (low, high) axis limits that always include zero.

    Padding is a tenth of the span, or 100 when every bucket is zero.
    """
    values = [bucket.net_amount for bucket in series]
    low = min([ZERO, *values])
    high = max([ZERO, *values])
    padding = abs(high - low) / 10 or Decimal("100")
    return low - padding, high + padding
