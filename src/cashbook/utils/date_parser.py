"""Date parsing utilities."""

from datetime import date, datetime, time, timedelta, tzinfo
from typing import Optional, Union

from dateutil import parser as date_parser
from dateutil import tz as date_tz
from dateutil.relativedelta import relativedelta

DateLike = Union[date, datetime, str]


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO 8601 timestamp, falling back to free-form parsing.

    Raises:
        ValueError: If the string cannot be parsed
    """
    try:
        return date_parser.isoparse(value.strip())
    except ValueError:
        try:
            return date_parser.parse(value)
        except (ValueError, OverflowError) as e:
            raise ValueError(f"Could not parse date '{value}': {e}")


def to_civil_date(value: DateLike, tz: Optional[tzinfo] = None) -> date:
    """Reduce a date, timestamp or date string to a civil (calendar) date.

    Plain dates pass through unchanged. Naive timestamps are truncated as-is.
    Timezone-aware timestamps are first converted to ``tz`` (the local zone
    when omitted) so that an instant always lands on the day a user in that
    zone would see on their calendar.

    Args:
        value: date, datetime or ISO-like string
        tz: Target timezone for aware timestamps

    Returns:
        Date object

    Raises:
        ValueError: If value is a string that cannot be parsed
        TypeError: If value is not a date, datetime or string
    """
    if isinstance(value, str):
        value = parse_timestamp(value)

    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(tz or date_tz.tzlocal())
        return value.date()

    if isinstance(value, date):
        return value

    raise TypeError(f"Expected date, datetime or str, got {type(value).__name__}")


def to_calendar_date(value: DateLike) -> date:
    """Read the calendar date named by a stored date field.

    Date-only values often arrive serialized as midnight timestamps, e.g.
    "2024-03-15T00:00:00.000Z". Those keep their own calendar date in every
    zone. Any other timestamp is an instant and goes through to_civil_date.
    """
    if isinstance(value, str):
        value = parse_timestamp(value)
    if isinstance(value, datetime) and value.time() == time(0):
        return value.date()
    return to_civil_date(value)


def parse_date(date_str: str, today: Optional[date] = None) -> date:
    """Parse a date string into a date object.

    Supports absolute dates ("2024-01-15", "January 15, 2024") and relative
    dates ("today", "yesterday", "last month", "this week", ...).

    Args:
        date_str: Date string in various formats
        today: Reference day for relative dates (defaults to date.today())

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    date_str = date_str.strip().lower()
    today = today or date.today()

    relative_dates = {
        "today": today,
        "yesterday": today - timedelta(days=1),
        "tomorrow": today + timedelta(days=1),
    }

    if date_str in relative_dates:
        return relative_dates[date_str]

    if date_str.startswith("last "):
        period = date_str[5:]
        if period == "month":
            return (today - relativedelta(months=1)).replace(day=1)
        elif period == "year":
            return today.replace(month=1, day=1) - relativedelta(years=1)
        elif period == "week":
            # Monday of last week
            return today - timedelta(days=today.weekday() + 7)

    elif date_str.startswith("this "):
        period = date_str[5:]
        if period == "month":
            return today.replace(day=1)
        elif period == "year":
            return today.replace(month=1, day=1)
        elif period == "week":
            return today - timedelta(days=today.weekday())

    try:
        dt = date_parser.parse(date_str)
        return dt.date()
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")
