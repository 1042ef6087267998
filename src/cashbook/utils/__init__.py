"""Utility functions for cashbook."""

from cashbook.utils.date_parser import parse_date, to_calendar_date, to_civil_date
from cashbook.utils.amount_parser import parse_amount, to_decimal

__all__ = ["parse_date", "to_calendar_date", "to_civil_date", "parse_amount", "to_decimal"]
