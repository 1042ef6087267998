"""CLI helpers for category and date window filters."""

import click

from cashbook.domain.entities import ALL_CATEGORIES, Category, DateRange, FilterOptions

CATEGORY_CHOICES = [category.value for category in Category]
RANGE_CHOICES = [date_range.value for date_range in DateRange]


def filter_options(command):
    """Add --category and --range options to a command."""
    command = click.option(
        "--range",
        "date_range",
        type=click.Choice(RANGE_CHOICES, case_sensitive=False),
        default=DateRange.ALL.value,
        show_default=True,
        help="Date window: today, week (last 7 days), month (since same day last month) or all",
    )(command)
    command = click.option(
        "--category",
        type=click.Choice([ALL_CATEGORIES, *CATEGORY_CHOICES], case_sensitive=False),
        default=ALL_CATEGORIES,
        show_default=True,
        help="Only show entries in this category",
    )(command)
    return command


def resolve_filter_options(category: str, date_range: str) -> FilterOptions:
    """Turn CLI option values into FilterOptions."""
    return FilterOptions.from_values(category=category, date_range=date_range.lower())
