"""Terminal styling for categories and amounts."""

from dataclasses import dataclass
from decimal import Decimal

import click

from cashbook.domain.entities import Category, EntryKind


@dataclass(frozen=True)
class CategoryStyle:
    """Colour used when printing a category."""

    fg: str
    bold: bool = False


# One style per category; a test checks every member has an entry.
CATEGORY_STYLES: dict[Category, CategoryStyle] = {
    Category.FOOD: CategoryStyle(fg="bright_yellow"),
    Category.TRANSPORT: CategoryStyle(fg="bright_blue"),
    Category.UTILITIES: CategoryStyle(fg="bright_cyan"),
    Category.ENTERTAINMENT: CategoryStyle(fg="bright_magenta"),
    Category.HEALTHCARE: CategoryStyle(fg="bright_red"),
    Category.SHOPPING: CategoryStyle(fg="magenta"),
    Category.EDUCATION: CategoryStyle(fg="green"),
    Category.OTHER: CategoryStyle(fg="white"),
}


def category_style(category) -> CategoryStyle:
    """Return the style for a category; unknown values use Other's."""
    return CATEGORY_STYLES[Category.coerce(category)]


def styled_category(category, width: int = 0) -> str:
    """Render a category name padded to width and coloured."""
    style = category_style(category)
    name = Category.coerce(category).value
    return click.style(f"{name:<{width}}", fg=style.fg, bold=style.bold)


def format_money(amount: Decimal) -> str:
    """Format an amount with two decimals and thousands separators."""
    return f"{amount:,.2f}"


def format_signed(amount: Decimal) -> str:
    """Format a net amount with an explicit sign."""
    sign = "+" if amount >= 0 else "-"
    return f"{sign}{abs(amount):,.2f}"


def net_kind(amount: Decimal) -> EntryKind:
    """Label a net figure as Credit when non-negative, otherwise Debit."""
    return EntryKind.CREDIT if amount >= 0 else EntryKind.DEBIT


def kind_color(kind: EntryKind) -> str:
    return "green" if kind == EntryKind.CREDIT else "red"
