"""Add entry command."""

import click

from cashbook.cli.error_handling import fail, handle_domain_error
from cashbook.cli.filter_options import CATEGORY_CHOICES
from cashbook.cli.styles import format_money
from cashbook.domain.entities import Category, EntryKind
from cashbook.domain.entry import EntryService
from cashbook.domain.errors import DomainError
from cashbook.domain.windows import civil_today
from cashbook.utils.amount_parser import parse_amount
from cashbook.utils.date_parser import parse_date

KIND_CHOICES = [kind.value for kind in EntryKind]


@click.command("add")
@click.option("--title", required=True, help="Entry title")
@click.option("--amount", required=True, help="Amount as a positive number (e.g., 123.45)")
@click.option(
    "--category",
    type=click.Choice(CATEGORY_CHOICES, case_sensitive=False),
    default=Category.FOOD.value,
    show_default=True,
    help="Entry category",
)
@click.option(
    "--date",
    default="today",
    show_default=True,
    help="Entry date (YYYY-MM-DD or relative like 'today', 'yesterday')",
)
@click.option(
    "--type",
    "kind",
    type=click.Choice(KIND_CHOICES, case_sensitive=False),
    default=EntryKind.DEBIT.value,
    show_default=True,
    help="Credit adds to your balance, Debit takes from it",
)
@click.pass_context
def add_entry(ctx, title: str, amount: str, category: str, date: str, kind: str):
    """Record a new entry.

    Examples:
        cashbook add --title "Groceries" --amount 45.20 --category Food
        cashbook add --title "Salary" --amount 3000 --category Other --type Credit
    """
    db = ctx.obj["db"]
    service = EntryService(db)
    today = civil_today(ctx.obj["clock"]())

    try:
        entry_date = parse_date(date, today=today)
    except ValueError as e:
        fail(ctx, f"Invalid date format: {e}")

    try:
        entry_amount = parse_amount(amount)
    except ValueError as e:
        fail(ctx, f"Invalid amount format: {e}")

    try:
        entry_id = service.create_entry(
            title=title,
            amount=entry_amount,
            category=category,
            date=entry_date,
            kind=kind,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)

    entry = service.require_entry(entry_id)
    click.echo(f"Created entry {entry.id}")
    click.echo(f"  Title: {entry.title}")
    click.echo(f"  Date: {entry.date}")
    click.echo(f"  Amount: {format_money(entry.amount)} ({entry.kind.value})")
    click.echo(f"  Category: {entry.category.value}")


def register_commands(cli):
    """Register add command with main CLI."""
    cli.add_command(add_entry)
