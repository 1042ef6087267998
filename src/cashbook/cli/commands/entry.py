"""Entry management commands."""

import json

import click

from cashbook.cli.error_handling import fail, handle_domain_error
from cashbook.cli.filter_options import CATEGORY_CHOICES, filter_options, resolve_filter_options
from cashbook.cli.styles import format_money, format_signed, kind_color, styled_category
from cashbook.domain.aggregation import ZERO, magnitude, signed_value
from cashbook.domain.entities import EntryKind
from cashbook.domain.entry import EntryService
from cashbook.domain.errors import DomainError
from cashbook.domain.filtering import filter_entries
from cashbook.domain.records import entry_to_record
from cashbook.domain.windows import civil_today
from cashbook.utils.amount_parser import parse_amount
from cashbook.utils.date_parser import parse_date

KIND_CHOICES = [kind.value for kind in EntryKind]


@click.group()
def entry_group():
    """Manage entries."""
    pass


@entry_group.command("list")
@filter_options
@click.option("--json", "as_json", is_flag=True, help="Print entries as JSON records")
@click.pass_context
def list_entries(ctx, category: str, date_range: str, as_json: bool):
    """List entries, most recent first.

    Examples:
        cashbook entry list --range week
        cashbook entry list --category Food --json
    """
    db = ctx.obj["db"]
    service = EntryService(db)
    options = resolve_filter_options(category, date_range)
    entries = filter_entries(service.list_entries(), options, civil_today(ctx.obj["clock"]()))

    if as_json:
        click.echo(json.dumps([entry_to_record(e) for e in entries], indent=2))
        return

    if not entries:
        click.echo("No entries found.")
        return

    click.echo(f"\nFound {len(entries)} entr{'y' if len(entries) == 1 else 'ies'}:")
    click.echo("-" * 110)
    click.echo(
        f"{'ID':<33} {'Date':<11} {'Type':<7} {'Amount':>12}  {'Category':<14} {'Title':<30}"
    )
    click.echo("-" * 110)

    for e in entries:
        amount_str = click.style(
            f"{format_signed(signed_value(e)):>12}", fg=kind_color(e.kind)
        )
        click.echo(
            f"{e.id:<33} {str(e.date):<11} {e.kind.value:<7} {amount_str}  "
            f"{styled_category(e.category, 14)} {e.title[:30]:<30}"
        )

    credits = sum((magnitude(e) for e in entries if e.kind == EntryKind.CREDIT), ZERO)
    debits = sum((magnitude(e) for e in entries if e.kind == EntryKind.DEBIT), ZERO)
    click.echo("-" * 110)
    click.echo(
        f"{'TOTAL':<33} Credits: {format_money(credits)} | Debits: {format_money(debits)} | "
        f"Net: {format_signed(credits - debits)} | Count: {len(entries)}"
    )


@entry_group.command("update")
@click.argument("entry_id")
@click.option("--title", help="Entry title")
@click.option("--amount", help="Amount as a positive number (e.g., 123.45)")
@click.option(
    "--category",
    type=click.Choice(CATEGORY_CHOICES, case_sensitive=False),
    help="Entry category",
)
@click.option("--date", help="Entry date (YYYY-MM-DD or relative like 'today', 'yesterday')")
@click.option(
    "--type", "kind", type=click.Choice(KIND_CHOICES, case_sensitive=False), help="Credit or Debit"
)
@click.pass_context
def update_entry(
    ctx,
    entry_id: str,
    title: str | None,
    amount: str | None,
    category: str | None,
    date: str | None,
    kind: str | None,
) -> None:
    """Update an entry.

    Updates only the fields that are provided.

    Examples:
        cashbook entry update 3f2a... --amount 75.00
        cashbook entry update 3f2a... --type Credit --category Other
    """
    db = ctx.obj["db"]
    service = EntryService(db)

    entry_date = None
    if date is not None:
        try:
            entry_date = parse_date(date, today=civil_today(ctx.obj["clock"]()))
        except ValueError as e:
            fail(ctx, f"Invalid date format: {e}")

    entry_amount = None
    if amount is not None:
        try:
            entry_amount = parse_amount(amount)
        except ValueError as e:
            fail(ctx, f"Invalid amount format: {e}")

    try:
        service.update_entry(
            entry_id,
            title=title,
            amount=entry_amount,
            category=category,
            date=entry_date,
            kind=kind,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Updated entry {entry_id}")


@entry_group.command("delete")
@click.argument("entry_id")
@click.option("--yes", "-y", is_flag=True, help="Delete without asking for confirmation")
@click.pass_context
def delete_entry(ctx, entry_id: str, yes: bool) -> None:
    """Delete an entry.

    Examples:
        cashbook entry delete 3f2a...
    """
    db = ctx.obj["db"]
    service = EntryService(db)

    try:
        entry = service.require_entry(entry_id)
    except DomainError as e:
        handle_domain_error(ctx, e)

    if not yes and not click.confirm(f"Are you sure you want to delete '{entry.title}'?"):
        click.echo("Deletion cancelled.")
        return

    service.delete_entry(entry_id)
    click.echo(f"Deleted entry {entry_id}")


def register_commands(cli: click.Group) -> None:
    """Register entry commands with main CLI."""
    cli.add_command(entry_group, name="entry")
