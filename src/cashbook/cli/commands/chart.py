"""Chart commands."""

from decimal import Decimal

import click

from cashbook.cli.styles import format_money, format_signed, kind_color, styled_category
from cashbook.domain.reports import ReportService
from cashbook.domain.series import series_bounds
from cashbook.domain.windows import WEEK_DAYS

BAR_WIDTH = 30


def _bar(value: Decimal, scale: Decimal) -> str:
    if not scale:
        return ""
    length = int((abs(value) / scale * BAR_WIDTH).to_integral_value())
    return "#" * length


@click.command("chart")
@click.option(
    "--days",
    type=click.IntRange(min=1),
    default=WEEK_DAYS,
    show_default=True,
    help="Number of days in the trend",
)
@click.pass_context
def chart(ctx, days: int):
    """Show the category breakdown and the daily net trend."""
    service = ReportService(ctx.obj["db"], clock=ctx.obj["clock"])

    slices = service.chart_slices()
    click.echo("\nCategory Breakdown:")
    click.echo("-" * 70)
    if not slices:
        click.echo("No entries found.")
    else:
        largest = max(s.value for s in slices)
        for s in slices:
            label = f"{styled_category(s.category, 14)} {s.kind.value:<7}"
            bar = click.style(_bar(s.value, largest), fg=kind_color(s.kind))
            click.echo(f"{label} {format_money(s.value):>12}  {bar}")

    series = service.daily_series(days)
    low, high = series_bounds(series)
    scale = max(abs(low), abs(high))
    click.echo(f"\nDaily Net (last {days} day{'s' if days != 1 else ''}):")
    click.echo("-" * 70)
    for bucket in series:
        color = "green" if bucket.net_amount >= 0 else "red"
        bar = click.style(_bar(bucket.net_amount, scale), fg=color)
        click.echo(
            f"{bucket.day_label:<4} {bucket.day.isoformat():<11} "
            f"{format_signed(bucket.net_amount):>12}  {bar}"
        )


def register_commands(cli):
    """Register chart command with main CLI."""
    cli.add_command(chart)
