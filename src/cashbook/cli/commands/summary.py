"""Summary command."""

import click

from cashbook.cli.styles import format_money, kind_color, net_kind
from cashbook.domain.aggregation import quantize_money
from cashbook.domain.reports import ReportService


@click.command("summary")
@click.pass_context
def summary(ctx):
    """Show net totals for today, the last week, the last month and overall.

    A positive net is shown as Credit and a negative one as Debit.
    """
    service = ReportService(ctx.obj["db"], clock=ctx.obj["clock"])
    report = service.summary()

    cards = [
        ("Today", report.daily),
        ("This Week", report.weekly),
        ("This Month", report.monthly),
        ("Total", report.total),
    ]

    click.echo("\nSummary:")
    click.echo("-" * 40)
    for title, amount in cards:
        kind = net_kind(amount)
        value = format_money(abs(quantize_money(amount)))
        click.echo(
            f"{title:<12} {value:>14}  " + click.style(f"{kind.value:<6}", fg=kind_color(kind))
        )
    click.echo("-" * 40)


def register_commands(cli):
    """Register summary command with main CLI."""
    cli.add_command(summary)
