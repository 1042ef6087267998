"""Export command."""

import click

from cashbook.cli.error_handling import handle_write_error
from cashbook.cli.filter_options import filter_options, resolve_filter_options
from cashbook.domain.export import directory_sink
from cashbook.domain.reports import ReportService


@click.command("export")
@click.option(
    "--output-dir",
    type=click.Path(file_okay=False),
    default=".",
    show_default=True,
    help="Directory to write expenses-<date>.csv into",
)
@filter_options
@click.pass_context
def export(ctx, output_dir: str, category: str, date_range: str):
    """Export entries to CSV, most recent first.

    Examples:
        cashbook export --output-dir ~/Downloads
        cashbook export --range month --category Food
    """
    service = ReportService(ctx.obj["db"], clock=ctx.obj["clock"])
    options = resolve_filter_options(category, date_range)

    try:
        path = service.export(directory_sink(output_dir), options)
    except OSError as e:
        handle_write_error(ctx, e)

    click.echo(f"Exported entries to {path}")


def register_commands(cli):
    """Register export command with main CLI."""
    cli.add_command(export)
