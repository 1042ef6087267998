"""Main CLI entry point."""

from datetime import datetime

import click

from cashbook.database.factories import DB_PATH_ENV, create_sqlite_database
from cashbook.logging_setup import configure_logging

# Import and register all commands at module level
from cashbook.cli.commands import (
    add,
    entry,
    summary,
    chart,
    export,
)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


@click.group()
@click.option(
    "--db-path",
    type=click.Path(dir_okay=False),
    help=f"Path to database file (overrides {DB_PATH_ENV} environment variable)",
    envvar=DB_PATH_ENV,
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    envvar="CASHBOOK_LOG_LEVEL",
    help="Logging verbosity (default WARNING, or CASHBOOK_LOG_LEVEL)",
)
@click.pass_context
def cli(ctx, db_path: str | None, log_level: str | None):
    """Cashbook - personal finance ledger.

    Record credits and debits by category, then view summaries, charts and
    CSV exports of your entries.
    """
    ctx.ensure_object(dict)
    configure_logging(log_level)
    ctx.obj.setdefault("clock", datetime.now)

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        db = create_sqlite_database(database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db
        ctx.call_on_close(db.disconnect)


# Register all commands
add.register_commands(cli)
entry.register_commands(cli)
summary.register_commands(cli)
chart.register_commands(cli)
export.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
