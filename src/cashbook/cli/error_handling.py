"""CLI error handling helpers."""

from typing import NoReturn

import click

from cashbook.domain.errors import DomainError, NotFoundError
from cashbook.logging_setup import get_logger

logger = get_logger("cashbook.cli.error_handling")


def fail(ctx: click.Context, message: str) -> NoReturn:
    """Print an error line to stderr and exit with status 1."""
    click.echo(f"Error: {message}", err=True)
    ctx.exit(1)


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError) -> NoReturn:
    """Render a domain error and exit with failure.

    Missing entries get a hint pointing at ``entry list``.
    """
    logger.debug("Command %s failed: %r", ctx.command_path, error)
    if isinstance(error, NotFoundError):
        click.echo(f"Error: {error}", err=True)
        click.echo("Run 'cashbook entry list' to see entry ids.", err=True)
        ctx.exit(1)
    fail(ctx, str(error))


def handle_write_error(ctx: click.Context, error: OSError) -> NoReturn:
    """Report a file that could not be written and exit with failure."""
    logger.debug("Command %s could not write: %r", ctx.command_path, error)
    target = error.filename or "output file"
    fail(ctx, f"Could not write {target}: {error.strerror or error}")
