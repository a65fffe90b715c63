"""Metadata and greeting commands.

Contents:
    * :func:`cli_info` - Display package metadata.
    * :func:`cli_hello` - Print the greeting for a name.
"""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from greeter import __init__conf__
from greeter.domain.behaviors import CANONICAL_NAME

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context

logger = logging.getLogger(__name__)


@click.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print resolved metadata so users can inspect installation details."""
    with lib_log_rich.runtime.bind(job_id="cli-info", extra={"command": "info"}):
        logger.info("Displaying package information")
        __init__conf__.print_info()


@click.command("hello", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("name", required=False, default=CANONICAL_NAME)
@click.pass_context
def cli_hello(ctx: click.Context, name: str) -> None:
    """Print the greeting for NAME (default: World).

    The name is used verbatim, so ``greeter hello ""`` prints ``Hello, !``.
    """
    cli_ctx = get_cli_context(ctx)
    with lib_log_rich.runtime.bind(job_id="cli-hello", extra={"command": "hello"}):
        logger.info("Greeting", extra={"greet_name": name})
        click.echo(cli_ctx.services.greet(name))


__all__ = ["cli_hello", "cli_info"]
