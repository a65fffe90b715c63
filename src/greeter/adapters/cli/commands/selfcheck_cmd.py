"""Self-check command: run the fixed greeting scenario and report it.

Contents:
    * :func:`cli_selfcheck` - PASSED exits 0, FAILED exits 1.
"""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from greeter.application.selfcheck import run_selfcheck
from greeter.domain.errors import GreetingMismatchError
from greeter.domain.selfcheck import ALL_PASSED_MESSAGE, format_failure, format_success

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)


@click.command("selfcheck", context_settings=CLICK_CONTEXT_SETTINGS)
@click.pass_context
def cli_selfcheck(ctx: click.Context) -> None:
    r"""Check that greet("World") returns "Hello, World!".

    \b
    On success the result line and "All tests passed! 🎉" go to stdout.
    On mismatch a diagnostic goes to stderr and the exit code is 1.
    """
    cli_ctx = get_cli_context(ctx)
    with lib_log_rich.runtime.bind(job_id="cli-selfcheck", extra={"command": "selfcheck"}):
        outcome = run_selfcheck(cli_ctx.services.greet)
        try:
            outcome.raise_for_mismatch()
        except GreetingMismatchError as exc:
            click.echo(format_failure(exc), err=True)
            ctx.exit(ExitCode.SELFCHECK_FAILED)

        click.echo(format_success(outcome))
        click.echo()
        click.echo(ALL_PASSED_MESSAGE)


__all__ = ["cli_selfcheck"]
