"""Root CLI command group and global option handling.

Contents:
    * :func:`cli` - Root command group with ``--traceback``, ``--profile``
      and ``--set``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import rich_click as click
from lib_layered_config import Config

from greeter import __init__conf__
from greeter.adapters.config.overrides import apply_overrides
from greeter.domain.errors import ConfigurationError

from .constants import CLICK_CONTEXT_SETTINGS
from .context import apply_traceback_preferences, store_cli_context
from .exit_codes import ExitCode

if TYPE_CHECKING:
    from greeter.composition import AppServices

logger = logging.getLogger(__name__)


def _apply_cli_overrides(config: Config, set_overrides: tuple[str, ...]) -> Config:
    """Apply ``--set`` overrides, turning malformed input into a UsageError."""
    try:
        return apply_overrides(config, set_overrides)
    except (TypeError, ValueError) as exc:
        raise click.UsageError(str(exc)) from exc


def _load_config(services: AppServices, profile: str | None) -> Config:
    """Load configuration for ``profile``, rejecting invalid profile names."""
    try:
        return services.get_config(profile=profile)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="--profile") from exc


@click.group(
    help=__init__conf__.title,
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=True,
)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python traceback on errors",
)
@click.option(
    "--profile",
    type=str,
    default=None,
    help="Load configuration from a named profile (e.g., 'production', 'test')",
)
@click.option(
    "--set",
    "set_overrides",
    multiple=True,
    default=(),
    metavar="SECTION.KEY=VALUE",
    help="Override a configuration setting (repeatable).",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, profile: str | None, set_overrides: tuple[str, ...]) -> None:
    """Load configuration, start logging, and hand shared state to subcommands.

    ``ctx.obj`` arrives as the services factory and leaves as a
    :class:`~greeter.adapters.cli.context.CLIContext`. An invalid
    ``[lib_log_rich]`` section exits with ``CONFIG_ERROR``.
    """
    if not callable(ctx.obj):
        raise RuntimeError("Services factory not provided. This is a bug.")
    services: AppServices = ctx.obj()  # type: ignore[assignment]  # Click's obj is typed as Any
    config = _apply_cli_overrides(_load_config(services, profile), set_overrides)
    try:
        services.init_logging(config)
    except ConfigurationError as exc:
        click.echo(f"Error: {exc}", err=True)
        ctx.exit(ExitCode.CONFIG_ERROR)
    store_cli_context(
        ctx,
        traceback=traceback,
        config=config,
        services=services,
        profile=profile,
        set_overrides=set_overrides,
    )
    apply_traceback_preferences(traceback)
    logger.debug("CLI context ready", extra={"profile": profile, "overrides": len(set_overrides)})

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


# Commands import this package's ancestors, so registration is deferred
# until ``cli`` exists.
def _register_commands() -> None:
    from .commands import (
        cli_config,
        cli_config_deploy,
        cli_hello,
        cli_info,
        cli_selfcheck,
    )

    for cmd in (cli_hello, cli_selfcheck, cli_info, cli_config, cli_config_deploy):
        cli.add_command(cmd)


_register_commands()


__all__ = ["cli"]
