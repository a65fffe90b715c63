"""Configuration display and deployment commands.

Contents:
    * :func:`cli_config` - Display merged configuration.
    * :func:`cli_config_deploy` - Deploy the default configuration file.
"""

from __future__ import annotations

import logging
from pathlib import Path

import lib_log_rich.runtime
import rich_click as click
from lib_layered_config import Config

from greeter.adapters.config.overrides import apply_overrides
from greeter.domain.enums import DeployTarget, OutputFormat

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import CLIContext, get_cli_context
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)


def _effective_profile(cli_ctx: CLIContext, profile: str | None) -> str | None:
    return profile or cli_ctx.profile


def _resolve_config(cli_ctx: CLIContext, profile: str | None) -> Config:
    """Return the root config, or reload it when the subcommand names another profile.

    Root-level ``--set`` overrides are reapplied to a reloaded config.
    """
    if not profile:
        return cli_ctx.config
    return apply_overrides(cli_ctx.services.get_config(profile=profile), cli_ctx.set_overrides)


@click.command("config", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--format",
    "output_format",
    type=click.Choice([f.value for f in OutputFormat], case_sensitive=False),
    default=OutputFormat.HUMAN.value,
    help="Output format (human-readable or JSON)",
)
@click.option(
    "--section",
    type=str,
    default=None,
    help="Show only one configuration section (e.g., 'lib_log_rich')",
)
@click.option(
    "--profile",
    type=str,
    default=None,
    help="Override profile from root command (e.g., 'production', 'test')",
)
@click.pass_context
def cli_config(ctx: click.Context, output_format: str, section: str | None, profile: str | None) -> None:
    """Display the merged configuration from all layers.

    Precedence: defaults -> app -> host -> user -> dotenv -> env
    """
    cli_ctx = get_cli_context(ctx)
    effective_profile = _effective_profile(cli_ctx, profile)
    config = _resolve_config(cli_ctx, profile)
    fmt = OutputFormat(output_format.lower())

    extra = {"command": "config", "format": fmt.value, "profile": effective_profile}
    with lib_log_rich.runtime.bind(job_id="cli-config", extra=extra):
        logger.info("Displaying configuration", extra={"section": section})
        try:
            cli_ctx.services.display_config(config, output_format=fmt, section=section, profile=effective_profile)
        except ValueError as exc:
            click.echo(f"Error: {exc}", err=True)
            ctx.exit(ExitCode.INVALID_ARGUMENT)


@click.command("config-deploy", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--target",
    "targets",
    type=click.Choice([t.value for t in DeployTarget], case_sensitive=False),
    multiple=True,
    required=True,
    help="Target configuration layer(s) to deploy to (repeatable)",
)
@click.option("--force", is_flag=True, default=False, help="Overwrite existing configuration files")
@click.option(
    "--profile",
    type=str,
    default=None,
    help="Override profile from root command (e.g., 'production', 'test')",
)
@click.option(
    "--permissions/--no-permissions",
    "set_permissions",
    default=True,
    help="Set POSIX permissions (755/644 for app/host, 700/600 for user).",
)
@click.pass_context
def cli_config_deploy(
    ctx: click.Context,
    targets: tuple[str, ...],
    force: bool,
    profile: str | None,
    set_permissions: bool,
) -> None:
    r"""Copy the default configuration into system or user directories.

    \b
    - app:  system-wide application config (requires privileges)
    - host: system-wide host config (requires privileges)
    - user: per-user config (~/.config/greeter on Linux)

    Existing files are kept unless --force is given.
    """
    cli_ctx = get_cli_context(ctx)
    effective_profile = _effective_profile(cli_ctx, profile)
    deploy_targets = tuple(DeployTarget(t.lower()) for t in targets)

    extra = {"command": "config-deploy", "targets": [t.value for t in deploy_targets], "profile": effective_profile}
    with lib_log_rich.runtime.bind(job_id="cli-config-deploy", extra=extra):
        logger.info("Deploying configuration", extra={"force": force})
        try:
            written = cli_ctx.services.deploy_configuration(
                targets=deploy_targets,
                force=force,
                profile=effective_profile,
                set_permissions=set_permissions,
            )
        except PermissionError as exc:
            logger.error("Permission denied when deploying configuration", extra={"error": str(exc)})
            click.echo(f"Error: Permission denied. {exc}", err=True)
            click.echo("Hint: --target app/host usually needs sudo.", err=True)
            ctx.exit(ExitCode.PERMISSION_DENIED)
        except Exception as exc:
            logger.error("Failed to deploy configuration", extra={"error": str(exc), "error_type": type(exc).__name__})
            click.echo(f"Error: Failed to deploy configuration: {exc}", err=True)
            ctx.exit(ExitCode.GENERAL_ERROR)
        _report_deployment(written, effective_profile)


def _report_deployment(written: list[Path], profile: str | None) -> None:
    if not written:
        click.echo("No files were created (all target files already exist).")
        click.echo("Use --force to overwrite existing configuration files.")
        return
    suffix = f" (profile: {profile})" if profile else ""
    click.echo(f"Configuration deployed successfully{suffix}:")
    for path in written:
        click.echo(f"  ✓ {path}")


__all__ = ["cli_config", "cli_config_deploy"]
