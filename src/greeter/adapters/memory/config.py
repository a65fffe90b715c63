"""Configuration ports for ``build_testing``.

The self-check and ``hello`` never read configuration, so the testing
composition hands them an empty :class:`Config` and turns deploy and
display into no-ops. Nothing here touches ``defaultconfig.toml`` or the
app/host/user layers.
"""

from __future__ import annotations

import tempfile
from collections.abc import Sequence
from pathlib import Path

from lib_layered_config import Config

from ...domain.enums import DeployTarget, OutputFormat


def get_config_in_memory(
    *,
    profile: str | None = None,
    start_dir: str | None = None,
) -> Config:
    """Return a Config without a ``[lib_log_rich]`` section.

    Logging therefore falls back to :class:`LoggingConfigModel` defaults.
    """
    return Config({}, {})


def get_default_config_path_in_memory() -> Path:
    """Point at a greeter-named file under the temp dir; it is never opened."""
    return Path(tempfile.gettempdir()) / "greeter" / "defaultconfig.toml"


def deploy_configuration_in_memory(
    *,
    targets: Sequence[DeployTarget],
    force: bool = False,
    profile: str | None = None,
    set_permissions: bool = True,
) -> list[Path]:
    """Report nothing written, which ``config-deploy`` renders as the --force hint."""
    return []


def display_config_in_memory(
    config: Config,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    profile: str | None = None,
) -> None:
    """Print nothing, keeping stdout free for the self-check report."""


__all__ = [
    "deploy_configuration_in_memory",
    "display_config_in_memory",
    "get_config_in_memory",
    "get_default_config_path_in_memory",
]
