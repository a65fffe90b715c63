"""CLI command implementations.

Contents:
    * Greeting and metadata commands from :mod:`.info`
    * The self-check runner from :mod:`.selfcheck_cmd`
    * Config commands from :mod:`.config`
"""

from __future__ import annotations

from .config import cli_config, cli_config_deploy
from .info import cli_hello, cli_info
from .selfcheck_cmd import cli_selfcheck

__all__ = [
    "cli_config",
    "cli_config_deploy",
    "cli_hello",
    "cli_info",
    "cli_selfcheck",
]
