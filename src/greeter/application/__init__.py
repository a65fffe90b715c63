"""Application layer - use cases and port definitions.

Contents:
    * :mod:`.ports` - Callable Protocol definitions for adapter functions
    * :mod:`.selfcheck` - The greeting self-check use case
"""

from __future__ import annotations

from .ports import (
    DeployConfiguration,
    DisplayConfig,
    GetConfig,
    GetDefaultConfigPath,
    Greet,
    InitLogging,
)
from .selfcheck import check_greeting, run_selfcheck

__all__ = [
    "DeployConfiguration",
    "DisplayConfig",
    "GetConfig",
    "GetDefaultConfigPath",
    "Greet",
    "InitLogging",
    "check_greeting",
    "run_selfcheck",
]
