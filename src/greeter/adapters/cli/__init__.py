"""The ``greeter`` command line interface.

:func:`main` is what the console scripts call; :data:`cli` is the root
group that tests invoke through ``CliRunner``.
"""

from __future__ import annotations

from .context import (
    TracebackState,
    apply_traceback_preferences,
    restore_traceback_state,
    snapshot_traceback_state,
    store_cli_context,
)
from .exit_codes import ExitCode
from .main import main
from .root import cli

__all__ = [
    "ExitCode",
    "TracebackState",
    "apply_traceback_preferences",
    "cli",
    "main",
    "restore_traceback_state",
    "snapshot_traceback_state",
    "store_cli_context",
]
