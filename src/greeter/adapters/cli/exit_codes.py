"""POSIX-conventional exit codes for CLI error paths.

Signal codes (130, 141, 143) are informational; ``lib_cli_exit_tools``
translates signals itself.
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes returned by ``greeter`` and ``greeter-selfcheck``.

    Values follow sysexits.h and errno conventions where applicable.
    A failed self-check is a plain ``GENERAL_ERROR``.

    Example:
        >>> int(ExitCode.SELFCHECK_FAILED)
        1
        >>> ExitCode.CONFIG_ERROR
        <ExitCode.CONFIG_ERROR: 78>
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    SELFCHECK_FAILED = 1
    PERMISSION_DENIED = 13
    INVALID_ARGUMENT = 22
    CONFIG_ERROR = 78
    SIGNAL_INT = 130
    BROKEN_PIPE = 141
    SIGNAL_TERM = 143


__all__ = ["ExitCode"]
