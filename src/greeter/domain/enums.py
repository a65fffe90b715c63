"""Type-safe domain enums for config display formats and deployment layers."""

from __future__ import annotations

from enum import Enum


class OutputFormat(str, Enum):
    """How the ``config`` command renders the merged configuration.

    Inherits from str so members compare equal to the raw Click choice.

    Example:
        >>> OutputFormat("json") is OutputFormat.JSON
        True
        >>> OutputFormat.HUMAN == "human"
        True
    """

    HUMAN = "human"
    JSON = "json"


class DeployTarget(str, Enum):
    """Configuration layer receiving the bundled default config file.

    ``APP`` and ``HOST`` are system-wide and usually need privileges;
    ``USER`` lands in the per-user config directory.

    Example:
        >>> [t.value for t in DeployTarget]
        ['app', 'host', 'user']
    """

    APP = "app"
    HOST = "host"
    USER = "user"


__all__ = [
    "DeployTarget",
    "OutputFormat",
]
