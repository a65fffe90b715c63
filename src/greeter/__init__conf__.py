"""Static package metadata surfaced to CLI commands and documentation.

Values mirror ``pyproject.toml`` so the installed package can describe itself
without reading distribution metadata at runtime. The ``LAYEREDCONF_*``
identifiers drive the platform-specific configuration paths resolved by
lib_layered_config.

Contents:
    * :data:`name`, :data:`title`, :data:`version`, :data:`shell_command`
    * :data:`LAYEREDCONF_VENDOR`, :data:`LAYEREDCONF_APP`, :data:`LAYEREDCONF_SLUG`
    * :func:`print_info` - Render the metadata block for the ``info`` command.
"""

from __future__ import annotations

#: Distribution name as published in ``pyproject.toml``.
name = "greeter"
#: One-line summary used as the CLI help header.
title = "Greeting helper with a built-in self-check runner"
#: Kept in sync with ``[project].version``.
version = "1.0.0"
#: Console script exposed by the package.
shell_command = "greeter"
#: Console script running the greeting self-check.
selfcheck_command = "greeter-selfcheck"

#: Vendor directory used on macOS/Windows configuration paths.
LAYEREDCONF_VENDOR = "greeter"
#: Application directory used on macOS/Windows configuration paths.
LAYEREDCONF_APP = "greeter"
#: Slug used on Linux (XDG) configuration paths.
LAYEREDCONF_SLUG = "greeter"


def print_info() -> None:
    """Print the summarised metadata block used by the CLI ``info`` command.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for greeter:
        ...
    """
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("shell_command", shell_command),
        ("selfcheck_command", selfcheck_command),
        ("config_slug", LAYEREDCONF_SLUG),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))
