"""Copy the bundled default configuration into app/host/user layers."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from lib_layered_config import deploy_config
from lib_layered_config.examples.deploy import DeployAction

from greeter import __init__conf__
from greeter.adapters.config.loader import get_default_config_path, validate_profile
from greeter.domain.enums import DeployTarget

logger = logging.getLogger(__name__)

_WRITTEN = frozenset({DeployAction.CREATED, DeployAction.OVERWRITTEN})


def deploy_configuration(
    *,
    targets: Sequence[DeployTarget],
    force: bool = False,
    profile: str | None = None,
    set_permissions: bool = True,
) -> list[Path]:
    """Deploy ``defaultconfig.toml`` to each requested layer.

    Linux paths without a profile are ``/etc/xdg/greeter/config.toml`` (app),
    ``/etc/xdg/greeter/hosts/<hostname>.toml`` (host) and
    ``~/.config/greeter/config.toml`` (user); macOS and Windows use the
    vendor/app directories from ``__init__conf__``. A profile adds a
    ``profile/<name>/`` segment.

    Args:
        targets: Layers to write.
        force: Overwrite files that already exist.
        profile: Optional profile name.
        set_permissions: Apply lib_layered_config's default POSIX modes
            (755/644 for app and host, 700/600 for user).

    Returns:
        Paths that were created or overwritten; empty when everything existed.

    Raises:
        PermissionError: Writing app/host layers without privileges.
        ValueError: Invalid profile name.
    """
    if profile is not None:
        validate_profile(profile)

    results = deploy_config(
        source=get_default_config_path(),
        vendor=__init__conf__.LAYEREDCONF_VENDOR,
        app=__init__conf__.LAYEREDCONF_APP,
        slug=__init__conf__.LAYEREDCONF_SLUG,
        profile=profile,
        targets=[target.value for target in targets],
        force=force,
        set_permissions=set_permissions,
    )

    written: list[Path] = []
    for result in results:
        if result.action in _WRITTEN:
            written.append(result.destination)
        written.extend(extra.destination for extra in result.dot_d_results if extra.action in _WRITTEN)
    logger.debug("Deployed configuration files", extra={"count": len(written)})
    return written


__all__ = ["deploy_configuration"]
