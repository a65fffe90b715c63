"""Configuration adapter built on lib_layered_config.

Contents:
    * :mod:`.loader` - Cached layered loading and profile validation
    * :mod:`.deploy` - Default config deployment to app/host/user layers
    * :mod:`.display` - Human/JSON rendering
    * :mod:`.overrides` - ``--set SECTION.KEY=VALUE`` parsing and merging
"""

from __future__ import annotations

from .deploy import deploy_configuration
from .display import display_config
from .loader import get_config, get_default_config_path
from .overrides import apply_overrides

__all__ = [
    "apply_overrides",
    "deploy_configuration",
    "display_config",
    "get_config",
    "get_default_config_path",
]
