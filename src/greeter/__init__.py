"""Public package surface exposing the greeter, metadata, and configuration.

Imports are routed through the architectural layers:

- Domain exports: the greeter and its canonical values
- Application exports: the greeting self-check
- Composition exports: wired configuration loader
- Metadata: package information
"""

from __future__ import annotations

from .__init__conf__ import print_info
from .application.selfcheck import check_greeting
from .composition import get_config
from .domain.behaviors import (
    CANONICAL_GREETING,
    build_greeting,
    greet,
)

__all__ = [
    "CANONICAL_GREETING",
    "build_greeting",
    "check_greeting",
    "get_config",
    "greet",
    "print_info",
]
