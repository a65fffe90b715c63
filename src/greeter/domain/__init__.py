"""Domain layer - pure business logic with no I/O or framework dependencies.

Contents:
    * :mod:`.behaviors` - The greeter and its canonical values
    * :mod:`.selfcheck` - Self-check outcome and report lines
    * :mod:`.enums` - Domain enumerations (OutputFormat, DeployTarget)
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .behaviors import (
    CANONICAL_GREETING,
    CANONICAL_NAME,
    build_greeting,
    greet,
)
from .enums import DeployTarget, OutputFormat
from .errors import ConfigurationError, GreetingMismatchError
from .selfcheck import SelfCheckOutcome, format_failure, format_success

__all__ = [
    # Behaviors
    "CANONICAL_GREETING",
    "CANONICAL_NAME",
    "build_greeting",
    "greet",
    # Self-check
    "SelfCheckOutcome",
    "format_failure",
    "format_success",
    # Enums
    "DeployTarget",
    "OutputFormat",
    # Errors
    "ConfigurationError",
    "GreetingMismatchError",
]
