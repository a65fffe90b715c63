"""Pure domain functions with no I/O or framework dependencies."""

from __future__ import annotations

from typing import Final

GREETING_PREFIX: Final[str] = "Hello, "
GREETING_SUFFIX: Final[str] = "!"

CANONICAL_NAME: Final[str] = "World"
CANONICAL_GREETING: Final[str] = "Hello, World!"


def greet(name: str) -> str:
    r"""Return the greeting for ``name``.

    The name is used exactly as given: no trimming, no coercion, and the
    empty string is a valid name.

    Args:
        name: Text to greet.

    Returns:
        ``"Hello, " + name + "!"``.

    Example:
        >>> greet("World")
        'Hello, World!'
        >>> greet("")
        'Hello, !'
    """
    return GREETING_PREFIX + name + GREETING_SUFFIX


def build_greeting() -> str:
    """Return the canonical greeting for :data:`CANONICAL_NAME`.

    Example:
        >>> build_greeting() == CANONICAL_GREETING
        True
    """
    return greet(CANONICAL_NAME)


__all__ = [
    "CANONICAL_GREETING",
    "CANONICAL_NAME",
    "GREETING_PREFIX",
    "GREETING_SUFFIX",
    "build_greeting",
    "greet",
]
