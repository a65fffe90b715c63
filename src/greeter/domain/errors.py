"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations


class GreetingMismatchError(AssertionError):
    """A computed greeting differs from the expected literal.

    The only failure the self-check can report. Carries both values so the
    CLI boundary can render the diagnostic line without re-deriving them.
    Inherits from AssertionError so callers treating the self-check as a
    plain assertion keep working.

    Attributes:
        expected: Greeting the check required.
        actual: Greeting the greeter produced.

    Example:
        >>> from greeter.domain.errors import GreetingMismatchError
        >>> err = GreetingMismatchError(expected="Hello, World!", actual="Hi, World")
        >>> str(err)
        'Expected "Hello, World!" but got "Hi, World"'
        >>> isinstance(err, AssertionError)
        True
    """

    def __init__(self, *, expected: str, actual: str) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f'Expected "{expected}" but got "{actual}"')


class ConfigurationError(Exception):
    """Missing, invalid, or incomplete configuration.

    Raised when configuration values are malformed or logically
    inconsistent. Typically caught at CLI boundaries to provide
    user-friendly error messages.

    Example:
        >>> from greeter.domain.errors import ConfigurationError
        >>> err = ConfigurationError("Invalid [lib_log_rich] section")
        >>> str(err)
        'Invalid [lib_log_rich] section'
    """


__all__ = [
    "ConfigurationError",
    "GreetingMismatchError",
]
