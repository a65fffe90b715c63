"""Self-check outcome and report lines.

The self-check runs one fixed scenario: greet ``"World"`` and require
``"Hello, World!"``. This module holds the scenario constants, the frozen
outcome value, and the exact lines printed for each terminal state.

Contents:
    * :class:`SelfCheckOutcome` - Result of one comparison.
    * :func:`format_success` - Line printed to stdout when the check passes.
    * :func:`format_failure` - Line printed to stderr when the check fails.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from .behaviors import CANONICAL_GREETING, CANONICAL_NAME
from .errors import GreetingMismatchError

SELFCHECK_NAME: Final[str] = CANONICAL_NAME
SELFCHECK_EXPECTED: Final[str] = CANONICAL_GREETING
ALL_PASSED_MESSAGE: Final[str] = "All tests passed! 🎉"


@dataclass(frozen=True, slots=True)
class SelfCheckOutcome:
    """Transient result of comparing one computed greeting to its expectation.

    Example:
        >>> outcome = SelfCheckOutcome(name="World", expected="Hello, World!", actual="Hello, World!")
        >>> outcome.passed
        True
        >>> SelfCheckOutcome(name="World", expected="Hello, World!", actual="Hi, World").passed
        False
    """

    name: str
    expected: str
    actual: str

    @property
    def passed(self) -> bool:
        """Exact equality of expected and actual greeting."""
        return self.actual == self.expected

    def raise_for_mismatch(self) -> None:
        """Raise :class:`GreetingMismatchError` unless the check passed.

        Example:
            >>> SelfCheckOutcome(name="World", expected="Hello, World!", actual="Hello, World!").raise_for_mismatch()
            >>> SelfCheckOutcome(name="World", expected="a", actual="b").raise_for_mismatch()
            Traceback (most recent call last):
            ...
            greeter.domain.errors.GreetingMismatchError: Expected "a" but got "b"
        """
        if not self.passed:
            raise GreetingMismatchError(expected=self.expected, actual=self.actual)


def format_success(outcome: SelfCheckOutcome) -> str:
    """Return the per-test success line.

    Example:
        >>> format_success(SelfCheckOutcome(name="World", expected="Hello, World!", actual="Hello, World!"))
        '✓ Test passed: greet("World") returns "Hello, World!"'
    """
    return f'✓ Test passed: greet("{outcome.name}") returns "{outcome.actual}"'


def format_failure(error: GreetingMismatchError) -> str:
    """Return the diagnostic line for a mismatch.

    Example:
        >>> format_failure(GreetingMismatchError(expected="Hello, World!", actual="Hi, World"))
        '✗ Test failed: Expected "Hello, World!" but got "Hi, World"'
    """
    return f"✗ Test failed: {error}"


__all__ = [
    "ALL_PASSED_MESSAGE",
    "SELFCHECK_EXPECTED",
    "SELFCHECK_NAME",
    "SelfCheckOutcome",
    "format_failure",
    "format_success",
]
