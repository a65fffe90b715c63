"""Self-check use case: run the fixed greeting scenario against a greeter."""

from __future__ import annotations

import logging

from ..domain.selfcheck import SELFCHECK_EXPECTED, SELFCHECK_NAME, SelfCheckOutcome
from .ports import Greet

logger = logging.getLogger(__name__)


def check_greeting(greet: Greet, *, name: str = SELFCHECK_NAME, expected: str = SELFCHECK_EXPECTED) -> SelfCheckOutcome:
    """Greet ``name`` and compare the result to ``expected``.

    A mismatch is reported through the returned outcome, never raised.

    Example:
        >>> from greeter.domain.behaviors import greet
        >>> check_greeting(greet).passed
        True
        >>> check_greeting(lambda name: "Hi, " + name).actual
        'Hi, World'
    """
    return SelfCheckOutcome(name=name, expected=expected, actual=greet(name))


def run_selfcheck(greet: Greet) -> SelfCheckOutcome:
    """Run the fixed self-check scenario and log its outcome.

    Args:
        greet: Greeter under test, normally ``AppServices.greet``.

    Returns:
        The outcome; callers decide how to report it.
    """
    outcome = check_greeting(greet)
    # The CLI prints the user-facing report; these events stay below the
    # default console level.
    if outcome.passed:
        logger.info("Self-check passed", extra={"greet_name": outcome.name, "greeting": outcome.actual})
    else:
        logger.info(
            "Self-check failed",
            extra={"greet_name": outcome.name, "expected": outcome.expected, "actual": outcome.actual},
        )
    return outcome


__all__ = ["check_greeting", "run_selfcheck"]
