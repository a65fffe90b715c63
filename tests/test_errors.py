"""Domain error types: messages and hierarchy."""

from __future__ import annotations

import pytest

from greeter.domain.errors import ConfigurationError, GreetingMismatchError


@pytest.mark.os_agnostic
def test_greeting_mismatch_error_message_quotes_both_values() -> None:
    """The message is the diagnostic body printed after "✗ Test failed: "."""
    exc = GreetingMismatchError(expected="Hello, World!", actual="")

    assert str(exc) == 'Expected "Hello, World!" but got ""'


@pytest.mark.os_agnostic
def test_greeting_mismatch_error_is_assertion_error() -> None:
    """Callers catching AssertionError also catch a mismatch."""
    with pytest.raises(AssertionError, match="but got"):
        raise GreetingMismatchError(expected="a", actual="b")


@pytest.mark.os_agnostic
def test_configuration_error_preserves_message() -> None:
    """Instantiation stores the message for display."""
    assert str(ConfigurationError("bad section")) == "bad section"
