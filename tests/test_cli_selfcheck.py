"""Self-check runner stories: PASSED and FAILED across every entry point."""

from __future__ import annotations

import os
import subprocess
import sys
from collections.abc import Callable
from typing import Any

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner, Result

from greeter import entry
from greeter.adapters import cli as cli_mod
from greeter.composition import build_production

SUCCESS_BLOCK = '✓ Test passed: greet("World") returns "Hello, World!"\n\nAll tests passed! 🎉\n'
FAILURE_LINE = '✗ Test failed: Expected "Hello, World!" but got "Hi, World"'


def _say_hi(name: str) -> str:
    return "Hi, " + name


@pytest.mark.os_agnostic
def test_selfcheck_passes_with_production_greeter(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
) -> None:
    """Scenario A: success line, blank line, celebration, exit 0."""
    result: Result = cli_runner.invoke(cli_mod.cli, ["selfcheck"], obj=production_factory)

    assert result.exit_code == 0
    assert result.stdout == SUCCESS_BLOCK
    assert result.stderr == ""


@pytest.mark.os_agnostic
def test_selfcheck_fails_when_greeter_says_hi(
    cli_runner: CliRunner,
    inject_greeter: Callable[[Callable[[str], str]], Callable[[], Any]],
) -> None:
    """Scenario B: a mutated greeter prints the diagnostic to stderr and exits 1."""
    result: Result = cli_runner.invoke(cli_mod.cli, ["selfcheck"], obj=inject_greeter(_say_hi))

    assert result.exit_code == 1
    assert result.stderr == FAILURE_LINE + "\n"
    assert result.stdout == ""


@pytest.mark.os_agnostic
def test_selfcheck_failure_reports_empty_actual(
    cli_runner: CliRunner,
    inject_greeter: Callable[[Callable[[str], str]], Callable[[], Any]],
) -> None:
    """An empty greeting is reported with empty quotes."""
    result: Result = cli_runner.invoke(cli_mod.cli, ["selfcheck"], obj=inject_greeter(lambda _name: ""))

    assert result.exit_code == 1
    assert '✗ Test failed: Expected "Hello, World!" but got ""' in result.stderr


@pytest.mark.os_agnostic
def test_main_returns_zero_and_prints_success(
    managed_traceback_state: None,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """main() propagates the PASSED state as exit code 0."""
    exit_code = cli_mod.main(["selfcheck"], services_factory=build_production)

    captured = capsys.readouterr()
    assert exit_code == 0
    assert captured.out == SUCCESS_BLOCK
    assert captured.err == ""


@pytest.mark.os_agnostic
def test_main_returns_one_on_mismatch(
    managed_traceback_state: None,
    capsys: pytest.CaptureFixture[str],
    inject_greeter: Callable[[Callable[[str], str]], Callable[[], Any]],
) -> None:
    """main() propagates the FAILED state as exit code 1."""
    exit_code = cli_mod.main(["selfcheck"], services_factory=inject_greeter(_say_hi))

    captured = capsys.readouterr()
    assert exit_code == 1
    assert captured.err == FAILURE_LINE + "\n"
    assert captured.out == ""


@pytest.mark.os_agnostic
def test_selfcheck_main_takes_no_arguments(
    monkeypatch: pytest.MonkeyPatch,
    managed_traceback_state: None,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """The standalone script ignores sys.argv and runs the scenario."""
    monkeypatch.setattr(sys, "argv", ["greeter-selfcheck", "--unexpected"])

    exit_code = entry.selfcheck_main()

    assert exit_code == 0
    assert SUCCESS_BLOCK in capsys.readouterr().out


@pytest.mark.os_agnostic
def test_greeter_exception_is_rendered_by_exit_tools(
    managed_traceback_state: None,
    capsys: pytest.CaptureFixture[str],
    strip_ansi: Callable[[str], str],
    inject_greeter: Callable[[Callable[[str], str]], Callable[[], Any]],
) -> None:
    """A greeter that raises is not a mismatch; the error reaches the CLI boundary."""

    def _explode(_name: str) -> str:
        raise RuntimeError("greeter exploded")

    exit_code = cli_mod.main(["--traceback", "selfcheck"], services_factory=inject_greeter(_explode))

    plain_err = strip_ansi(capsys.readouterr().err)
    assert exit_code != 0
    assert "Traceback (most recent call last)" in plain_err
    assert "RuntimeError: greeter exploded" in plain_err
    assert "✗ Test failed" not in plain_err
    assert lib_cli_exit_tools.config.traceback is False


@pytest.mark.os_agnostic
def test_greeter_exception_without_traceback_is_summarised(
    managed_traceback_state: None,
    capsys: pytest.CaptureFixture[str],
    strip_ansi: Callable[[str], str],
    inject_greeter: Callable[[Callable[[str], str]], Callable[[], Any]],
) -> None:
    """Without --traceback only the summary is printed."""

    def _explode(_name: str) -> str:
        raise RuntimeError("greeter exploded")

    exit_code = cli_mod.main(["selfcheck"], services_factory=inject_greeter(_explode))

    plain_err = strip_ansi(capsys.readouterr().err)
    assert exit_code != 0
    assert "greeter exploded" in plain_err
    assert "Traceback (most recent call last)" not in plain_err


_BROKEN_GREETER_SCRIPT = """
import dataclasses
import sys

from greeter.adapters.cli.main import main
from greeter.composition import build_production

services = dataclasses.replace(build_production(), greet=lambda name: "Hi, " + name)
sys.exit(main(["selfcheck"], services_factory=lambda: services))
"""


def _run_python(*args: str) -> subprocess.CompletedProcess[str]:
    env = {key: value for key, value in os.environ.items() if not key.startswith("LOG_")}
    env.update({"PYTHONIOENCODING": "utf-8", "PYTHONUTF8": "1"})
    return subprocess.run(  # noqa: S603
        [sys.executable, *args],
        capture_output=True,
        timeout=60,
        check=False,
        encoding="utf-8",
        errors="replace",
        env=env,
    )


@pytest.mark.os_agnostic
def test_selfcheck_module_prints_exactly_the_success_report() -> None:
    """`python -m greeter.selfcheck` runs with production logging and prints only the report."""
    result = _run_python("-m", "greeter.selfcheck")

    assert result.returncode == 0
    assert result.stdout == SUCCESS_BLOCK
    assert result.stderr == ""


@pytest.mark.os_agnostic
def test_selfcheck_failure_in_subprocess_prints_one_stderr_line() -> None:
    """A broken greeter under production logging yields only the diagnostic line."""
    result = _run_python("-c", _BROKEN_GREETER_SCRIPT)

    assert result.returncode == 1
    assert result.stdout == ""
    assert result.stderr == FAILURE_LINE + "\n"
