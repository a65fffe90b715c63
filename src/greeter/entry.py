"""Console script entry points with production wiring.

Lives at package level, outside the adapters, so composition can be wired
into the CLI without the adapters layer importing the composition root.
"""

from __future__ import annotations

from .adapters.cli.main import main as cli_main
from .composition import build_production


def main() -> int:
    """Run the ``greeter`` console script.

    Returns:
        Exit code from CLI execution.
    """
    return cli_main(services_factory=build_production)


def selfcheck_main() -> int:
    """Run the ``greeter-selfcheck`` console script.

    Takes no arguments: the fixed greeting scenario runs once and the exit
    code reports PASSED (0) or FAILED (1).
    """
    return cli_main(["selfcheck"], services_factory=build_production)


__all__ = ["main", "selfcheck_main"]
