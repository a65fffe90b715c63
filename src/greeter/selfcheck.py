"""Standalone self-check script for ``python -m greeter.selfcheck``."""

from __future__ import annotations

from .entry import selfcheck_main

if __name__ == "__main__":
    raise SystemExit(selfcheck_main())
