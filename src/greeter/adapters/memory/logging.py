"""In-memory logging adapter for testing."""

from __future__ import annotations

from lib_layered_config import Config


def init_logging_in_memory(config: Config) -> None:
    """Leave the lib_log_rich runtime untouched."""


__all__ = ["init_logging_in_memory"]
