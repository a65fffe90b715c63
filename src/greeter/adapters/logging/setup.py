"""Logging initialization shared by every entry point.

Every invocation path (``greeter``, ``greeter-selfcheck``, ``python -m``)
reaches :func:`init_logging` through the root CLI group, so the
lib_log_rich runtime is configured once per process from the
``[lib_log_rich]`` configuration section.

Contents:
    * :class:`LoggingConfigModel` - pydantic view of ``[lib_log_rich]``.
    * :func:`init_logging` - idempotent runtime initialization.
"""

from __future__ import annotations

from typing import cast

import lib_log_rich.config
import lib_log_rich.runtime
from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict, ValidationError

from greeter import __init__conf__
from greeter.domain.errors import ConfigurationError


class LoggingConfigModel(BaseModel):
    """Validated ``[lib_log_rich]`` section.

    Unknown keys are kept and forwarded to ``lib_log_rich.runtime.RuntimeConfig``.
    ``console_level`` defaults to WARNING.

    Example:
        >>> LoggingConfigModel().environment
        'prod'
        >>> LoggingConfigModel().console_level
        'WARNING'
        >>> LoggingConfigModel(service="greeter", console_level="DEBUG").model_dump()
        {'service': 'greeter', 'environment': 'prod', 'console_level': 'DEBUG'}
    """

    service: str | None = None
    environment: str = "prod"
    console_level: str = "WARNING"

    model_config = ConfigDict(extra="allow")


def _build_runtime_config(config: Config) -> lib_log_rich.runtime.RuntimeConfig:
    """Map the ``[lib_log_rich]`` section onto a ``RuntimeConfig``.

    ``service`` falls back to the package name.

    Raises:
        ConfigurationError: The section is not a table or fails validation.
    """
    raw: object = config.get("lib_log_rich", default={})
    if raw and not isinstance(raw, dict):
        raise ConfigurationError(f"[lib_log_rich] must be a table, got {type(raw).__name__}")
    try:
        parsed = LoggingConfigModel.model_validate(cast("dict[str, object]", raw) if raw else {})
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid [lib_log_rich] configuration: {exc}") from exc

    passthrough = parsed.model_dump(exclude={"service", "environment"}, exclude_none=True)
    return lib_log_rich.runtime.RuntimeConfig(
        service=parsed.service or __init__conf__.name,
        environment=parsed.environment,
        **passthrough,
    )


def init_logging(config: Config) -> None:
    """Initialize the lib_log_rich runtime unless it is already running.

    The first call enables ``.env`` discovery (so ``LOG_*`` variables apply),
    builds the runtime from ``config`` and bridges stdlib :mod:`logging`
    into lib_log_rich. Later calls return immediately.

    Args:
        config: Loaded configuration holding the ``[lib_log_rich]`` section.

    Raises:
        ConfigurationError: The logging section is invalid.

    Example:
        >>> init_logging(Config({"lib_log_rich": {"environment": "test"}}, {}))  # doctest: +SKIP
    """
    if lib_log_rich.runtime.is_initialised():
        return
    lib_log_rich.config.enable_dotenv()
    lib_log_rich.runtime.init(_build_runtime_config(config))
    lib_log_rich.runtime.attach_std_logging()


__all__ = [
    "LoggingConfigModel",
    "init_logging",
]
