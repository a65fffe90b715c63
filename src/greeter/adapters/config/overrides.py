"""Parse ``--set SECTION.KEY=VALUE`` options and merge them into a Config."""

from __future__ import annotations

from dataclasses import dataclass
from typing import cast

import orjson
from lib_layered_config import Config

CoercedValue = str | int | float | bool | None | list[object] | dict[str, object]
"""Values :func:`coerce_value` can produce."""


@dataclass(frozen=True, slots=True)
class ConfigOverride:
    """One parsed ``--set`` option."""

    section: str
    key_path: tuple[str, ...]
    value: CoercedValue


def parse_override(raw: str) -> ConfigOverride:
    """Split ``SECTION.KEY[.SUBKEY...]=VALUE`` into a :class:`ConfigOverride`.

    Everything before the first ``=`` is the dotted path, everything after
    it is the value. The first path component is the section.

    Raises:
        ValueError: Missing ``=``, missing dot, or an empty path component.

    Examples:
        >>> parse_override("lib_log_rich.console_level=DEBUG")
        ConfigOverride(section='lib_log_rich', key_path=('console_level',), value='DEBUG')
        >>> parse_override("lib_log_rich.payload_limits.message_max_chars=4096").key_path
        ('payload_limits', 'message_max_chars')
    """
    if "=" not in raw:
        raise ValueError(f"Invalid override {raw!r}: must contain '='")
    path, value = raw.split("=", maxsplit=1)
    if "." not in path:
        raise ValueError(f"Invalid override {raw!r}: key must contain at least one dot (SECTION.KEY)")

    section, *keys = path.split(".")
    if not section:
        raise ValueError(f"Invalid override {raw!r}: section name is empty")
    if not all(keys):
        raise ValueError(f"Invalid override {raw!r}: key path contains empty component")
    return ConfigOverride(section=section, key_path=tuple(keys), value=coerce_value(value))


def coerce_value(raw: str) -> CoercedValue:
    """Interpret ``raw`` as JSON, falling back to the plain string.

    Examples:
        >>> coerce_value("false"), coerce_value("10"), coerce_value("null")
        (False, 10, None)
        >>> coerce_value("WARNING")
        'WARNING'
        >>> coerce_value("")
        ''
    """
    if not raw:
        return ""
    try:
        return orjson.loads(raw)
    except orjson.JSONDecodeError:
        return raw


def _nest_override(target: dict[str, dict[str, object]], override: ConfigOverride) -> None:
    """Write ``override`` into ``target``, creating intermediate tables.

    Raises:
        TypeError: An intermediate key already holds a non-table value.

    Example:
        >>> tree: dict[str, dict[str, object]] = {}
        >>> _nest_override(tree, ConfigOverride(section="a", key_path=("b", "c"), value=1))
        >>> tree
        {'a': {'b': {'c': 1}}}
    """
    node: dict[str, object] = target.setdefault(override.section, {})
    for key in override.key_path[:-1]:
        child = node.setdefault(key, {})
        if not isinstance(child, dict):
            raise TypeError(f"Expected dict at key {key!r}, got {type(child).__name__}")
        node = cast("dict[str, object]", child)
    node[override.key_path[-1]] = override.value


def apply_overrides(config: Config, raw_overrides: tuple[str, ...]) -> Config:
    """Return ``config`` deep-merged with every ``--set`` option.

    The original Config is returned untouched when there is nothing to
    apply.

    Raises:
        ValueError: Any override string is malformed.

    Example:
        >>> cfg = Config({"lib_log_rich": {"environment": "prod"}}, {})
        >>> apply_overrides(cfg, ("lib_log_rich.environment=test",))["lib_log_rich"]["environment"]
        'test'
        >>> apply_overrides(cfg, ()) is cfg
        True
    """
    if not raw_overrides:
        return config
    merged: dict[str, dict[str, object]] = {}
    for raw in raw_overrides:
        _nest_override(merged, parse_override(raw))
    return config.with_overrides(merged)


__all__ = [
    "CoercedValue",
    "ConfigOverride",
    "apply_overrides",
    "coerce_value",
    "parse_override",
]
