"""
Calculator configuration loaded from ``astcalc.toml``.

Example:

    [calculator]
    strict = true        # reject trailing input after the expression
    precision = 6        # decimal places shown for results (omit for full precision)
    show_expression = true
    log_level = "INFO"
"""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

from astcalc.core.errors import ConfigError

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "astcalc.toml"

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def _default_log_level() -> str:
    return os.getenv("LOG_LEVEL", "WARNING").upper()


@dataclass
class CalculatorConfig:
    """Calculator settings."""

    strict: bool = False
    precision: int | None = None
    show_expression: bool = True
    log_level: str = field(default_factory=_default_log_level)


def load_config(path: Path) -> CalculatorConfig:
    """Read the ``[calculator]`` table of a TOML file.

    Missing keys keep their defaults; a file without the table yields
    the default configuration.

    Raises:
        ConfigError: If the file cannot be read or a value is invalid.
    """
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e

    section = data.get("calculator", {})
    if not isinstance(section, dict):
        raise ConfigError(f"[calculator] in {path} must be a table")

    config = _build_config(section, path)
    logger.debug("Loaded config from %s: %s", path, config)
    return config


def _build_config(section: dict[str, Any], path: Path) -> CalculatorConfig:
    known = {f.name for f in fields(CalculatorConfig)}
    unknown = sorted(set(section) - known)
    if unknown:
        raise ConfigError(f"Unknown keys in [calculator] of {path}: {', '.join(unknown)}")

    config = CalculatorConfig()

    for key in ("strict", "show_expression"):
        if key in section:
            value = section[key]
            if not isinstance(value, bool):
                raise ConfigError(f"calculator.{key} must be true or false, got {value!r}")
            setattr(config, key, value)

    if "precision" in section:
        precision = section["precision"]
        if isinstance(precision, bool) or not isinstance(precision, int) or precision < 0:
            raise ConfigError(
                f"calculator.precision must be a non-negative integer, got {precision!r}"
            )
        config.precision = precision

    if "log_level" in section:
        level = section["log_level"]
        if not isinstance(level, str) or level.upper() not in _LOG_LEVELS:
            raise ConfigError(
                f"calculator.log_level must be one of {', '.join(sorted(_LOG_LEVELS))}, "
                f"got {level!r}"
            )
        config.log_level = level.upper()

    return config


def find_config(start: Path) -> Path | None:
    """Find ``astcalc.toml`` in ``start`` or one of its parents."""
    current = start.resolve()
    for directory in (current, *current.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def resolve_config(path: Path | None = None) -> CalculatorConfig:
    """Load ``path`` if given, else the nearest ``astcalc.toml``, else defaults."""
    if path is not None:
        return load_config(path)

    found = find_config(Path.cwd())
    if found is None:
        return CalculatorConfig()
    return load_config(found)
