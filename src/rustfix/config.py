"""User configuration — ~/.rustfix/config.toml."""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass
from pathlib import Path

_CONFIG_FILE = Path.home() / ".rustfix" / "config.toml"

OUTPUT_FORMATS = ("text", "json")
DEFAULT_RETENTION_DAYS = 30


class ConfigError(Exception):
    """Raised when the config file cannot be read or has invalid values."""


@dataclass(frozen=True)
class Config:
    output_format: str = "text"
    only: tuple[str, ...] = ()
    log: bool = False
    retention_days: int = DEFAULT_RETENTION_DAYS


def config_path() -> Path:
    """Return the config file path. RUSTFIX_CONFIG overrides the default."""
    override = os.environ.get("RUSTFIX_CONFIG")
    return Path(override) if override else _CONFIG_FILE


def _load_file(path: Path) -> dict:
    if not path.exists():
        return {}
    try:
        return tomllib.loads(path.read_text())
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigError(f"cannot read {path}: {e}") from e


def load_config() -> Config:
    """Load the config file. A missing file yields the defaults."""
    path = config_path()
    data = _load_file(path)

    output_format = data.get("format", "text")
    if output_format not in OUTPUT_FORMATS:
        valid = ", ".join(OUTPUT_FORMATS)
        raise ConfigError(f"{path}: unknown format '{output_format}'. Valid: {valid}")

    only = data.get("only", [])
    if not isinstance(only, list) or not all(isinstance(c, str) for c in only):
        raise ConfigError(f"{path}: 'only' must be a list of strings")

    log = data.get("log", False)
    if not isinstance(log, bool):
        raise ConfigError(f"{path}: 'log' must be true or false")

    retention_days = data.get("retention_days", DEFAULT_RETENTION_DAYS)
    # TOML booleans decode to bool, which is an int subclass.
    valid_days = isinstance(retention_days, int) and not isinstance(retention_days, bool)
    if not valid_days or retention_days < 1:
        raise ConfigError(f"{path}: 'retention_days' must be a positive integer")

    return Config(
        output_format=output_format,
        only=tuple(only),
        log=log,
        retention_days=retention_days,
    )
