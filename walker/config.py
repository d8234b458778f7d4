"""Loading of the ``walker.yaml`` configuration file."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Tuple

import yaml

DEFAULT_CONFIG_FILE = "walker.yaml"
OUTPUT_FORMATS = ("json", "text")


class ConfigError(ValueError):
    """Raised when the configuration file cannot be used."""


@dataclass(frozen=True)
class WalkerConfig:
    """Settings read from the configuration file."""

    disable: Tuple[str, ...] = field(default_factory=tuple)
    output: str = "json"

    def with_disabled(self, codes) -> "WalkerConfig":
        merged = tuple(dict.fromkeys([*self.disable, *codes]))
        return WalkerConfig(disable=merged, output=self.output)


def _read_yaml_file(path: Path) -> Any:
    with path.open("r", encoding="utf-8") as handle:
        try:
            return yaml.safe_load(handle)
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc


def load_config(path: str | Path | None = None) -> WalkerConfig:
    """Load the configuration file.

    Without an explicit ``path`` the default file in the working directory
    is used when present; a missing default file yields the defaults. An
    explicit path that does not exist is an error.
    """

    explicit = path is not None
    config_path = Path(path) if explicit else Path(DEFAULT_CONFIG_FILE)
    if not config_path.exists():
        if explicit:
            raise ConfigError(f"Configuration file not found: {config_path}")
        return WalkerConfig()

    data = _read_yaml_file(config_path)
    if data is None:
        return WalkerConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"Configuration at {config_path} is not a mapping")

    disable = data.get("disable") or []
    if not isinstance(disable, list) or not all(isinstance(code, str) for code in disable):
        raise ConfigError(f"'disable' in {config_path} must be a list of rule codes")

    output = data.get("output", "json")
    if output not in OUTPUT_FORMATS:
        raise ConfigError(f"'output' in {config_path} must be one of: {', '.join(OUTPUT_FORMATS)}")

    return WalkerConfig(disable=tuple(disable), output=output)
