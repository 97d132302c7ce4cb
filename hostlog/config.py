"""
Logger configuration and YAML loading.

A config file keeps its options under a ``logging`` section:

    logging:
      component_name: backup
      base_directory: /var/opt/backup
      retention_days: 30
"""
import dataclasses
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from hostlog import paths
from hostlog.exceptions import ConfigError

DEFAULT_RETENTION_DAYS = 90
CONFIG_SECTION = "logging"


@dataclass(frozen=True)
class LoggerConfig:
    component_name: str = ""
    base_directory: Optional[Path] = None
    retention_days: int = DEFAULT_RETENTION_DAYS
    host_name: Optional[str] = None

    def __post_init__(self):
        if isinstance(self.retention_days, bool) or not isinstance(self.retention_days, int):
            raise ConfigError(f"retention_days must be an integer, got {self.retention_days!r}")
        if self.retention_days < 0:
            raise ConfigError(f"retention_days must be >= 0, got {self.retention_days}")
        if self.component_name is None:
            object.__setattr__(self, "component_name", "")
        if self.base_directory is not None:
            object.__setattr__(self, "base_directory", Path(self.base_directory))

    def resolved(self) -> "LoggerConfig":
        """Return a copy with host and base directory filled from the environment."""
        return dataclasses.replace(
            self,
            base_directory=self.base_directory or paths.default_base_directory(),
            host_name=self.host_name or paths.host_name(),
        )

    def with_base_directory(self, base_directory: Optional[Union[str, Path]]) -> "LoggerConfig":
        if base_directory is None:
            return self
        return dataclasses.replace(self, base_directory=Path(base_directory))


def _parse_section(section: Dict[str, Any], source: Path) -> LoggerConfig:
    known = {field.name for field in dataclasses.fields(LoggerConfig)}
    unknown = sorted(set(section) - known)
    if unknown:
        raise ConfigError(f"Unknown option(s) in {source}: {', '.join(unknown)}")

    options = dict(section)
    base = options.get("base_directory")
    if base is not None:
        base = Path(str(base)).expanduser()
        if not base.is_absolute():
            base = source.parent / base
        options["base_directory"] = base
    for key in ("component_name", "host_name"):
        if options.get(key) is not None:
            options[key] = str(options[key])
    return LoggerConfig(**options)


def load_config(config_path: Union[str, Path]) -> LoggerConfig:
    """Load configuration from YAML file. A missing file yields the defaults."""
    config_path = Path(config_path)
    if config_path.is_dir():
        raise ConfigError(f"Config path points to a directory: {config_path}")
    if not config_path.exists():
        return LoggerConfig()

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid config file {config_path}: {e}") from e

    if data is None:
        return LoggerConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {config_path} must contain a mapping")

    section = data.get(CONFIG_SECTION) or {}
    if not isinstance(section, dict):
        raise ConfigError(f"'{CONFIG_SECTION}' section in {config_path} must be a mapping")
    return _parse_section(section, config_path)
