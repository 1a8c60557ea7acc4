"""Configuration loading for Roster."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

DEFAULT_DB_PATH = "roster.db"

# Environment variable -> Settings field
ENV_OVERRIDES = {
    "ROSTER_DB_PATH": "db_path",
    "ROSTER_LOG_DIR": "log_dir",
    "ROSTER_LOG_LEVEL": "log_level",
}


class ConfigError(Exception):
    """Raised when configuration is invalid or missing."""


@dataclass
class Settings:
    """Runtime settings.

    Attributes:
        db_path: SQLite database file. Use ":memory:" for an in-memory DB.
        log_dir: Directory for rotating log files.
        log_level: Log level name.
        log_console: Whether logs are also written to the console.
    """

    db_path: str = DEFAULT_DB_PATH
    log_dir: str = "logs"
    log_level: str = "INFO"
    log_console: bool = True

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Settings:
        """Create settings from a configuration dictionary.

        Args:
            data: Configuration dictionary from YAML.

        Returns:
            Parsed settings object.

        Raises:
            ConfigError: If a section is not a mapping.
        """
        database = data.get("database") or {}
        logging_data = data.get("logging") or {}
        for section, value in (("database", database), ("logging", logging_data)):
            if not isinstance(value, dict):
                raise ConfigError(f"Section '{section}' must be a mapping")

        defaults = cls()
        return cls(
            db_path=str(database.get("path", defaults.db_path)),
            log_dir=str(logging_data.get("dir", defaults.log_dir)),
            log_level=str(logging_data.get("level", defaults.log_level)),
            log_console=bool(logging_data.get("console", defaults.log_console)),
        )


def load_settings(path: str | Path | None = None) -> Settings:
    """Load settings from an optional YAML file and the environment.

    Environment variables (ROSTER_DB_PATH, ROSTER_LOG_DIR, ROSTER_LOG_LEVEL)
    take precedence over values from the file.

    Args:
        path: Path to a YAML config file, or None to use defaults.

    Returns:
        Loaded settings.

    Raises:
        ConfigError: If the file is missing or malformed.
    """
    data: dict[str, Any] = {}
    if path is not None:
        config_path = Path(path)
        if not config_path.exists():
            raise ConfigError(f"Config file not found: {config_path}")
        try:
            with open(config_path) as f:
                loaded = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e
        if loaded is None:
            loaded = {}
        if not isinstance(loaded, dict):
            raise ConfigError(
                f"Configuration must be a YAML mapping, got {type(loaded).__name__}"
            )
        data = loaded

    settings = Settings.from_dict(data)

    for env_var, field_name in ENV_OVERRIDES.items():
        value = os.environ.get(env_var)
        if value:
            setattr(settings, field_name, value)

    return settings
