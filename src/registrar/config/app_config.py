"""Application configuration loader.

Loads configuration from data/config/registrar_v1.yaml with fallback to
built-in defaults. REGISTRAR_DB_PATH overrides the database path.

Usage:
    from registrar.config.app_config import load_app_config

    config = load_app_config()
    db_path = config.database.path
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import structlog
import yaml

from registrar.db.errors import RegistrarError

logger = structlog.get_logger(__name__)

# Config file path (relative to project root)
CONFIG_FILE = Path("data/config/registrar_v1.yaml")

DB_PATH_ENV = "REGISTRAR_DB_PATH"


class ConfigError(RegistrarError):
    """Raised when the config file can't be used."""


@dataclass
class DatabaseConfig:
    """Configuration for the SQLite store."""

    path: Path = Path("db/registrar.db")
    seed_on_init: bool = False


@dataclass
class AppConfig:
    """Application-wide configuration."""

    database: DatabaseConfig = field(default_factory=DatabaseConfig)


# Module-level cache
_cached_config: AppConfig | None = None


def _get_defaults() -> dict[str, Any]:
    """Get default configuration values."""
    return {
        "database": {
            "path": "db/registrar.db",
            "seed_on_init": False,
        },
    }


def _parse_config(data: dict[str, Any]) -> AppConfig:
    """Parse configuration dictionary into AppConfig object."""
    if not isinstance(data, dict):
        raise ConfigError(f"Config must be a mapping, got {type(data).__name__}")

    db_data = data.get("database") or {}
    if not isinstance(db_data, dict):
        raise ConfigError("'database' section must be a mapping")

    database = DatabaseConfig(
        path=Path(db_data.get("path", "db/registrar.db")),
        seed_on_init=bool(db_data.get("seed_on_init", False)),
    )

    return AppConfig(database=database)


def load_app_config(force_reload: bool = False) -> AppConfig:
    """Load application config, falling back to defaults.

    Args:
        force_reload: If True, ignore cached config and reload from file.

    Returns:
        AppConfig object with all settings.

    Raises:
        ConfigError: If the config file is not valid YAML or has the
            wrong shape.
    """
    global _cached_config

    if _cached_config is not None and not force_reload:
        return _cached_config

    data: dict[str, Any]

    if CONFIG_FILE.exists():
        logger.debug("loading_app_config", source=str(CONFIG_FILE))
        try:
            data = yaml.safe_load(CONFIG_FILE.read_text(encoding="utf-8")) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {CONFIG_FILE}: {e}") from e
    else:
        logger.info("using_default_config")
        data = _get_defaults()

    config = _parse_config(data)

    env_path = os.environ.get(DB_PATH_ENV)
    if env_path:
        logger.debug("db_path_from_env", path=env_path)
        config.database.path = Path(env_path)

    _cached_config = config
    return _cached_config


def clear_config_cache() -> None:
    """Clear the configuration cache.

    Useful for testing or when config is modified at runtime.
    """
    global _cached_config
    _cached_config = None
