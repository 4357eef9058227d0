"""Configuration package for the registrar."""

from registrar.config.app_config import (
    AppConfig,
    ConfigError,
    DatabaseConfig,
    clear_config_cache,
    load_app_config,
)

__all__ = [
    "AppConfig",
    "ConfigError",
    "DatabaseConfig",
    "clear_config_cache",
    "load_app_config",
]
