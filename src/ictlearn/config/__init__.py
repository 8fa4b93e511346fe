"""Configuration package for the learning hub."""

from ictlearn.config.app_config import (
    AppConfig,
    LoggingConfig,
    ServerConfig,
    clear_config_cache,
    load_app_config,
)

__all__ = [
    "AppConfig",
    "LoggingConfig",
    "ServerConfig",
    "clear_config_cache",
    "load_app_config",
]
