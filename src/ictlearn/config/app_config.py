"""Application configuration loader.

Loads configuration from data/config/app_config_v1.yaml, falling back to
built-in defaults. A few values can be overridden from the environment
(ICTLEARN_HOST, ICTLEARN_PORT, ICTLEARN_LOG_LEVEL, ICTLEARN_SEED).

Usage:
    from ictlearn.config.app_config import load_app_config

    config = load_app_config()
    print(config.server.port)
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import structlog
import yaml

logger = structlog.get_logger(__name__)

# Config file path (relative to project root)
CONFIG_FILE = Path("data/config/app_config_v1.yaml")

ENV_PREFIX = "ICTLEARN_"


@dataclass
class ServerConfig:
    """HTTP server settings."""

    host: str = "127.0.0.1"
    port: int = 5000
    cors_origins: list[str] = field(default_factory=lambda: ["*"])


@dataclass
class LoggingConfig:
    """Log output settings."""

    level: str = "INFO"
    json: bool = False


@dataclass
class AppConfig:
    """Application-wide configuration."""

    server: ServerConfig = field(default_factory=ServerConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    seed_demo_data: bool = True


# Module-level cache
_cached_config: AppConfig | None = None


def _get_defaults() -> dict[str, Any]:
    """Get default configuration values."""
    return {
        "server": {
            "host": "127.0.0.1",
            "port": 5000,
            "cors_origins": ["*"],
        },
        "logging": {
            "level": "INFO",
            "json": False,
        },
        "seed": {
            "enabled": True,
        },
    }


def _apply_env_overrides(data: dict[str, Any]) -> dict[str, Any]:
    """Apply ICTLEARN_* environment variables on top of file values."""
    server = data.setdefault("server", {})
    log = data.setdefault("logging", {})

    if host := os.environ.get(f"{ENV_PREFIX}HOST"):
        server["host"] = host
    if port := os.environ.get(f"{ENV_PREFIX}PORT"):
        try:
            server["port"] = int(port)
        except ValueError:
            logger.warning("invalid_port_override", value=port)
    if level := os.environ.get(f"{ENV_PREFIX}LOG_LEVEL"):
        log["level"] = level.upper()
    if seed := os.environ.get(f"{ENV_PREFIX}SEED"):
        data.setdefault("seed", {})["enabled"] = seed.strip().lower() not in ("0", "false", "no", "off")

    return data


def _parse_config(data: dict[str, Any]) -> AppConfig:
    """Parse configuration dictionary into AppConfig object."""
    defaults = _get_defaults()

    server_data = {**defaults["server"], **(data.get("server") or {})}
    server = ServerConfig(
        host=str(server_data["host"]),
        port=int(server_data["port"]),
        cors_origins=list(server_data["cors_origins"]),
    )

    log_data = {**defaults["logging"], **(data.get("logging") or {})}
    log = LoggingConfig(
        level=str(log_data["level"]).upper(),
        json=bool(log_data["json"]),
    )

    seed_data = {**defaults["seed"], **(data.get("seed") or {})}

    return AppConfig(server=server, logging=log, seed_demo_data=bool(seed_data["enabled"]))


def load_app_config(force_reload: bool = False, config_file: Path | None = None) -> AppConfig:
    """Load application config.

    Args:
        force_reload: If True, ignore cached config and reload from file.
        config_file: Alternate YAML file (defaults to CONFIG_FILE).

    Returns:
        AppConfig object with all settings.
    """
    global _cached_config

    if _cached_config is not None and not force_reload:
        return _cached_config

    path = config_file or CONFIG_FILE
    data: dict[str, Any]

    if path.exists():
        logger.debug("loading_app_config", source=str(path))
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    else:
        logger.debug("using_default_config")
        data = _get_defaults()

    _cached_config = _parse_config(_apply_env_overrides(data))
    return _cached_config


def clear_config_cache() -> None:
    """Clear the configuration cache.

    Useful for testing or when config is modified at runtime.
    """
    global _cached_config
    _cached_config = None
