"""Tests for app configuration."""

import pytest

from ictlearn.config.app_config import (
    AppConfig,
    CONFIG_FILE,
    LoggingConfig,
    ServerConfig,
    clear_config_cache,
    load_app_config,
)


@pytest.fixture(autouse=True)
def no_env_overrides(monkeypatch):
    """Keep ICTLEARN_* variables from the outer environment out."""
    for name in ("ICTLEARN_HOST", "ICTLEARN_PORT", "ICTLEARN_LOG_LEVEL", "ICTLEARN_SEED"):
        monkeypatch.delenv(name, raising=False)


class TestLoadAppConfig:
    """Tests for load_app_config function."""

    def test_load_config_from_yaml(self):
        """Loads the bundled app_config_v1.yaml."""
        assert CONFIG_FILE.exists()
        config = load_app_config()
        assert isinstance(config, AppConfig)
        assert isinstance(config.server, ServerConfig)
        assert isinstance(config.logging, LoggingConfig)
        assert config.seed_demo_data is True

    def test_config_is_cached(self):
        """Second call returns the cached object."""
        assert load_app_config() is load_app_config()

    def test_force_reload(self):
        """force_reload builds a new object."""
        first = load_app_config()
        assert load_app_config(force_reload=True) is not first

    def test_missing_file_uses_defaults(self, tmp_path):
        """Defaults apply when the file does not exist."""
        config = load_app_config(force_reload=True, config_file=tmp_path / "missing.yaml")
        assert config.server.host == "127.0.0.1"
        assert config.server.port == 5000
        assert config.server.cors_origins == ["*"]
        assert config.logging.level == "INFO"
        assert config.logging.json is False

    def test_partial_file_merges_defaults(self, tmp_path):
        """Keys missing from the file keep their defaults."""
        path = tmp_path / "app.yaml"
        path.write_text("server:\n  port: 8080\nseed:\n  enabled: false\n", encoding="utf-8")

        config = load_app_config(force_reload=True, config_file=path)
        assert config.server.port == 8080
        assert config.server.host == "127.0.0.1"
        assert config.seed_demo_data is False

    def test_empty_file(self, tmp_path):
        """An empty YAML file behaves like defaults."""
        path = tmp_path / "app.yaml"
        path.write_text("", encoding="utf-8")
        config = load_app_config(force_reload=True, config_file=path)
        assert config.server.port == 5000


class TestEnvOverrides:
    """Tests for ICTLEARN_* environment variables."""

    def test_env_overrides_file(self, tmp_path, monkeypatch):
        """Environment wins over file values."""
        monkeypatch.setenv("ICTLEARN_HOST", "0.0.0.0")
        monkeypatch.setenv("ICTLEARN_PORT", "9000")
        monkeypatch.setenv("ICTLEARN_LOG_LEVEL", "debug")

        config = load_app_config(force_reload=True, config_file=tmp_path / "missing.yaml")
        assert config.server.host == "0.0.0.0"
        assert config.server.port == 9000
        assert config.logging.level == "DEBUG"

    def test_bad_port_ignored(self, tmp_path, monkeypatch):
        """Non-numeric port override is ignored."""
        monkeypatch.setenv("ICTLEARN_PORT", "http")
        config = load_app_config(force_reload=True, config_file=tmp_path / "missing.yaml")
        assert config.server.port == 5000

    @pytest.mark.parametrize("value,expected", [("0", False), ("false", False), ("1", True), ("yes", True)])
    def test_seed_override(self, tmp_path, monkeypatch, value, expected):
        """ICTLEARN_SEED switches the demo data."""
        monkeypatch.setenv("ICTLEARN_SEED", value)
        config = load_app_config(force_reload=True, config_file=tmp_path / "missing.yaml")
        assert config.seed_demo_data is expected

    def test_clear_cache(self):
        """clear_config_cache drops the cached object."""
        first = load_app_config()
        clear_config_cache()
        assert load_app_config() is not first
