"""
Unit tests for Config module.

Tests configuration loading, dataclass behavior, and defaults.
"""

import json

from pivotal_client.config import (
    Config,
    ApiConfig,
    AuthConfig,
    PaginationConfig,
    DEFAULT_BASE_URL,
    load_config,
    get_config,
    set_config,
)


class TestApiConfig:
    """Test ApiConfig dataclass."""

    def test_default_values(self):
        """Test default API configuration values."""
        config = ApiConfig()
        assert config.base_url == "https://www.pivotaltracker.com/services/v5"
        assert config.timeout == 30.0
        assert config.connect_timeout == 10.0

    def test_custom_values(self):
        """Test custom API configuration values."""
        config = ApiConfig(timeout=60.0, connect_timeout=20.0)
        assert config.timeout == 60.0
        assert config.connect_timeout == 20.0


class TestConfig:
    """Test main Config class."""

    def test_default_config(self):
        """Test creating config with all defaults."""
        config = Config()
        assert isinstance(config.api, ApiConfig)
        assert isinstance(config.auth, AuthConfig)
        assert isinstance(config.pagination, PaginationConfig)
        assert config.auth.token == ""
        assert config.pagination.page_limit == 10

    def test_from_dict_partial(self):
        """Test from_dict with partial configuration."""
        config = Config.from_dict({"pagination": {"page_limit": 50}})
        assert config.pagination.page_limit == 50
        assert config.api.base_url == DEFAULT_BASE_URL

    def test_round_trip(self):
        """Test config survives round-trip through dict."""
        original = Config(auth=AuthConfig(token="abc"), pagination=PaginationConfig(page_limit=7))
        restored = Config.from_dict(original.to_dict())
        assert restored == original


class TestLoadConfig:
    """Test loading configuration from file."""

    def test_load_from_json_file(self, tmp_path):
        """Test loading configuration from JSON file."""
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({
            "api": {"base_url": "https://tracker.example/services/v5", "timeout": 12.0},
            "auth": {"token": "secret"},
        }))

        config = load_config(config_file)

        assert config.api.base_url == "https://tracker.example/services/v5"
        assert config.api.timeout == 12.0
        assert config.api.connect_timeout == 10.0
        assert config.auth.token == "secret"

    def test_load_accepts_str_path(self, tmp_path):
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({"pagination": {"page_limit": 3}}))
        assert load_config(str(config_file)).pagination.page_limit == 3

    def test_load_missing_file_returns_defaults(self, tmp_path):
        """Test that missing config file returns default config."""
        config = load_config(tmp_path / "nonexistent.json")
        assert config == Config()

    def test_load_invalid_json_returns_defaults(self, tmp_path):
        """Test that invalid JSON returns default config."""
        config_file = tmp_path / "invalid.json"
        config_file.write_text("{ invalid json }")
        assert load_config(config_file) == Config()

    def test_load_unknown_key_returns_defaults(self, tmp_path):
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({"api": {"retries": 5}}))
        assert load_config(config_file) == Config()


class TestGetConfig:
    """Test get_config singleton behavior."""

    def test_get_config_returns_same_instance(self):
        """Test that get_config returns the same instance."""
        assert get_config() is get_config()

    def test_set_config(self):
        custom = Config(pagination=PaginationConfig(page_limit=25))
        set_config(custom)
        assert get_config() is custom
