"""Unit tests for content_client.config module."""

import os
import tempfile

import pytest

from src.content_client.config import ClientConfig, ConfigLoader, DEFAULT_CONFIG
from src.content_client.errors import ConfigError


class TestClientConfig:
    """Test cases for ClientConfig defaults, validation and merging."""

    def test_defaults(self):
        """Defaults should match the public API settings."""
        config = ClientConfig()
        assert config.base_url == "https://leafpad.io"
        assert config.api_path == "/api/public/v1/post"
        assert config.default_limit == 10
        assert config.max_items_for_filtering == 50
        assert config.cache_revalidate_interval == 300
        assert config.static_params_revalidate_interval == 3600
        assert config.words_per_minute == 200
        assert config.timeout_ms == 10000
        assert config.retries == 3
        assert config.docs_path_prefix == "/docs"

    def test_timeout_seconds(self):
        assert ClientConfig(timeout_ms=2500).timeout_seconds == 2.5

    def test_overrides_win_over_defaults(self):
        """merged should apply caller overrides over defaults."""
        config = DEFAULT_CONFIG.merged({'retries': 5, 'base_url': 'https://example.test'})
        assert config.retries == 5
        assert config.base_url == 'https://example.test'
        assert config.timeout_ms == DEFAULT_CONFIG.timeout_ms

    def test_none_overrides_are_ignored(self):
        """None values should keep the existing setting."""
        config = DEFAULT_CONFIG.merged({'retries': None, 'default_limit': 25})
        assert config.retries == 3
        assert config.default_limit == 25

    def test_merged_returns_new_instance(self):
        """merged should not modify the original config."""
        DEFAULT_CONFIG.merged({'retries': 7})
        assert DEFAULT_CONFIG.retries == 3

    def test_empty_overrides_return_same_config(self):
        assert DEFAULT_CONFIG.merged(None) is DEFAULT_CONFIG
        assert DEFAULT_CONFIG.merged({}) is DEFAULT_CONFIG

    def test_unknown_override_raises(self):
        """Unknown keys should raise ConfigError."""
        with pytest.raises(ConfigError) as exc_info:
            DEFAULT_CONFIG.merged({'retry_count': 2})
        assert "retry_count" in str(exc_info.value)

    @pytest.mark.parametrize("field_name,value", [
        ('timeout_ms', 0),
        ('timeout_ms', -1),
        ('retries', 0),
        ('default_limit', 0),
        ('words_per_minute', 0),
    ])
    def test_rejects_out_of_range_values(self, field_name, value):
        with pytest.raises(ConfigError) as exc_info:
            ClientConfig(**{field_name: value})
        assert exc_info.value.config_field == field_name

    def test_rejects_non_integer_values(self):
        with pytest.raises(ConfigError) as exc_info:
            ClientConfig(retries="3")
        assert exc_info.value.config_field == 'retries'

    def test_rejects_empty_base_url(self):
        with pytest.raises(ConfigError):
            ClientConfig(base_url="  ")

    def test_to_dict(self):
        data = ClientConfig().to_dict()
        assert data['retries'] == 3
        assert set(data) == ClientConfig.field_names()


class TestConfigLoader:
    """Test cases for ConfigLoader."""

    @pytest.fixture
    def temp_dir(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            yield tmpdir

    def _write(self, temp_dir, content):
        path = os.path.join(temp_dir, 'content-client.yaml')
        with open(path, 'w', encoding='utf-8') as f:
            f.write(content)
        return path

    def test_load_valid_config(self, temp_dir):
        """load should apply YAML values over defaults."""
        path = self._write(temp_dir, "base_url: https://docs.example.test\nretries: 5\ntimeout_ms: 3000\n")
        config = ConfigLoader.load(path)
        assert config.base_url == "https://docs.example.test"
        assert config.retries == 5
        assert config.timeout_ms == 3000
        assert config.default_limit == 10

    def test_load_empty_file_returns_defaults(self, temp_dir):
        path = self._write(temp_dir, "")
        assert ConfigLoader.load(path) == DEFAULT_CONFIG

    def test_load_missing_file(self, temp_dir):
        with pytest.raises(ConfigError) as exc_info:
            ConfigLoader.load(os.path.join(temp_dir, 'missing.yaml'))
        assert "not found" in str(exc_info.value)

    def test_load_invalid_yaml(self, temp_dir):
        path = self._write(temp_dir, "retries: [1, 2\n")
        with pytest.raises(ConfigError) as exc_info:
            ConfigLoader.load(path)
        assert "Invalid YAML" in str(exc_info.value)

    def test_load_non_mapping(self, temp_dir):
        path = self._write(temp_dir, "- retries\n- 3\n")
        with pytest.raises(ConfigError) as exc_info:
            ConfigLoader.load(path)
        assert "dictionary" in str(exc_info.value)

    def test_load_unknown_key(self, temp_dir):
        path = self._write(temp_dir, "organization: acme\n")
        with pytest.raises(ConfigError):
            ConfigLoader.load(path)

    def test_load_invalid_value(self, temp_dir):
        path = self._write(temp_dir, "retries: 0\n")
        with pytest.raises(ConfigError) as exc_info:
            ConfigLoader.load(path)
        assert exc_info.value.config_field == 'retries'

    def test_load_onto_custom_base(self, temp_dir):
        """File values should be merged onto the given base config."""
        path = self._write(temp_dir, "retries: 2\n")
        base = ClientConfig(timeout_ms=500)
        config = ConfigLoader.load(path, base=base)
        assert config.retries == 2
        assert config.timeout_ms == 500
