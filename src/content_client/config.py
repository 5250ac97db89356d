"""Client configuration defaults, override merging and YAML loading.

Configuration is a flat set of optional values with built-in defaults.
Caller overrides always win over defaults; ``None`` overrides are ignored so
partially filled mappings can be passed straight through.

Configuration file structure:
    base_url: "https://leafpad.io"
    api_path: "/api/public/v1/post"
    default_limit: 10
    timeout_ms: 10000
    retries: 3
"""

import dataclasses
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

import yaml

from .errors import ConfigError


@dataclass(frozen=True)
class ClientConfig:
    """Settings for the content API client.

    Attributes:
        base_url: Scheme and host of the content API
        api_path: Path prefix under which organizations are addressed
        default_limit: Page size used when a call does not pass one
        max_items_for_filtering: Upper bound of items fetched for client-side filtering
        cache_revalidate_interval: Seconds between cache revalidations (informational)
        static_params_revalidate_interval: Seconds between static path rebuilds (informational)
        words_per_minute: Reading speed used by read-time estimates
        timeout_ms: Deadline for one request, retries and backoff included
        retries: Maximum number of attempts per request
        docs_path_prefix: Route prefix for document tree paths
    """
    base_url: str = "https://leafpad.io"
    api_path: str = "/api/public/v1/post"
    default_limit: int = 10
    max_items_for_filtering: int = 50
    cache_revalidate_interval: int = 300
    static_params_revalidate_interval: int = 3600
    words_per_minute: int = 200
    timeout_ms: int = 10000
    retries: int = 3
    docs_path_prefix: str = "/docs"

    def __post_init__(self):
        if not str(self.base_url).strip():
            raise ConfigError("cannot be empty", "base_url")
        for name in ("timeout_ms", "retries", "default_limit", "words_per_minute"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigError(
                    f"must be an integer, got {type(value).__name__}", name
                )
        if self.timeout_ms <= 0:
            raise ConfigError(f"must be positive, got {self.timeout_ms}", "timeout_ms")
        if self.retries < 1:
            raise ConfigError(f"must be at least 1, got {self.retries}", "retries")
        if self.default_limit < 1:
            raise ConfigError(
                f"must be at least 1, got {self.default_limit}", "default_limit"
            )
        if self.words_per_minute < 1:
            raise ConfigError(
                f"must be at least 1, got {self.words_per_minute}", "words_per_minute"
            )

    @classmethod
    def field_names(cls):
        return {f.name for f in dataclasses.fields(cls)}

    @property
    def timeout_seconds(self) -> float:
        return self.timeout_ms / 1000

    def merged(self, overrides: Optional[Mapping[str, Any]] = None) -> "ClientConfig":
        """Return a copy of this config with overrides applied.

        Args:
            overrides: Mapping of field name to value; None values are skipped

        Returns:
            New ClientConfig with overrides taking precedence

        Raises:
            ConfigError: If an override names an unknown field or fails validation
        """
        if not overrides:
            return self

        unknown = set(overrides) - self.field_names()
        if unknown:
            raise ConfigError(f"Unknown fields: {', '.join(sorted(unknown))}")

        changes = {key: value for key, value in overrides.items() if value is not None}
        return dataclasses.replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        return dataclasses.asdict(self)


DEFAULT_CONFIG = ClientConfig()


class ConfigLoader:
    """Loads client configuration from YAML files.

    Keys in the file map one to one onto ClientConfig fields. Missing keys
    keep their defaults and an empty file yields the default configuration.
    """

    @classmethod
    def load(cls, config_path: str, base: ClientConfig = DEFAULT_CONFIG) -> ClientConfig:
        """Load and parse configuration from a YAML file.

        Args:
            config_path: Path to the YAML configuration file
            base: Configuration the file values are merged onto

        Returns:
            ClientConfig with file values applied over base

        Raises:
            ConfigError: If the file cannot be read or is invalid
        """
        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                content = f.read()
        except FileNotFoundError:
            raise ConfigError(f"Configuration file not found: {config_path}")
        except PermissionError:
            raise ConfigError(f"Permission denied reading {config_path}")
        except OSError as e:
            raise ConfigError(f"Cannot read {config_path}: {e}")

        try:
            config_dict = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML syntax: {str(e)}")

        if config_dict is None:
            return base

        if not isinstance(config_dict, dict):
            raise ConfigError(
                f"Configuration must be a YAML dictionary, got {type(config_dict).__name__}"
            )

        return base.merged(config_dict)
