"""Configuration manager for gpsreport."""

import copy
import logging
from typing import Any, Dict, Optional

from gpsreport.config.defaults import (
    DEFAULT_CONFIG,
    FIELD_DESCRIPTIONS,
    REQUIRED_FIELDS,
)

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Exception raised for configuration errors."""
    pass


class ConfigManager:
    """Holds the run configuration and provides dot-notation access.

    gpsreport reads no configuration file. Values come from the built-in
    defaults, overridden by whatever the command line supplies.

    Attributes:
        config: Dictionary containing all configuration values

    Examples:
        >>> config = ConfigManager.load({"output": {"csv": "out.csv"}})
        >>> config.get("output.csv")
        'out.csv'
        >>> config.get("scan.root")
        'images'
    """

    def __init__(self, config: Dict[str, Any]):
        self.config = config

    @classmethod
    def load(cls, overrides: Optional[Dict[str, Any]] = None) -> "ConfigManager":
        """Build configuration from defaults and optional overrides.

        Args:
            overrides: Nested dictionary of values taking precedence over
                the defaults (derived from command-line arguments)

        Returns:
            ConfigManager instance with merged configuration

        Raises:
            ConfigError: If a required field ends up empty
        """
        config = cls._merge(copy.deepcopy(DEFAULT_CONFIG), overrides or {})
        cls._validate_required_fields(config)
        logger.debug(f"Configuration loaded: {config}")
        return cls(config)

    @staticmethod
    def _merge(base: Dict[str, Any], updates: Dict[str, Any]) -> Dict[str, Any]:
        """Recursively merge `updates` into `base`, updates taking precedence."""
        for key, value in updates.items():
            if isinstance(base.get(key), dict) and isinstance(value, dict):
                ConfigManager._merge(base[key], value)
            else:
                base[key] = value
        return base

    @staticmethod
    def _validate_required_fields(config: Dict[str, Any]) -> None:
        """Raise ConfigError listing every empty required field."""
        missing = [
            field for field in REQUIRED_FIELDS
            if not ConfigManager._lookup(config, field)
        ]

        if missing:
            raise ConfigError(
                "Missing required configuration fields:\n"
                + "\n".join(
                    f"  - {field} ({FIELD_DESCRIPTIONS.get(field, field)})"
                    for field in missing
                )
            )

    @staticmethod
    def _lookup(config: Dict[str, Any], key: str) -> Any:
        node: Any = config
        for part in key.split("."):
            if not isinstance(node, dict) or part not in node:
                return None
            node = node[part]
        return node

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value using dot notation.

        Args:
            key: Configuration key (e.g., "output.csv" or "logging.level")
            default: Default value to return if key not found

        Returns:
            Configuration value or default
        """
        value = self._lookup(self.config, key)
        return default if value is None else value

    def __repr__(self) -> str:
        return f"<ConfigManager csv={self.get('output.csv')!r}>"
