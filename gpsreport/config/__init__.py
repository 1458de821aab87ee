"""Configuration management for gpsreport."""

from gpsreport.config.manager import ConfigManager, ConfigError
from gpsreport.config.defaults import DEFAULT_CONFIG

__all__ = ["ConfigManager", "ConfigError", "DEFAULT_CONFIG"]
