"""Configuration loading and schema for Feedsmith."""

from feedsmith.config.manager import ConfigManager
from feedsmith.config.schema import GlobalConfig, HttpConfig, IVooxConfig, IVooxSelectors

__all__ = ["ConfigManager", "GlobalConfig", "HttpConfig", "IVooxConfig", "IVooxSelectors"]
