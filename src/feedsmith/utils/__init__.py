"""Utility functions and helpers for Feedsmith."""

from feedsmith.utils.errors import (
    ConfigError,
    FeedError,
    FeedParseError,
    FeedRenderError,
    FeedsmithError,
    HTTPStatusError,
    InvalidConfigError,
    MissingFieldError,
    NetworkConnectionError,
    NetworkError,
    NetworkTimeoutError,
    UnknownSourceError,
)
from feedsmith.utils.paths import get_config_dir

__all__ = [
    # Errors
    "FeedsmithError",
    "ConfigError",
    "InvalidConfigError",
    "FeedError",
    "UnknownSourceError",
    "FeedParseError",
    "FeedRenderError",
    "MissingFieldError",
    "NetworkError",
    "NetworkConnectionError",
    "NetworkTimeoutError",
    "HTTPStatusError",
    # Paths
    "get_config_dir",
]
