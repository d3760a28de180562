"""Custom exceptions for Feedsmith."""


class FeedsmithError(Exception):
    """Base exception for all Feedsmith errors."""

    pass


class ConfigError(FeedsmithError):
    """Configuration-related errors."""

    pass


class InvalidConfigError(ConfigError):
    """Invalid configuration data."""

    pass


class FeedError(FeedsmithError):
    """Feed generation errors."""

    pass


class UnknownSourceError(FeedError):
    """No source is registered under the requested name."""

    pass


class FeedRenderError(FeedError):
    """Channel data could not be rendered as a feed."""

    pass


class FeedParseError(FeedError):
    """Page content could not be turned into feed data."""

    pass


class MissingFieldError(FeedParseError):
    """A required field was not found on a page or URL."""

    def __init__(self, message: str, field: str, url: str | None = None) -> None:
        super().__init__(message)
        self.field = field
        self.url = url


class NetworkError(FeedsmithError):
    """Network-related errors."""

    pass


class NetworkConnectionError(NetworkError):
    """Connection failures."""

    pass


class NetworkTimeoutError(NetworkError):
    """Request timeout."""

    pass


class HTTPStatusError(NetworkError):
    """Server answered with a non-success status."""

    def __init__(self, message: str, status_code: int, url: str) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.url = url
