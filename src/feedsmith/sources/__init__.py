"""Site-specific channel sources."""

from collections.abc import Callable

import httpx

from feedsmith.config.schema import GlobalConfig
from feedsmith.sources.base import SourceChannel, build_channel, generate_feed
from feedsmith.sources.ivoox import IVooxSource
from feedsmith.utils.errors import UnknownSourceError

SourceFactory = Callable[[httpx.AsyncClient, GlobalConfig, bool, int], SourceChannel]


def _create_ivoox(
    client: httpx.AsyncClient, config: GlobalConfig, allow_partial: bool, max_concurrency: int
) -> SourceChannel:
    return IVooxSource(
        client,
        config=config.ivoox,
        max_concurrency=max_concurrency,
        allow_partial=allow_partial,
    )


SOURCES: dict[str, SourceFactory] = {
    IVooxSource.name: _create_ivoox,
}


def get_source(
    name: str,
    client: httpx.AsyncClient,
    config: GlobalConfig,
    allow_partial: bool | None = None,
    max_concurrency: int | None = None,
) -> SourceChannel:
    """Create the source registered under ``name``.

    Args:
        name: Source name (e.g. "ivoox")
        client: Shared HTTP client
        config: Global configuration
        allow_partial: Override config.allow_partial
        max_concurrency: Override config.http.max_concurrency

    Raises:
        UnknownSourceError: If no source has that name
    """
    factory = SOURCES.get(name)
    if factory is None:
        raise UnknownSourceError(
            f"Unknown source '{name}'. Available: {', '.join(sorted(SOURCES))}"
        )

    if allow_partial is None:
        allow_partial = config.allow_partial
    if max_concurrency is None:
        max_concurrency = config.http.max_concurrency

    return factory(client, config, allow_partial, max_concurrency)


__all__ = [
    "SOURCES",
    "SourceChannel",
    "IVooxSource",
    "build_channel",
    "generate_feed",
    "get_source",
]
