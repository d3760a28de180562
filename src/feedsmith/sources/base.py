"""Source interface and the feed-generation flow shared by all sites."""

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from feedsmith.feeds.models import Channel, ChannelMetadata, Episode

if TYPE_CHECKING:
    from feedsmith.feeds.writer import FeedWriter

logger = logging.getLogger(__name__)


class SourceChannel(ABC):
    """Scrapes one hosting site.

    A run goes locate -> fetch_metadata -> fetch_episodes; each step gets
    the previous step's output explicitly.
    """

    name: str = ""

    @abstractmethod
    async def locate(self, channel_name: str) -> str | None:
        """Find the canonical channel page URL for a human-entered name.

        Returns:
            Channel page URL, or None when the site has no match
        """

    @abstractmethod
    async def fetch_metadata(self, channel_url: str) -> ChannelMetadata:
        """Fetch the channel page and extract channel-level fields."""

    @abstractmethod
    async def fetch_episodes(self, page_html: str) -> list[Episode]:
        """Extract the episodes listed on an already-fetched channel page."""


async def build_channel(source: SourceChannel, channel_name: str) -> Channel | None:
    """Scrape a channel and its episodes.

    Args:
        source: Site implementation to scrape with
        channel_name: Name as typed by the user

    Returns:
        Complete Channel, or None if the channel could not be located
    """
    logger.debug(f"Getting channel {channel_name} url.")
    channel_url = await source.locate(channel_name)
    if channel_url is None:
        logger.warning(f"Channel url not found for {channel_name}.")
        return None

    logger.info(f"Channel url is {channel_url}.")
    metadata = await source.fetch_metadata(channel_url)
    episodes = await source.fetch_episodes(metadata.page_html)
    return Channel.from_parts(metadata, episodes)


async def generate_feed(
    source: SourceChannel,
    channel_name: str,
    writer: "FeedWriter",
) -> str | None:
    """Scrape a channel and render it as an RSS document.

    Returns:
        RSS XML, or None if the channel could not be located
    """
    logger.info("Creating rss feed.")
    channel = await build_channel(source, channel_name)
    if channel is None:
        return None
    return writer.render(channel)
