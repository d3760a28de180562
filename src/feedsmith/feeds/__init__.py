"""Feed models and RSS rendering for Feedsmith."""

from feedsmith.feeds.models import Channel, ChannelMetadata, Episode
from feedsmith.feeds.writer import FeedWriter

__all__ = ["Channel", "ChannelMetadata", "Episode", "FeedWriter"]
