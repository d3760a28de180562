"""Data models for podcast channels and episodes."""

from collections.abc import Iterable
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class Episode(BaseModel):
    """A single episode scraped from its own page."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1)  # Numeric token taken from the episode URL
    title: str = ""
    url: str  # Episode page
    audio_url: str = Field(min_length=1)
    description: str = ""
    published: datetime  # Naive, local time
    image_url: str | None = None


class ChannelMetadata(BaseModel):
    """Channel-level fields scraped from the channel page.

    ``page_html`` keeps the fetched page so episodes can be listed from it
    without requesting the same URL twice.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    author: str = ""
    description: str = ""
    image_url: str | None = None
    site_url: str
    ttl_minutes: int = 60
    page_html: str = Field(default="", exclude=True, repr=False)


class Channel(BaseModel):
    """A podcast channel with its episodes in page listing order."""

    model_config = ConfigDict(frozen=True)

    name: str
    author: str = ""
    description: str = ""
    image_url: str | None = None
    site_url: str
    ttl_minutes: int = 60
    episodes: tuple[Episode, ...] = ()

    @classmethod
    def from_parts(cls, metadata: ChannelMetadata, episodes: Iterable[Episode]) -> "Channel":
        """Assemble a channel from its metadata and extracted episodes."""
        return cls(
            **metadata.model_dump(exclude={"page_html"}),
            episodes=tuple(episodes),
        )
