"""RSS feed rendering and output using feedgen."""

import logging
import os
import tempfile
from pathlib import Path

from feedgen.feed import FeedGenerator

from feedsmith import __version__
from feedsmith.feeds.models import Channel, Episode
from feedsmith.utils.errors import FeedRenderError

logger = logging.getLogger(__name__)

AUDIO_MIME_TYPE = "audio/mpeg"

# feedgen's podcast extension refuses other image types
ITUNES_IMAGE_SUFFIXES = (".jpg", ".png")


def _itunes_image(url: str | None) -> str | None:
    if url and url.endswith(ITUNES_IMAGE_SUFFIXES):
        return url
    return None


class FeedWriter:
    """Render Channel objects as RSS 2.0 podcast feeds.

    Example:
        >>> writer = FeedWriter()
        >>> xml = writer.render(channel)
        >>> writer.write(channel, Path("feeds/my-podcast.xml"))
    """

    def __init__(self, pretty: bool = True, generator: str = "feedsmith") -> None:
        """Initialize the writer.

        Args:
            pretty: Indent the XML output
            generator: Value of the channel's <generator> element
        """
        self.pretty = pretty
        self.generator = generator

    def build(self, channel: Channel) -> FeedGenerator:
        """Build the feedgen document for a channel."""
        fg = FeedGenerator()
        fg.load_extension("podcast")

        fg.title(channel.name or channel.site_url)
        fg.link(href=channel.site_url, rel="alternate")
        # RSS requires a non-empty channel description
        fg.description(channel.description or channel.name or channel.site_url)
        fg.ttl(channel.ttl_minutes)
        fg.generator(self.generator, version=__version__)

        if channel.image_url:
            fg.image(url=channel.image_url, title=channel.name, link=channel.site_url)
        if channel.author:
            fg.podcast.itunes_author(channel.author)
        if channel.description:
            fg.podcast.itunes_summary(channel.description)
        itunes_image = _itunes_image(channel.image_url)
        if itunes_image:
            fg.podcast.itunes_image(itunes_image)

        for episode in channel.episodes:
            self._add_episode(fg, episode)

        return fg

    def _add_episode(self, fg: FeedGenerator, episode: Episode) -> None:
        # feedgen prepends by default, which would reverse the page order
        fe = fg.add_entry(order="append")
        fe.guid(episode.id, permalink=False)
        fe.title(episode.title or episode.id)
        fe.link(href=episode.url)
        if episode.description:
            fe.description(episode.description)
        # Naive datetimes are local time
        fe.pubDate(episode.published.astimezone())
        fe.enclosure(episode.audio_url, "0", AUDIO_MIME_TYPE)

        itunes_image = _itunes_image(episode.image_url)
        if itunes_image:
            fe.podcast.itunes_image(itunes_image)

    def render(self, channel: Channel) -> str:
        """Render a channel as RSS XML.

        Raises:
            FeedRenderError: If feedgen rejects the channel data
        """
        logger.debug(f"Rendering feed for {channel.name} with {len(channel.episodes)} episodes")
        try:
            return self.build(channel).rss_str(pretty=self.pretty).decode("utf-8")
        except ValueError as e:
            raise FeedRenderError(f"Could not render feed for {channel.name}: {e}") from e

    def write(self, channel: Channel, path: Path) -> Path:
        """Render a channel and write it to ``path`` atomically.

        Args:
            channel: Channel to render
            path: Destination file; parent directories are created

        Returns:
            The written path

        Raises:
            FeedRenderError: If feedgen rejects the channel data
            OSError: If the file cannot be written
        """
        path = path.expanduser()
        path.parent.mkdir(parents=True, exist_ok=True)
        content = self.render(channel)

        temp_fd, temp_path = tempfile.mkstemp(dir=path.parent, prefix=".tmp_", suffix=".xml")
        try:
            with open(temp_fd, "w", encoding="utf-8") as f:
                f.write(content)
                f.flush()
                os.fsync(f.fileno())
            Path(temp_path).replace(path)
        except Exception:
            Path(temp_path).unlink(missing_ok=True)
            raise

        logger.info(f"Feed written to {path}")
        return path
