"""iVoox channel scraper.

Every field is read through the CSS selectors in IVooxSelectors. They match
the site's current markup exactly and will silently return nothing once the
markup changes, so optional fields degrade to empty values instead of
failing the run.
"""

import asyncio
import logging
import re
from urllib.parse import urljoin

import httpx
from bs4 import BeautifulSoup

from feedsmith.config.schema import IVooxConfig
from feedsmith.feeds.models import ChannelMetadata, Episode
from feedsmith.sources.base import SourceChannel
from feedsmith.utils.dates import parse_published
from feedsmith.utils.errors import FeedsmithError, MissingFieldError
from feedsmith.utils.http import fetch_html
from feedsmith.utils.text import strip_xml_invalid

logger = logging.getLogger(__name__)

EPISODE_ID_PATTERN = re.compile(r"\d{6,12}")


def normalize_channel_name(channel_name: str) -> str:
    """Turn a channel name into the slug used by the site search."""
    return channel_name.strip().lower().replace(" ", "-")


def extract_episode_id(url: str) -> str:
    """Return the first run of 6-12 digits in an episode URL.

    Raises:
        MissingFieldError: If the URL holds no such run
    """
    match = EPISODE_ID_PATTERN.search(url)
    if match is None:
        raise MissingFieldError(f"No episode id in {url}", field="id", url=url)
    return match.group(0)


def unwrap_image_url(value: str | None) -> str | None:
    """Strip a proxy prefix such as ``.../proxy?url=<real url>``."""
    if not value:
        return None
    value = value.strip()
    if "url=" in value:
        value = value.split("url=")[1]
    return value or None


def _text(soup: BeautifulSoup, selector: str) -> str:
    element = soup.select_one(selector)
    if element is None:
        return ""
    return strip_xml_invalid(element.get_text()).strip()


def _attr(soup: BeautifulSoup, selector: str, attribute: str) -> str | None:
    element = soup.select_one(selector)
    if element is None:
        return None
    value = element.get(attribute)
    if not isinstance(value, str):
        return None
    return strip_xml_invalid(value).strip() or None


class IVooxSource(SourceChannel):
    """Scrapes channel and episode pages on ivoox.com."""

    name = "ivoox"

    def __init__(
        self,
        client: httpx.AsyncClient,
        config: IVooxConfig | None = None,
        max_concurrency: int = 10,
        allow_partial: bool = False,
    ) -> None:
        """Initialize the source.

        Args:
            client: HTTP client used for every request
            config: Site settings and selectors (defaults to IVooxConfig())
            max_concurrency: Episode pages fetched at once; 0 means no limit
            allow_partial: Drop failed episodes instead of failing the batch
        """
        self.client = client
        self.config = config or IVooxConfig()
        self.selectors = self.config.selectors
        self.max_concurrency = max_concurrency
        self.allow_partial = allow_partial

    def search_url(self, channel_name: str) -> str:
        """Build the site search URL for a channel name."""
        return self.config.search_url_template.format(slug=normalize_channel_name(channel_name))

    def audio_url(self, episode_id: str) -> str:
        """Build the playback URL for an episode id."""
        placeholder = self.config.audio_id_placeholder
        if len(episode_id) != len(placeholder):
            # The template is only known to work for 8-digit ids
            logger.warning(
                f"Episode id {episode_id} has {len(episode_id)} digits, "
                f"audio URL template expects {len(placeholder)}."
            )
        return self.config.audio_url_template.replace(placeholder, episode_id)

    async def locate(self, channel_name: str) -> str | None:
        logger.info(f'Searching for the program "{channel_name}"')
        search_url = self.search_url(channel_name)
        logger.info(f"Search url: {search_url}")
        body = await fetch_html(self.client, search_url)

        logger.debug("Looking for the program url.")
        soup = BeautifulSoup(body, "html.parser")
        href = _attr(soup, self.selectors.search_result, "href")
        program_url = urljoin(search_url, href) if href else None
        logger.debug(f"Program url: {program_url}.")
        return program_url

    async def fetch_metadata(self, channel_url: str) -> ChannelMetadata:
        logger.info(f"Configuring feed from {channel_url}")
        page_html = await fetch_html(self.client, channel_url)
        soup = BeautifulSoup(page_html, "html.parser")

        metadata = ChannelMetadata(
            name=_text(soup, self.selectors.channel_name),
            author=_text(soup, self.selectors.channel_author),
            description=_text(soup, self.selectors.channel_description),
            image_url=_attr(soup, self.selectors.channel_image, self.selectors.image_attribute),
            site_url=channel_url,
            ttl_minutes=self.config.ttl_minutes,
            page_html=page_html,
        )
        logger.info(f"Podcast image: {metadata.image_url}")
        return metadata

    def list_episode_links(self, page_html: str) -> list[tuple[str, str]]:
        """Return ``(title, absolute url)`` for each episode anchor, in page order."""
        soup = BeautifulSoup(page_html, "html.parser")
        links = []
        for anchor in soup.select(self.selectors.episode_link):
            href = anchor.get("href")
            if not href or not isinstance(href, str):
                continue
            title = strip_xml_invalid(anchor.get_text()).strip()
            links.append((title, urljoin(self.config.episode_origin, href)))
        return links

    async def fetch_episodes(self, page_html: str) -> list[Episode]:
        links = self.list_episode_links(page_html)
        logger.info(f"Found {len(links)} episodes.")

        semaphore = asyncio.Semaphore(self.max_concurrency) if self.max_concurrency else None

        async def fetch_with_limit(title: str, url: str) -> Episode:
            if semaphore is None:
                return await self.fetch_episode(title, url)
            async with semaphore:
                return await self.fetch_episode(title, url)

        tasks = [asyncio.ensure_future(fetch_with_limit(title, url)) for title, url in links]

        if self.allow_partial:
            results = await asyncio.gather(*tasks, return_exceptions=True)
            episodes = []
            for (title, url), result in zip(links, results):
                if isinstance(result, FeedsmithError):
                    logger.warning(f"Skipping episode {title} ({url}): {result}")
                    continue
                if isinstance(result, BaseException):
                    raise result
                episodes.append(result)
            return episodes

        # gather keeps input order; the first failure aborts the batch
        try:
            return list(await asyncio.gather(*tasks))
        except BaseException:
            for task in tasks:
                task.cancel()
            raise

    async def fetch_episode(self, title: str, url: str) -> Episode:
        """Fetch one episode page and build its Episode."""
        logger.debug(f"Retrieving info for chapter {title} ({url}).")
        episode_id = extract_episode_id(url)
        body = await fetch_html(self.client, url)
        soup = BeautifulSoup(body, "html.parser")

        return Episode(
            id=episode_id,
            title=strip_xml_invalid(title),
            url=url,
            audio_url=self.audio_url(episode_id),
            description=_text(soup, self.selectors.episode_description),
            published=parse_published(_text(soup, self.selectors.episode_date)),
            image_url=unwrap_image_url(
                _attr(soup, self.selectors.episode_image, self.selectors.image_attribute)
            ),
        )
