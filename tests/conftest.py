"""Shared fixtures: a fake iVoox site served through httpx.MockTransport."""

import asyncio

import httpx
import pytest

SEARCH_URL = "https://www.ivoox.com/la-rosa-de-los-vientos_sw_1_1.html"
CHANNEL_URL = "https://www.ivoox.com/podcast-la-rosa-de-los-vientos_sq_f1123_1.html"


def search_page(channel_href: str | None = CHANNEL_URL) -> str:
    """Search results page, optionally with one program result."""
    result = ""
    if channel_href is not None:
        result = f"""
        <div class="modulo-type-programa">
          <div class="header-modulo"><a href="{channel_href}">La Rosa de los Vientos</a></div>
        </div>"""
    return f"""<html><body>
      <div class="modulo-type-audio">
        <div class="header-modulo"><a href="/not-a-program_rf_1_1.html">Audio</a></div>
      </div>{result}
    </body></html>"""


def channel_page(
    episodes: list[tuple[str, str]],
    author: str | None = "Onda Cero",
    description: str | None = "Programa de misterio y ciencia.",
    image: str | None = "https://static-1.ivoox.com/canales/rosa.jpg",
) -> str:
    """Channel page listing ``(title, href)`` episode anchors."""
    author_html = (
        f'<div class="text-medium"><span><a href="/onda-cero">{author}</a></span></div>'
        if author is not None
        else ""
    )
    description_html = (
        f'<div class="d-none"><div class="text-truncate-3"> {description} </div></div>'
        if description is not None
        else ""
    )
    image_html = (
        f'<div class="image-wrapper pr-2"><img src="lazy.gif" data-lazy-src=" {image} "></div>'
        if image is not None
        else ""
    )
    anchors = "".join(
        f"""
        <div class="pl-1"><div class="d-flex"><div class="d-flex"><div class="w-100">
          <a href="{href}"> {title} </a>
        </div></div></div></div>"""
        for title, href in episodes
    )
    return f"""<html><body>
      <h1> La Rosa de los Vientos </h1>
      <div class="d-flex">{image_html}{author_html}{description_html}</div>
      <section>{anchors}</section>
    </body></html>"""


def episode_page(
    description: str | None = "Hablamos de ovnis.",
    date: str | None = "05/03/2021 · 10:00",
    image: str | None = "https://img.ivoox.com/proxy?url=https://cdn/img.jpg",
) -> str:
    """Episode page with optional description, date and artwork."""
    description_html = (
        f'<div class="mb-3"><div><p class="text-truncate-5"> {description} </p></div></div>'
        if description is not None
        else ""
    )
    date_html = f'<span class="text-medium ml-sm-1">{date}</span>' if date is not None else ""
    image_html = (
        f'<div class="d-flex"><div class="image-wrapper pr-2"><img data-lazy-src="{image}"></div></div>'
        if image is not None
        else ""
    )
    return f"<html><body>{image_html}{description_html}{date_html}</body></html>"


class FakeSite:
    """In-memory site answering GET requests by exact URL."""

    def __init__(self) -> None:
        self.pages: dict[str, str] = {}
        self.delays: dict[str, float] = {}
        self.failures: dict[str, int] = {}
        self.requested: list[str] = []
        self.completed: list[str] = []
        self.in_flight = 0
        self.max_in_flight = 0

    async def handle(self, request: httpx.Request) -> httpx.Response:
        url = str(request.url)
        self.requested.append(url)
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            await asyncio.sleep(self.delays.get(url, 0))
        finally:
            self.in_flight -= 1
        self.completed.append(url)

        if url in self.failures:
            return httpx.Response(self.failures[url])
        if url in self.pages:
            return httpx.Response(200, html=self.pages[url])
        return httpx.Response(404)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=self.transport)


@pytest.fixture
def site() -> FakeSite:
    """Empty fake site."""
    return FakeSite()


@pytest.fixture
def ivoox_site(site: FakeSite) -> FakeSite:
    """Fake site holding one channel with three episodes."""
    episodes = [
        ("Episodio A", "/episodio-a_rf_11111111_1.html"),
        ("Episodio B", "/episodio-b_rf_22222222_1.html"),
        ("Episodio C", "/episodio-c_rf_33333333_1.html"),
    ]
    site.pages[SEARCH_URL] = search_page()
    site.pages[CHANNEL_URL] = channel_page(episodes)
    for _, href in episodes:
        site.pages[f"https://ivoox.com{href}"] = episode_page()
    return site


@pytest.fixture
def sample_config_dict() -> dict:
    """Sample configuration dictionary."""
    return {
        "version": "1",
        "log_level": "INFO",
        "default_output_dir": "~/feeds",
        "default_source": "ivoox",
        "allow_partial": False,
        "http": {"timeout_seconds": 15, "max_concurrency": 4},
        "ivoox": {"ttl_minutes": 60},
    }
