"""HTTP transport helpers built on httpx."""

import logging

import httpx

from feedsmith.config.schema import HttpConfig
from feedsmith.utils.errors import (
    HTTPStatusError,
    NetworkConnectionError,
    NetworkTimeoutError,
)

logger = logging.getLogger(__name__)


def create_client(
    config: HttpConfig | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create the async client shared by all requests of one run.

    Args:
        config: HTTP settings (defaults to HttpConfig())
        transport: Optional transport override, used by tests

    Returns:
        Configured httpx.AsyncClient; the caller owns closing it
    """
    config = config or HttpConfig()
    headers = {"User-Agent": config.user_agent} if config.user_agent else None
    return httpx.AsyncClient(
        timeout=config.timeout_seconds,
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )


async def fetch_html(client: httpx.AsyncClient, url: str) -> str:
    """GET a page and return its body as text.

    Args:
        client: Client to send the request with
        url: Page URL

    Returns:
        Decoded response body

    Raises:
        NetworkTimeoutError: If the request timed out
        HTTPStatusError: If the server answered with a non-2xx status
        NetworkConnectionError: For any other transport failure
    """
    logger.debug(f"GET {url}")
    try:
        response = await client.get(url)
        response.raise_for_status()
    except httpx.TimeoutException as e:
        raise NetworkTimeoutError(f"Timed out fetching {url}") from e
    except httpx.HTTPStatusError as e:
        status = e.response.status_code
        raise HTTPStatusError(f"HTTP {status} fetching {url}", status_code=status, url=url) from e
    except httpx.HTTPError as e:
        raise NetworkConnectionError(f"Failed to fetch {url}: {e}") from e

    return response.text
