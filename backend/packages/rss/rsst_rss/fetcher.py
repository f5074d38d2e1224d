"""
Feed fetching.

Downloads feed bodies for the on-disk cache. Feeds are fetched one at a
time; callers may share a single client across requests.
"""

import httpx

from rsst_core import get_logger

logger = get_logger(__name__)

DEFAULT_USER_AGENT = "rsst/0.1"


class FeedFetchError(ValueError):
    """A feed could not be downloaded."""


def create_client(timeout: float = 30, user_agent: str = DEFAULT_USER_AGENT) -> httpx.Client:
    """
    Create an HTTP client suited to feed downloads.

    Args:
        timeout: Request timeout in seconds.
        user_agent: User-Agent header value.

    Returns:
        Client following redirects; the caller closes it.
    """
    return httpx.Client(timeout=timeout, follow_redirects=True, headers={"User-Agent": user_agent})


def fetch_feed(url: str, client: httpx.Client | None = None, timeout: float = 30) -> bytes:
    """
    Fetch feed content.

    Args:
        url: Feed URL.
        client: Optional shared client; a short-lived one is created otherwise.
        timeout: Request timeout in seconds when no client is given.

    Returns:
        Raw response body. It is not decoded here; the XML declaration,
        not the HTTP charset, decides how a feed is read.

    Raises:
        FeedFetchError: If the request fails or returns an error status.
    """
    if client is None:
        with create_client(timeout=timeout) as own_client:
            return fetch_feed(url, own_client)

    logger.debug("Fetching feed", extra={"url": url})
    try:
        response = client.get(url)
        response.raise_for_status()
    except httpx.HTTPError as e:
        raise FeedFetchError(f"Failed to fetch feed {url}: {e}") from e

    if not response.content:
        raise FeedFetchError(f"Empty response from {url}")
    logger.debug("Fetched feed", extra={"url": url, "bytes": len(response.content)})
    return response.content
