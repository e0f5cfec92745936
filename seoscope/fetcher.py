"""
Fetch a single web page with async httpx.

The result is a plain dict; failures are reported through the "error" key
instead of being raised.
"""

import logging

import httpx

from .config import DEFAULT_USER_AGENT

logger = logging.getLogger(__name__)

HEADERS = {
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.5",
}

TIMEOUT = 15.0


async def fetch_page(
    url: str,
    timeout: float = TIMEOUT,
    user_agent: str = DEFAULT_USER_AGENT,
    transport: httpx.AsyncBaseTransport | None = None,
) -> dict:
    """Fetch the page at `url`, following redirects."""
    result = {
        "url": url,
        "final_url": url,
        "status_code": None,
        "html": None,
        "error": None,
        "timed_out": False,
    }

    logger.debug("Fetching %s", url)
    async with httpx.AsyncClient(
        headers={**HEADERS, "User-Agent": user_agent},
        follow_redirects=True,
        timeout=timeout,
        transport=transport,
    ) as client:
        try:
            resp = await client.get(url)
        except httpx.TimeoutException as e:
            logger.warning("Timed out fetching %s: %s", url, e)
            result["error"] = f"Timed out after {timeout:g}s"
            result["timed_out"] = True
            return result
        except httpx.HTTPError as e:
            logger.warning("Failed to fetch %s: %s", url, e)
            result["error"] = str(e) or e.__class__.__name__
            return result

    result["final_url"] = str(resp.url)
    result["status_code"] = resp.status_code
    result["html"] = resp.text
    return result
