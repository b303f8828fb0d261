"""HTTP fetcher for the RGF policy page."""

from __future__ import annotations

import logging
from typing import Optional

import httpx

from policy_backend.config import settings
from policy_backend.errors import NetworkError
from policy_backend.scraper.models import RawPage

logger = logging.getLogger(__name__)


def fetch_page(url: Optional[str] = None) -> RawPage:
    """Fetch *url* (the configured target page by default) and return a :class:`RawPage`.

    A single attempt is made with the configured timeout and desktop
    user agent.  Nothing is cached: every call hits the network.

    Raises:
        NetworkError: On timeout, transport failure or a 4xx/5xx status.
    """
    url = url or settings.target_url
    logger.debug("Fetching %s (timeout=%ss)", url, settings.request_timeout)

    try:
        with httpx.Client(
            headers={"User-Agent": settings.user_agent},
            timeout=settings.request_timeout,
            follow_redirects=True,
        ) as client:
            response = client.get(url)
            response.raise_for_status()
    except httpx.TimeoutException as exc:
        logger.warning("Timed out fetching %s", url)
        raise NetworkError(
            f"Request to {url} timed out after {settings.request_timeout:g}s"
        ) from exc
    except httpx.HTTPStatusError as exc:
        logger.warning("HTTP %s fetching %s", exc.response.status_code, url)
        raise NetworkError(
            f"Request to {url} failed with status {exc.response.status_code}"
        ) from exc
    except httpx.HTTPError as exc:
        logger.warning("Transport error fetching %s: %s", url, exc)
        raise NetworkError(f"Request to {url} failed: {exc}") from exc

    return RawPage(url=url, html=response.text, status_code=response.status_code)
