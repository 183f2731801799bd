"""Blocking HTTP fetcher."""

from __future__ import annotations

import logging
from typing import Optional

import httpx

from browser.config import settings
from browser.errors import FetchError
from browser.scraper.models import RawPage

logger = logging.getLogger(__name__)


def _make_client() -> httpx.Client:
    return httpx.Client(
        timeout=settings.request_timeout,
        follow_redirects=True,
    )


def fetch_url(url: str, client: Optional[httpx.Client] = None) -> RawPage:
    """Fetch *url* with a single GET and return a :class:`RawPage`.

    The whole body is buffered before returning.  The client is used as a
    context manager, so the connection is released whether the request
    succeeds or fails.

    Args:
        url: An already normalised ``http://`` or ``https://`` URL.
        client: Optional pre-built client (tests inject one with a mock
            transport).  It is closed on return either way.

    Raises:
        FetchError: On any transport failure or a 4xx/5xx status code.
    """
    logger.info("GET %s", url)
    try:
        with client or _make_client() as http:
            response = http.get(url)
            response.raise_for_status()
            html = response.text
            status_code = response.status_code
    except httpx.HTTPStatusError as exc:
        status = exc.response.status_code
        logger.warning("GET %s returned HTTP %d", url, status)
        raise FetchError(
            url,
            f"HTTP {status} {exc.response.reason_phrase} for {url}",
            status_code=status,
        ) from exc
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        logger.warning("GET %s failed: %s", url, exc)
        raise FetchError(url, str(exc) or type(exc).__name__) from exc

    logger.debug("GET %s -> %d (%d chars)", url, status_code, len(html))
    return RawPage(url=url, html=html, status_code=status_code)
