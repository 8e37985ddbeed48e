"""Single-request retrieval of source listing pages."""

from __future__ import annotations

import logging

import httpx

from ..errors import FetchError

logger = logging.getLogger(__name__)


class PageFetcher:
    """Fetch raw markup for one URL with a browser-like identity."""

    def __init__(self, http_client: httpx.AsyncClient, *, user_agent: str):
        self._client = http_client
        self._user_agent = user_agent

    async def fetch(self, url: str, *, timeout: float) -> str:
        """Return the response body for ``url`` or raise :class:`FetchError`.

        Retries are deliberately absent here; the aggregator decides how a
        failed page affects the run.
        """

        try:
            response = await self._client.get(
                url,
                headers={"User-Agent": self._user_agent},
                timeout=timeout,
                follow_redirects=True,
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            logger.warning(
                "Source page %s returned HTTP %s", url, exc.response.status_code
            )
            raise FetchError(url, f"HTTP {exc.response.status_code}") from exc
        except httpx.HTTPError as exc:
            logger.warning(
                "Fetching %s failed (%s): %s", url, exc.__class__.__name__, exc
            )
            raise FetchError(url, exc) from exc
        return response.text
