"""
Regulation Fetcher
==================

Retrieves the consolidated EU Dual-Use Regulation text from EUR-Lex.

Version: 0.1.0
"""

from __future__ import annotations

import httpx

from shared.config.settings import RegulationSettings
from shared.logging import get_logger


logger = get_logger(__name__)


class RegulationFetchError(Exception):
    """The regulation document could not be retrieved."""


class RegulationFetcher:
    """
    Fetches the regulation document as raw text.

    One request per call, no retries. Callers own caching.
    """

    def __init__(
        self,
        settings: RegulationSettings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.settings = settings
        self._transport = transport

    @property
    def source_url(self) -> str:
        return self.settings.source_url

    async def fetch(self) -> str:
        """
        Download the regulation document.

        Returns:
            Full document text

        Raises:
            RegulationFetchError: If EUR-Lex answers with a non-2xx status.
            httpx.HTTPError: On network failure.
        """
        logger.info("regulation_fetch_started", url=self.source_url)

        async with httpx.AsyncClient(
            timeout=httpx.Timeout(self.settings.timeout_seconds),
            headers={
                "User-Agent": self.settings.user_agent,
                "Accept": "text/html, text/plain",
            },
            follow_redirects=True,
            transport=self._transport,
        ) as client:
            response = await client.get(self.source_url)

        if not response.is_success:
            raise RegulationFetchError(
                f"Failed to fetch EU Regulation: {response.status_code} {response.reason_phrase}"
            )

        logger.info("regulation_fetched", size=len(response.text))
        return response.text
