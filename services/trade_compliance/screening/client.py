"""
OpenSanctions Matching Client
=============================

Thin async client for the OpenSanctions `/match` endpoint.

API Documentation: https://api.opensanctions.org/

Version: 0.1.0
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
from urllib.parse import quote, urlencode

import httpx

from shared.config.settings import OpenSanctionsSettings
from shared.logging import get_logger


logger = get_logger(__name__)

DEFAULT_SCHEMA = "LegalEntity"
QUERY_KEY = "q1"


class UpstreamServiceError(Exception):
    """Non-success response from the matching API."""

    def __init__(self, status_code: int, detail: str) -> None:
        super().__init__(detail)
        self.status_code = status_code
        self.detail = detail


@dataclass(frozen=True)
class MatchQuery:
    """A single named entity query."""

    name: str
    schema: str = DEFAULT_SCHEMA

    def to_payload(self) -> dict[str, Any]:
        """Build the matching API request body."""
        return {
            "queries": {
                QUERY_KEY: {
                    "schema": self.schema,
                    "properties": {"name": [self.name]},
                },
            },
        }


def search_url(settings: OpenSanctionsSettings, name: str) -> str:
    """Public OpenSanctions search page for a buyer name."""
    query = urlencode({"q": name, "scope": settings.search_scope}, quote_via=quote)
    return f"{settings.search_url}?{query}"


def _error_detail(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        body = None
    detail = body.get("detail") if isinstance(body, dict) else None
    if isinstance(detail, str) and detail:
        return detail
    if isinstance(detail, list):
        messages = [
            d["msg"] for d in detail if isinstance(d, dict) and isinstance(d.get("msg"), str)
        ]
        if messages:
            return "; ".join(messages)
    return response.reason_phrase or f"HTTP {response.status_code}"


class OpenSanctionsClient:
    """
    Async client for entity matching.

    Example:
        >>> async with OpenSanctionsClient(settings) as client:
        ...     results = await client.match(MatchQuery(name="Test Corp"))
    """

    def __init__(
        self,
        settings: OpenSanctionsSettings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.settings = settings
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> OpenSanctionsClient:
        """Async context manager entry."""
        self._client = httpx.AsyncClient(
            timeout=httpx.Timeout(self.settings.timeout_seconds),
            transport=self._transport,
        )
        return self

    async def __aexit__(self, *args: Any) -> None:
        """Async context manager exit."""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def match(self, query: MatchQuery) -> list[dict[str, Any]]:
        """
        Run a match query and return the candidate records.

        Args:
            query: Entity name and schema to match

        Returns:
            Raw candidate records for the query slot

        Raises:
            UpstreamServiceError: If the API answers with a non-2xx status.
            httpx.HTTPError: On network failure.
            ValueError: If the response body is not valid JSON.
        """
        if not self._client:
            raise RuntimeError("Client not initialized. Use async context manager.")

        response = await self._client.post(
            self.settings.match_url,
            json=query.to_payload(),
            headers={
                "Authorization": f"Apikey {self.settings.api_key.get_secret_value()}",
                "Content-Type": "application/json",
            },
        )

        if not response.is_success:
            detail = _error_detail(response)
            logger.error(
                "opensanctions_error",
                status_code=response.status_code,
                detail=detail,
            )
            raise UpstreamServiceError(response.status_code, detail)

        data = response.json()
        responses = data.get("responses") if isinstance(data, dict) else None
        slot = responses.get(QUERY_KEY) if isinstance(responses, dict) else None
        results = slot.get("results") if isinstance(slot, dict) else None
        if not isinstance(results, list):
            results = []

        logger.info(
            "opensanctions_match",
            schema=query.schema,
            results=len(results),
        )

        return [r for r in results if isinstance(r, dict)]
