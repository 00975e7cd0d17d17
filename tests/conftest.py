"""
Test Configuration
==================

Pytest fixtures for trade compliance tests.
"""

import os
from collections.abc import AsyncGenerator, Callable
from datetime import UTC, datetime, timedelta
from typing import Any

import httpx
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

# Set test environment
os.environ["ENVIRONMENT"] = "testing"


REGULATION_TEXT = """<html>
<body>
<p>ANNEX I  List of dual-use items referred to in Article 3</p>
<p>2B001   Machine tools and any combination thereof, for removing
   or cutting metals, ceramics or "composites".</p>
<p>3B001   Equipment for the manufacturing of semiconductor devices
   or materials, classified under heading 848690 of the Harmonised System.</p>
<p>1C202   Alloys of aluminium having an ultimate tensile strength
   capable of 460 MPa or more at 293 K.</p>
</body>
</html>
"""


class FakeClock:
    """Manually advanced UTC clock."""

    def __init__(self, start: datetime | None = None) -> None:
        self.now = start or datetime(2024, 11, 8, 12, 0, tzinfo=UTC)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: float) -> None:
        self.now += timedelta(**kwargs)


class CountingFetch:
    """Async fetch stand-in that records how often it was called."""

    def __init__(self, content: str = REGULATION_TEXT) -> None:
        self.content = content
        self.calls = 0
        self.error: Exception | None = None

    async def __call__(self) -> str:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.content


@pytest.fixture
def regulation_text() -> str:
    return REGULATION_TEXT


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def counting_fetch() -> CountingFetch:
    return CountingFetch()


@pytest.fixture
def sample_match_results() -> list[dict[str, Any]]:
    """Candidates shaped like OpenSanctions match results."""
    return [
        {
            "id": "NK-sanctioned",
            "caption": "Test Corp Trading LLC",
            "schema": "Company",
            "score": 0.92,
            "properties": {
                "name": ["Test Corp Trading LLC"],
                "topics": ["sanction", "debarment", "sanction"],
                "country": ["ru", "by", "RU"],
            },
        },
        {
            "id": "NK-linked",
            "caption": "Test Corp Holdings",
            "schema": "Company",
            "score": 0.81,
            "properties": {
                "name": ["Test Corp Holdings"],
                "topics": ["sanction-linked", "export.control"],
                "country": ["cy"],
            },
        },
        {
            "id": "NK-poi",
            "caption": "Test Corp",
            "schema": "LegalEntity",
            "score": 0.7,
            "properties": {
                "name": ["Test Corp"],
                "topics": ["poi"],
            },
        },
    ]


@pytest.fixture
def opensanctions_handler(
    sample_match_results: list[dict[str, Any]],
) -> Callable[[httpx.Request], httpx.Response]:
    """Mock matching API that answers every query with the sample results."""

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            200,
            json={"responses": {"q1": {"results": sample_match_results}}},
        )

    return handler


@pytest_asyncio.fixture
async def trade_compliance_client() -> AsyncGenerator[AsyncClient, None]:
    """Create test client for the Trade Compliance Service."""
    from services.trade_compliance.main import app

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client

    app.dependency_overrides.clear()
