"""
Request Dependencies
====================

FastAPI dependencies for the trade compliance routes. Tests replace
these through `app.dependency_overrides`.

Version: 0.1.0
"""

import httpx
from fastapi import Request

from services.trade_compliance.regulation.cache import RegulationCache
from shared.config.settings import OpenSanctionsSettings, RegulationSettings, get_settings


def get_opensanctions_settings() -> OpenSanctionsSettings:
    """Read the matching API settings (and key) at request time."""
    return OpenSanctionsSettings()


def get_opensanctions_transport() -> httpx.AsyncBaseTransport | None:
    """Outbound transport for the matching API; None uses the default."""
    return None


def get_regulation_settings() -> RegulationSettings:
    return get_settings().regulation


def get_regulation_cache(request: Request) -> RegulationCache:
    """The process-wide regulation cache owned by the application."""
    return request.app.state.regulation_cache
