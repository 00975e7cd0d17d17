"""Sanctions screening against the OpenSanctions matching API."""

from services.trade_compliance.screening.client import (
    DEFAULT_SCHEMA,
    MatchQuery,
    OpenSanctionsClient,
    UpstreamServiceError,
    search_url,
)
from services.trade_compliance.screening.signals import (
    CRITICAL_TAGS,
    TOPIC_TAGS,
    ComplianceSignal,
    SignalStatus,
    classify_result,
    enrich_results,
)

__all__ = [
    "DEFAULT_SCHEMA",
    "MatchQuery",
    "OpenSanctionsClient",
    "UpstreamServiceError",
    "search_url",
    "CRITICAL_TAGS",
    "TOPIC_TAGS",
    "ComplianceSignal",
    "SignalStatus",
    "classify_result",
    "enrich_results",
]
