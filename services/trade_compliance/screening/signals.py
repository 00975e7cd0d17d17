"""
Sanctions Compliance Signals
============================

Derives a risk classification for each candidate returned by the
OpenSanctions matching API.

Topics on a candidate are mapped to display tags; any critical tag
blocks the buyer outright, any other tag makes the deal conditional,
and a candidate with no mapped topics is clear.

Version: 0.1.0
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any

from services.trade_compliance.models import OverallRating


class SignalStatus(str, Enum):
    """Whether the buyer is flagged."""

    YES = "YES"
    NO = "NO"
    YES_IF = "YES IF"


# OpenSanctions topic codes -> display tags
TOPIC_TAGS: Mapping[str, str] = MappingProxyType(
    {
        "sanction": "Sanctioned entity",
        "export.control": "Export controlled",
        "debarment": "Debarred entity",
        "sanction-linked": "Sanction-linked entity",
        "terrorism": "Terrorism",
        "trade.risk": "Trade risk",
    }
)

# Tags that force an overall NO on their own
CRITICAL_TAGS: frozenset[str] = frozenset(
    {
        "Sanctioned entity",
        "Debarred entity",
        "Terrorism",
        "Trade risk",
    }
)


@dataclass(frozen=True)
class ComplianceSignal:
    """Compliance block attached to a single match candidate."""

    status: SignalStatus
    overall: OverallRating
    matched_tags: list[str] = field(default_factory=list)
    locales: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Serialize for the JSON response."""
        return {
            "status": self.status.value,
            "overall": self.overall.value,
            "matched_tags": list(self.matched_tags),
            "locales": list(self.locales),
        }


def _string_values(value: Any) -> list[str]:
    if not isinstance(value, list):
        return []
    return [v for v in value if isinstance(v, str)]


def match_tags(
    topics: Iterable[str],
    topic_tags: Mapping[str, str] = TOPIC_TAGS,
) -> list[str]:
    """Map topics to display tags, deduplicated in first-seen order."""
    tags: list[str] = []
    for topic in topics:
        tag = topic_tags.get(topic)
        if tag and tag not in tags:
            tags.append(tag)
    return tags


def normalize_locales(countries: Iterable[str]) -> list[str]:
    """Uppercase, deduplicate and sort country codes."""
    return sorted({code.upper() for code in countries})


def derive_verdict(
    tags: Iterable[str],
    critical_tags: frozenset[str] = CRITICAL_TAGS,
) -> tuple[SignalStatus, OverallRating]:
    """Critical tags win over any other tag; no tags means clear."""
    tags = list(tags)
    if any(tag in critical_tags for tag in tags):
        return SignalStatus.YES, OverallRating.NO
    if tags:
        return SignalStatus.YES_IF, OverallRating.AMBER
    return SignalStatus.NO, OverallRating.GREEN


def classify_result(
    result: Mapping[str, Any],
    topic_tags: Mapping[str, str] = TOPIC_TAGS,
    critical_tags: frozenset[str] = CRITICAL_TAGS,
) -> ComplianceSignal:
    """
    Compute the compliance signal for one match candidate.

    Args:
        result: Raw candidate record from the matching API
        topic_tags: Topic code to display tag table
        critical_tags: Display tags that force an overall NO

    Returns:
        ComplianceSignal for the candidate
    """
    properties = result.get("properties")
    if not isinstance(properties, Mapping):
        properties = {}

    tags = match_tags(_string_values(properties.get("topics")), topic_tags)
    locales = normalize_locales(_string_values(properties.get("country")))
    status, overall = derive_verdict(tags, critical_tags)

    return ComplianceSignal(
        status=status,
        overall=overall,
        matched_tags=tags,
        locales=locales,
    )


def enrich_results(results: list[dict[str, Any]]) -> list[dict[str, Any]]:
    """Attach a `compliance` block to every candidate in place."""
    for result in results:
        result["compliance"] = classify_result(result).to_dict()
    return results
