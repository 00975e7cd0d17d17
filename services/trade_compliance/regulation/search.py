"""
Regulation Text Search
======================

Flat keyword/code scan over the regulation document to decide whether
a product is listed as a dual-use item.

Search precedence (case-insensitive):
1. HS code as a whole token, periods optional -> Restricted / NO
2. Product name as a plain substring -> Conditional / AMBER
3. Otherwise -> Permitted / GREEN

Version: 0.1.0
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any

from services.trade_compliance.models import OverallRating


SNIPPET_BEFORE = 50
SNIPPET_AFTER = 150
NOT_FOUND_SNIPPET = "Not found in Annex I text."

_WHITESPACE = re.compile(r"\s+")


class RegulationStatus(str, Enum):
    """Export-control verdict for a product."""

    RESTRICTED = "Restricted"
    PERMITTED = "Permitted"
    CONDITIONAL = "Conditional"


@dataclass(frozen=True)
class ClassificationVerdict:
    """Result of searching the regulation text."""

    status: RegulationStatus
    overall: OverallRating
    snippet: str
    legal_citation: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "status": self.status.value,
            "overall": self.overall.value,
            "snippet": self.snippet,
            "legal_citation": self.legal_citation,
        }


def hs_code_pattern(hs_code: str) -> re.Pattern[str]:
    """
    Build a whole-token pattern for an HS code.

    Periods are optional between any two characters, so "8486.90"
    matches "848690" and "848690" matches "8486.90".

    Raises:
        ValueError: If the code has no characters other than periods.
    """
    chars = [c for c in hs_code.strip() if c != "."]
    if not chars:
        raise ValueError(f"HS code has no digits: {hs_code!r}")
    body = r"\.?".join(re.escape(c) for c in chars)
    return re.compile(rf"\b{body}\b", re.IGNORECASE)


def extract_snippet(text: str, start: int) -> str:
    """Context around a match start with whitespace runs collapsed."""
    window = text[max(0, start - SNIPPET_BEFORE) : start + SNIPPET_AFTER]
    return _WHITESPACE.sub(" ", window).strip()


def _has_code_chars(hs_code: str) -> bool:
    return bool(hs_code.replace(".", "").strip())


def classify_product(
    text: str,
    legal_citation: str,
    product: str = "",
    hs_code: str = "",
) -> ClassificationVerdict:
    """
    Decide a restriction verdict by searching the regulation text.

    Args:
        text: Full regulation document text
        legal_citation: Citation echoed in every verdict
        product: Product name (may be empty)
        hs_code: HS code (may be empty)

    Returns:
        ClassificationVerdict; the first matching rule wins
    """
    if hs_code and _has_code_chars(hs_code):
        match = hs_code_pattern(hs_code).search(text)
        if match:
            return ClassificationVerdict(
                status=RegulationStatus.RESTRICTED,
                overall=OverallRating.NO,
                snippet=extract_snippet(text, match.start()),
                legal_citation=legal_citation,
            )

    if product:
        match = re.search(re.escape(product), text, re.IGNORECASE)
        if match:
            return ClassificationVerdict(
                status=RegulationStatus.CONDITIONAL,
                overall=OverallRating.AMBER,
                snippet=extract_snippet(text, match.start()),
                legal_citation=legal_citation,
            )

    return ClassificationVerdict(
        status=RegulationStatus.PERMITTED,
        overall=OverallRating.GREEN,
        snippet=NOT_FOUND_SNIPPET,
        legal_citation=legal_citation,
    )
