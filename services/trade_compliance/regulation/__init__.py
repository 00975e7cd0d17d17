"""Export-control classification against the EU Dual-Use Regulation text."""

from services.trade_compliance.regulation.cache import (
    RegulationCache,
    RegulationCacheEntry,
)
from services.trade_compliance.regulation.fetcher import (
    RegulationFetcher,
    RegulationFetchError,
)
from services.trade_compliance.regulation.search import (
    NOT_FOUND_SNIPPET,
    ClassificationVerdict,
    RegulationStatus,
    classify_product,
    extract_snippet,
    hs_code_pattern,
)

__all__ = [
    "RegulationCache",
    "RegulationCacheEntry",
    "RegulationFetcher",
    "RegulationFetchError",
    "NOT_FOUND_SNIPPET",
    "ClassificationVerdict",
    "RegulationStatus",
    "classify_product",
    "extract_snippet",
    "hs_code_pattern",
]
