"""
Trade Compliance Models
=======================

Ratings and response bodies shared by the sanctions and
classification endpoints.

Version: 0.1.0
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class OverallRating(str, Enum):
    """Traffic-light rating shared by both compliance checks."""

    NO = "NO"  # red
    AMBER = "AMBER"
    GREEN = "GREEN"


class SanctionsSearchResponse(BaseModel):
    """Response from the sanctions screening endpoint."""

    source_url: str
    timestamp: str
    raw_results: list[dict[str, Any]] = Field(
        default_factory=list,
        description="Matching API candidates, each with a `compliance` block",
    )


class ClassificationResponse(BaseModel):
    """Response from the export-control classification endpoint."""

    product: str
    hs_code: str
    status: str
    overall: str
    snippet: str
    source_url: str
    timestamp: str
    legal_citation: str
