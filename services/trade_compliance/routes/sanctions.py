"""
Sanctions Screening API Endpoints.

Screens a buyer name against the OpenSanctions matching API and
annotates every candidate with a compliance signal.
"""

from __future__ import annotations

import httpx
from fastapi import APIRouter, Depends, HTTPException, Request, status

from services.trade_compliance.dependencies import (
    get_opensanctions_settings,
    get_opensanctions_transport,
)
from services.trade_compliance.models import SanctionsSearchResponse
from services.trade_compliance.routes.common import (
    read_json_object,
    string_field,
    utc_timestamp,
)
from services.trade_compliance.screening.client import (
    DEFAULT_SCHEMA,
    MatchQuery,
    OpenSanctionsClient,
    UpstreamServiceError,
    search_url,
)
from services.trade_compliance.screening.signals import enrich_results
from shared.config.settings import OpenSanctionsSettings
from shared.logging import get_logger


logger = get_logger(__name__)

router = APIRouter(prefix="/sanctions", tags=["sanctions"])


@router.post(
    "/search",
    response_model=SanctionsSearchResponse,
    status_code=status.HTTP_200_OK,
    summary="Screen a buyer against sanctions watch-lists",
    description="Request body: `{buyerName: string, schema?: string}`. "
                "Schema defaults to LegalEntity.",
)
async def search_sanctions(
    request: Request,
    opensanctions: OpenSanctionsSettings = Depends(get_opensanctions_settings),
    transport: httpx.AsyncBaseTransport | None = Depends(get_opensanctions_transport),
) -> SanctionsSearchResponse:
    """
    Screen a buyer name.

    1. Validate the body and the configured API key
    2. Query the matching API with a single named query
    3. Attach a compliance signal to each candidate
    """
    body = await read_json_object(request)
    buyer_name = string_field(body, "buyerName")
    schema = string_field(body, "schema") or DEFAULT_SCHEMA

    if not buyer_name:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Buyer name is required.",
        )

    if not opensanctions.has_api_key:
        logger.error("opensanctions_key_missing")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server configuration error: OPEN_SANCTIONS_KEY is missing.",
        )

    try:
        async with OpenSanctionsClient(opensanctions, transport=transport) as client:
            results = await client.match(MatchQuery(name=buyer_name, schema=schema))
    except UpstreamServiceError as e:
        raise HTTPException(
            status_code=e.status_code,
            detail=f"Failed to fetch data from OpenSanctions: {e.detail}",
        ) from e
    except (httpx.HTTPError, ValueError) as e:
        logger.error(
            "sanctions_search_failed",
            error=str(e),
            error_type=type(e).__name__,
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e) or "Internal server error.",
        ) from e

    return SanctionsSearchResponse(
        source_url=search_url(opensanctions, buyer_name),
        timestamp=utc_timestamp(),
        raw_results=enrich_results(results),
    )
