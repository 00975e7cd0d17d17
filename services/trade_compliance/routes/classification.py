"""
Export-Control Classification API Endpoints.

Looks a product up in the EU Dual-Use Regulation by HS code and/or
product name.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Request, status

from services.trade_compliance.dependencies import (
    get_regulation_cache,
    get_regulation_settings,
)
from services.trade_compliance.models import ClassificationResponse
from services.trade_compliance.regulation.cache import RegulationCache
from services.trade_compliance.regulation.search import classify_product
from services.trade_compliance.routes.common import (
    read_json_object,
    string_field,
    utc_timestamp,
)
from shared.config.settings import RegulationSettings
from shared.logging import get_logger


logger = get_logger(__name__)

router = APIRouter(prefix="/classification", tags=["classification"])


@router.post(
    "/classify",
    response_model=ClassificationResponse,
    status_code=status.HTTP_200_OK,
    summary="Classify a product under the EU Dual-Use Regulation",
    description="Request body: `{product?: string, hs_code?: string}`; "
                "at least one is required.",
)
async def classify(
    request: Request,
    cache: RegulationCache = Depends(get_regulation_cache),
    regulation: RegulationSettings = Depends(get_regulation_settings),
) -> ClassificationResponse:
    """
    Classify a product.

    An HS code match means the item is listed (Restricted); a product
    name match is weaker evidence (Conditional); no match is Permitted.
    """
    body = await read_json_object(request)
    product = string_field(body, "product")
    hs_code = string_field(body, "hs_code")

    if not product and not hs_code:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Either product name or HS code is required.",
        )

    try:
        text = await cache.get()
    except Exception as e:
        logger.error(
            "product_classification_failed",
            error=str(e),
            error_type=type(e).__name__,
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e) or "Internal server error during product classification.",
        ) from e

    verdict = classify_product(
        text,
        legal_citation=regulation.legal_citation,
        product=product,
        hs_code=hs_code,
    )

    logger.info(
        "product_classified",
        product=product,
        hs_code=hs_code,
        status=verdict.status.value,
    )

    return ClassificationResponse(
        product=product,
        hs_code=hs_code,
        **verdict.to_dict(),
        source_url=regulation.source_url,
        timestamp=utc_timestamp(),
    )
