"""
Trade Compliance Service - Main Application
===========================================

FastAPI application for sanctions screening and export-control
classification.

Version: 0.1.0
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from datetime import timedelta
from typing import Any

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from services.trade_compliance.dependencies import get_opensanctions_settings
from services.trade_compliance.regulation.cache import RegulationCache
from services.trade_compliance.regulation.fetcher import RegulationFetcher
from services.trade_compliance.routes import classification_router, sanctions_router
from shared.config import settings
from shared.logging import bind_context, clear_context, get_logger, setup_logging
from shared.models.common import ErrorResponse, HealthResponse


# Setup logging
setup_logging(
    log_level=settings.log_level.value,
    json_logs=settings.is_production,
    service_name="trade-compliance",
)

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    logger.info(
        "trade_compliance_starting",
        environment=settings.environment.value,
        port=settings.port,
    )
    yield
    logger.info("trade_compliance_shutting_down")


# Create FastAPI application
app = FastAPI(
    title="Trade Compliance Service",
    description="Sanctions screening and EU dual-use export-control classification",
    version="0.1.0",
    lifespan=lifespan,
    docs_url="/docs" if settings.debug else None,
    redoc_url="/redoc" if settings.debug else None,
)

# One regulation cache for the lifetime of the process
app.state.regulation_cache = RegulationCache(
    fetch=RegulationFetcher(settings.regulation).fetch,
    max_age=timedelta(hours=settings.regulation.cache_ttl_hours),
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors.origins_list,
    allow_credentials=settings.cors.allow_credentials,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def request_context(request: Request, call_next: Any) -> Any:
    """Bind the request path to every log line emitted while handling it."""
    clear_context()
    bind_context(method=request.method, path=request.url.path)
    return await call_next(request)


# ============================================================================
# Health Check Endpoints
# ============================================================================


@app.get("/health", response_model=HealthResponse, tags=["Health"])
async def health_check(request: Request) -> HealthResponse:
    """
    Service health check.

    Reports whether the matching API key is configured and the state
    of the regulation cache. Never triggers a fetch.
    """
    cache: RegulationCache = request.app.state.regulation_cache
    age = cache.age()
    opensanctions_ready = get_opensanctions_settings().has_api_key

    components: dict[str, dict[str, Any]] = {
        "opensanctions": {
            "status": "healthy" if opensanctions_ready else "unconfigured",
            "configured": opensanctions_ready,
        },
        "regulation_cache": {
            "status": "healthy",
            "cached": age is not None,
            "fresh": cache.is_fresh(),
            "age_seconds": age.total_seconds() if age is not None else None,
        },
    }

    return HealthResponse(
        status="healthy" if opensanctions_ready else "degraded",
        service="trade-compliance",
        version="0.1.0",
        components=components,
    )


@app.get("/", tags=["Health"])
async def root() -> dict[str, str]:
    """Root endpoint."""
    return {
        "service": "Trade Compliance Service",
        "version": "0.1.0",
        "docs": "/docs",
    }


# ============================================================================
# Include Routers
# ============================================================================

app.include_router(sanctions_router, prefix="/api/v1")
app.include_router(classification_router, prefix="/api/v1")


# ============================================================================
# Error Handlers
# ============================================================================


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message, status_code=status_code).model_dump(),
    )


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    """Handle HTTP exceptions."""
    logger.warning(
        "http_exception",
        status_code=exc.status_code,
        detail=exc.detail,
        path=request.url.path,
    )
    return _error_response(exc.status_code, str(exc.detail))


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    """Render validation failures as client input errors."""
    logger.warning("request_validation_failed", errors=exc.errors(), path=request.url.path)
    return _error_response(status.HTTP_400_BAD_REQUEST, "Invalid request body.")


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions."""
    logger.error(
        "unhandled_exception",
        error=str(exc),
        error_type=type(exc).__name__,
        path=request.url.path,
    )
    return _error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        str(exc) or "Internal server error",
    )


# ============================================================================
# Run with Uvicorn
# ============================================================================

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "services.trade_compliance.main:app",
        host="0.0.0.0",
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level.value.lower(),
    )
