"""Trade compliance API routes."""

from services.trade_compliance.routes.classification import router as classification_router
from services.trade_compliance.routes.sanctions import router as sanctions_router

__all__ = [
    "classification_router",
    "sanctions_router",
]
