"""
Logging Module
==============

Structured logging using structlog with JSON output for production
and colored console output for development.

Usage:
    from shared.logging import get_logger, setup_logging

    # Setup at application start
    setup_logging()

    # Get logger for a module
    logger = get_logger(__name__)

    # Log with context
    logger.info("regulation_cache_refreshed", size=len(text))
    logger.error("opensanctions_error", status_code=503, detail=detail)
"""

from shared.logging.logger import bind_context, clear_context, get_logger, setup_logging


__all__ = [
    "bind_context",
    "clear_context",
    "get_logger",
    "setup_logging",
]
