"""
Services
========

FastAPI applications built on the shared library.

Services:
- trade_compliance: sanctions screening and export-control classification
"""

__all__ = [
    "trade_compliance",
]
