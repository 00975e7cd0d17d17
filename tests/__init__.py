"""
Trade Compliance Test Suite
===========================

Test organization:
- tests/unit/                       - Configuration and logging helpers
- tests/services/trade_compliance/  - Classification, cache, client and routes

Run tests:
    pytest                          # All tests
    pytest tests/unit               # Unit tests only
"""
