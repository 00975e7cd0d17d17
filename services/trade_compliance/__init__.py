"""
Trade Compliance Service.

Enriches buyer and product lookups with compliance signals:

- Sanctions screening via the OpenSanctions matching API, with a
  derived risk classification per candidate
- Export-control classification by searching a cached copy of the
  EU Dual-Use Regulation (EU) 2021/821
"""
