"""Entrypoints layer - How callers obtain a configured service.

There is no CLI or HTTP surface; the library is used in-process.
``build_payment_query_service`` is the single composition root.
"""

from payment_queries.entrypoints.bootstrap import build_payment_query_service

__all__ = [
    "build_payment_query_service",
]
