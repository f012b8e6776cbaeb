"""Use cases - Application operations over the domain."""

from payment_queries.application.use_cases.payment_queries import PaymentQueryService

__all__ = [
    "PaymentQueryService",
]
