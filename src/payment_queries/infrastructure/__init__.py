"""Infrastructure layer - Concrete implementations of ports.

This layer contains:
- Persistence: In-memory payment repository
- Time Provider: Clock abstraction for testability
- Logging: structlog configuration

Infrastructure adapters implement the ports defined in the application layer.
"""

from payment_queries.infrastructure.logging import configure_logging
from payment_queries.infrastructure.payment_repository import InMemoryPaymentRepository
from payment_queries.infrastructure.time_provider import FixedTimeProvider, SystemTimeProvider

__all__ = [
    "FixedTimeProvider",
    "InMemoryPaymentRepository",
    "SystemTimeProvider",
    "configure_logging",
]
