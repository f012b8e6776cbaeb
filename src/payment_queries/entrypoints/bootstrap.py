"""Composition root: wires adapters into the query service."""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from payment_queries.application.use_cases import PaymentQueryService
from payment_queries.config import get_settings
from payment_queries.infrastructure import (
    InMemoryPaymentRepository,
    SystemTimeProvider,
    configure_logging,
)

if TYPE_CHECKING:
    from payment_queries.application.ports import PaymentRepository, TimeProvider
    from payment_queries.config import Settings

logger = structlog.get_logger(__name__)


def build_payment_query_service(
    repository: PaymentRepository | None = None,
    time_provider: TimeProvider | None = None,
    settings: Settings | None = None,
) -> PaymentQueryService:
    """Build a PaymentQueryService with default adapters where none are given.

    Args:
        repository: Payment source. Defaults to an empty InMemoryPaymentRepository.
        time_provider: Clock. Defaults to SystemTimeProvider in ``settings.zone``.
        settings: Defaults to the cached environment settings.

    Returns:
        A ready-to-use PaymentQueryService. Logging is configured as a side effect.
    """
    settings = settings or get_settings()
    configure_logging(settings)

    if repository is None:
        repository = InMemoryPaymentRepository()
    if time_provider is None:
        time_provider = SystemTimeProvider(settings.zone)

    logger.info(
        "payment_query_service_built",
        repository=type(repository).__name__,
        time_provider=type(time_provider).__name__,
        timezone=settings.timezone,
    )
    return PaymentQueryService(payment_repository=repository, time_provider=time_provider)
