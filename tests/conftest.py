"""Shared pytest fixtures for the test suite."""

from collections.abc import Callable, Iterator, Sequence
from datetime import datetime
from decimal import Decimal
from zoneinfo import ZoneInfo

import pytest
import structlog

from payment_queries.domain.entities import Payment, PaymentItem, User
from payment_queries.domain.value_objects import PaymentId
from payment_queries.infrastructure.time_provider import FixedTimeProvider

WARSAW = ZoneInfo("Europe/Warsaw")

PaymentFactory = Callable[..., Payment]


def item(name: str, regular_price: str, final_price: str | None = None) -> PaymentItem:
    """Build a PaymentItem from string prices; final defaults to regular."""
    return PaymentItem(
        name=name,
        regular_price=Decimal(regular_price),
        final_price=Decimal(final_price if final_price is not None else regular_price),
    )


@pytest.fixture(autouse=True)
def reset_structlog() -> Iterator[None]:
    """Undo logging configuration done by a test."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def make_item() -> Callable[..., PaymentItem]:
    return item


@pytest.fixture
def fixed_time() -> datetime:
    """A fixed timestamp for deterministic testing."""
    return datetime(2024, 1, 15, 12, 0, 0, tzinfo=WARSAW)


@pytest.fixture
def time_provider(fixed_time: datetime) -> FixedTimeProvider:
    """A time provider with a fixed timestamp."""
    return FixedTimeProvider(fixed_time)


@pytest.fixture
def user() -> User:
    return User(email="jan.kowalski@example.com", first_name="Jan", last_name="Kowalski")


@pytest.fixture
def make_payment(user: User) -> PaymentFactory:
    """Factory for payments with a fresh id; user defaults to the shared user."""

    def _make(
        payment_date: datetime,
        items: Sequence[PaymentItem] = (),
        *,
        buyer: User | None = None,
        payment_id: PaymentId | None = None,
    ) -> Payment:
        return Payment(
            id=payment_id or PaymentId.generate(),
            payment_date=payment_date,
            user=buyer or user,
            payment_items=tuple(items),
        )

    return _make
