"""Payment and PaymentItem entities.

Both are immutable records; the query service only reads them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datetime import datetime

    from payment_queries.domain.entities.user import User
    from payment_queries.domain.value_objects.payment_id import PaymentId


@dataclass(frozen=True, slots=True)
class PaymentItem:
    """A single purchased product line.

    ``final_price`` is the price after discount. By convention it is not
    greater than ``regular_price``, but this is not enforced.
    """

    name: str
    regular_price: Decimal
    final_price: Decimal

    @property
    def discount(self) -> Decimal:
        return self.regular_price - self.final_price


@dataclass(frozen=True, slots=True)
class Payment:
    """Purchase record with a timestamp, a buyer and its line items.

    Identity is the PaymentId: two Payment instances with the same id are
    equal and hash alike regardless of their other fields, so sets of
    payments de-duplicate by record.

    ``payment_date`` must be timezone-aware. Month membership is decided on
    the payment's own wall clock (see YearMonth.from_datetime).
    """

    id: PaymentId
    payment_date: datetime = field(compare=False)
    user: User = field(compare=False)
    payment_items: tuple[PaymentItem, ...] = field(default=(), compare=False)

    def __post_init__(self) -> None:
        # Accept any iterable (lists from callers) but store a tuple
        if not isinstance(self.payment_items, tuple):
            object.__setattr__(self, "payment_items", tuple(self.payment_items))

    @property
    def item_count(self) -> int:
        return len(self.payment_items)

    @property
    def total(self) -> Decimal:
        """Sum of the final prices of all items; Decimal(0) with no items."""
        return sum((item.final_price for item in self.payment_items), Decimal(0))
