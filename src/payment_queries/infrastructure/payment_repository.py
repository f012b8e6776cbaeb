from __future__ import annotations

import copy
from typing import TYPE_CHECKING

from payment_queries.application.ports import PaymentRepository

if TYPE_CHECKING:
    from collections.abc import Iterable

    from payment_queries.domain.entities import Payment
    from payment_queries.domain.value_objects import PaymentId


class InMemoryPaymentRepository(PaymentRepository):
    """In-memory payment repository.

    Implementation notes:
    - Uses dict with PaymentId as key (requires frozen dataclass)
    - find_all() keeps insertion order; re-saving a payment keeps its slot
    - Returns deep copies from get() and find_all() to mimic database detachment
    - Stores deep copies in save() to prevent external mutation
    - NOT thread-safe
    """

    def __init__(self, payments: Iterable[Payment] = ()) -> None:
        self._payments: dict[PaymentId, Payment] = {}
        for payment in payments:
            self.save(payment)

    def get(self, payment_id: PaymentId) -> Payment | None:
        payment = self._payments.get(payment_id)
        if payment is None:
            return None
        return copy.deepcopy(payment)

    def save(self, payment: Payment) -> None:
        self._payments[payment.id] = copy.deepcopy(payment)

    def find_all(self) -> list[Payment]:
        return copy.deepcopy(list(self._payments.values()))
