from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from payment_queries.domain.entities import Payment


class PaymentRepository(ABC):
    """Port for reading payments.

    Contract:
    - find_all() returns every stored payment, in storage order
    - No pagination and no filtering pushed down; queries run in memory
    - Returned entities are copies; callers never mutate stored state
    """

    @abstractmethod
    def find_all(self) -> list[Payment]:
        """Return all payments.

        Returns:
            A new list on every call. Empty if nothing is stored.
        """
